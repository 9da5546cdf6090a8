"""
docset/walker.py — przejście katalogu źródłowego i budowanie zawartości docsetu.

Pliki HTML trafiają do silnika ekstrakcji (html_parser.engine), pozostałe
są kopiowane bez zmian. Błąd pojedynczego pliku jest raportowany, plik
pomijany, a przejście trwa dalej. Kolejność: w głąb, leksykograficznie.
"""

from __future__ import annotations

import pathlib
import shutil
import sqlite3
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bs4 import ParserRejectedMarkup
from rich.console import Console
from rich.markup import escape

from data_model.config import SelectorRule
from data_model.documents import Reference
from html_parser.anchors import RunContext
from html_parser.engine import process_file
from html_parser.parser import is_htmlish

from .index_store import insert_references

# Katalogi systemów kontroli wersji — nigdy nie trafiają do docsetu
_VCS_DIRS = frozenset({".git", ".svn", ".hg"})


@dataclass(slots=True)
class DocumentFailure:
    path: str
    error: str


@dataclass(slots=True)
class BuildReport:
    """
    Podsumowanie przejścia.

    - documents:  liczba przetworzonych plików HTML
    - copied:     liczba plików skopiowanych bez zmian
    - references: wszystkie referencje (przed deduplikacją w SQLite)
    - inserted:   liczba nowych wierszy w searchIndex
    - failures:   pliki pominięte z powodu błędu
    """

    documents: int = 0
    copied: int = 0
    references: list[Reference] = field(default_factory=list)
    inserted: int = 0
    failures: list[DocumentFailure] = field(default_factory=list)


def iter_source_files(
    source: pathlib.Path,
    skip_names: frozenset[str] = frozenset(),
    skip_dirs: Sequence[pathlib.Path] = (),
) -> Iterator[pathlib.Path]:
    """
    Zwraca pliki spod `source` w kolejności przejścia w głąb.

    Pomijane są: katalogi VCS, katalogi z `skip_dirs` (np. budowany docset)
    oraz pliki o nazwach z `skip_names` (np. dashing.json).
    """
    resolved_skips = {d.resolve() for d in skip_dirs}

    def walk(directory: pathlib.Path) -> Iterator[pathlib.Path]:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                if entry.name in _VCS_DIRS or entry.resolve() in resolved_skips:
                    continue
                yield from walk(entry)
            elif entry.name not in skip_names:
                yield entry

    yield from walk(source)


def _copy_file(src: pathlib.Path, dest: pathlib.Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest)


def build_documents(
    source: pathlib.Path,
    documents_dir: pathlib.Path,
    rules: Sequence[SelectorRule],
    ctx: RunContext,
    conn: sqlite3.Connection,
    *,
    skip_names: frozenset[str] = frozenset(),
    skip_dirs: Sequence[pathlib.Path] = (),
    console: Console | None = None,
    verbose: bool = False,
) -> BuildReport:
    """
    Buduje katalog Documents i wypełnia searchIndex.

    Args:
        source:        katalog z dokumentacją HTML
        documents_dir: {package}.docset/Contents/Resources/Documents
        rules:         znormalizowane reguły selektorów
        ctx:           stan przebiegu (jeden na całe budowanie)
        conn:          połączenie z docSet.dsidx (create_index)
        skip_names:    nazwy plików do pominięcia
        skip_dirs:     katalogi do pominięcia (np. wyjściowy docset)
        console:       konsola rich do raportowania
        verbose:       wypisuj każdy plik i każde dopasowanie
    """
    console = console or Console()
    report = BuildReport()

    for src in iter_source_files(source, skip_names, skip_dirs):
        rel_path = src.relative_to(source).as_posix()
        if verbose:
            console.print(f"[dim]Czytam {escape(rel_path)}[/dim]")

        if not is_htmlish(src):
            try:
                _copy_file(src, documents_dir / rel_path)
            except OSError as e:
                console.print(f"[yellow]Pomijam plik {escape(rel_path)}:[/yellow] {escape(str(e))}")
                report.failures.append(DocumentFailure(rel_path, str(e)))
                continue
            report.copied += 1
            continue

        try:
            refs = process_file(src, rel_path, documents_dir, rules, ctx)
        except (OSError, ParserRejectedMarkup) as e:
            console.print(f"[red]Błąd przetwarzania {escape(rel_path)}:[/red] {escape(str(e))}")
            report.failures.append(DocumentFailure(rel_path, str(e)))
            continue

        report.documents += 1
        if verbose:
            for ref in refs:
                console.print(
                    f"  Dopasowanie: '{escape(ref.name)}' typu [cyan]{escape(ref.type)}[/cyan]"
                    f" w {escape(ref.href)}"
                )

        report.references.extend(refs)
        report.inserted += insert_references(conn, refs)

    return report
