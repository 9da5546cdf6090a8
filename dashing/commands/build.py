"""Komenda: dashing build — buduje docset z katalogu dokumentacji HTML."""

from __future__ import annotations

import argparse
import pathlib
import sqlite3

import requests
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config_resolver import ConfigError, load_config
from data_model.documents import Reference
from docset import (
    BuildReport,
    build_documents,
    create_index,
    create_layout,
    docset_paths,
    install_icon,
    write_plist,
)
from html_parser.anchors import RunContext, StructuralError

console = Console()

DEFAULT_CONFIG = "dashing.json"


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(refs: list[Reference]) -> None:
    if not refs:
        console.print("[yellow]Brak referencji.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("TYP",   no_wrap=True, style="bold cyan")
    table.add_column("NAZWA", no_wrap=False, max_width=50)
    table.add_column("ŚCIEŻKA", no_wrap=True, style="dim")

    for ref in refs:
        table.add_row(escape(ref.type), escape(ref.name), escape(ref.href))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(refs)} referencji[/dim]\n")


def _print_summary(report: BuildReport) -> None:
    console.print(
        f"[green]Gotowe:[/green] {report.documents} plików HTML, "
        f"{report.copied} skopiowanych, "
        f"{report.inserted} wpisów w indeksie "
        f"({len(report.references)} dopasowań)."
    )
    if report.failures:
        console.print(f"[yellow]Pominięto {len(report.failures)} plik(ów) z powodu błędów:[/yellow]")
        for f in report.failures:
            console.print(f"  [dim]{escape(f.path)}[/dim]: {escape(f.error)}")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    config_path = pathlib.Path(args.config.strip() or DEFAULT_CONFIG)
    if not config_path.exists():
        console.print(
            f"[red]Brak pliku konfiguracji:[/red] {escape(str(config_path))}  (uruchom `dashing init`?)"
        )
        raise SystemExit(1)

    try:
        config = load_config(config_path)
    except OSError as e:
        console.print(f"[red]Nie można odczytać konfiguracji {escape(str(config_path))}:[/red] {escape(str(e))}")
        raise SystemExit(1)
    except ConfigError as e:
        console.print(f"[red]Nie rozumiem konfiguracji selektorów ({escape(str(config_path))}):[/red]")
        for issue in e.issues:
            console.print(f"  [bold]{issue.code}[/bold] {escape(issue.path)}: {escape(issue.message)}")
        raise SystemExit(2)

    source = pathlib.Path(args.source)
    if not source.is_dir():
        console.print(f"[red]Katalog źródłowy nie istnieje:[/red] {escape(str(source))}")
        raise SystemExit(1)

    paths = docset_paths(pathlib.Path(args.output), config.package)
    console.print(
        f"Buduję [bold]{escape(config.package)}[/bold] z plików w [bold]{escape(str(source))}[/bold] "
        f"→ [cyan]{escape(str(paths.root))}[/cyan] …"
    )

    create_layout(paths)
    write_plist(config, paths)

    if config.icon32x32:
        try:
            install_icon(config.icon32x32, paths.icon)
        except (OSError, requests.RequestException) as e:
            console.print(f"[yellow]Nie można dodać ikony {escape(config.icon32x32)}:[/yellow] {escape(str(e))}")

    try:
        conn = create_index(paths.index_db)
    except (sqlite3.Error, OSError) as e:
        console.print(f"[red]Nie można utworzyć bazy indeksu:[/red] {escape(str(e))}")
        raise SystemExit(1)

    ctx = RunContext(
        ignore=config.ignore,
        source_depth=config.source_depth,
        prefix_root_links=config.prefix_root_links,
    )

    try:
        report = build_documents(
            source,
            paths.documents,
            config.selectors,
            ctx,
            conn,
            skip_names=frozenset({config_path.name}),
            skip_dirs=[paths.root],
            console=console,
            verbose=args.verbose,
        )
    except StructuralError as e:
        console.print(f"[red]Przerwano budowanie (błąd struktury dokumentu):[/red] {escape(str(e))}")
        raise SystemExit(1)
    finally:
        conn.close()

    _print_summary(report)

    if args.show:
        _show_table(report.references)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Buduje {package}.docset z plików HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przechodzi katalog źródłowy, dopasowuje selektory z dashing.json do każdego
pliku HTML, wstawia kotwice i zapisuje wynik do {package}.docset.
Pozostałe pliki są kopiowane bez zmian; symbole trafiają do docSet.dsidx.

Przykłady:
  dashing build
  dashing build -s docs/html -f docs/dashing.json
  dashing build -s site -o dist --verbose --show
        """,
    )
    p.add_argument(
        "--source", "-s",
        default=".",
        metavar="KATALOG",
        help="Katalog z plikami HTML (domyślnie: bieżący).",
    )
    p.add_argument(
        "--config", "-f",
        default=DEFAULT_CONFIG,
        metavar="PLIK",
        help=f"Ścieżka do pliku konfiguracji (domyślnie: {DEFAULT_CONFIG}).",
    )
    p.add_argument(
        "--output", "-o",
        default=".",
        metavar="KATALOG",
        help="Katalog, w którym powstanie {package}.docset (domyślnie: bieżący).",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Wypisuj każdy odczytany plik i każde dopasowanie.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę referencji po zbudowaniu.",
    )
    p.set_defaults(func=run)
