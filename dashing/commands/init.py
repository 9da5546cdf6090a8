"""Komenda: dashing init — tworzy szablon pliku konfiguracji dashing.json."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich.console import Console
from rich.markup import escape

console = Console()

DEFAULT_CONFIG = "dashing.json"

TEMPLATE: dict[str, object] = {
    "name": "Dashing",
    "package": "dashing",
    "index": "index.html",
    "selectors": {
        "title": "Package",
        "dt a": "Command",
    },
    "ignore": ["ABOUT"],
    "icon32x32": "",
    "allowJS": False,
}


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.config)
    if path.exists() and not args.force:
        console.print(f"[red]Plik już istnieje:[/red] {escape(str(path))}  (użyj --force, aby nadpisać)")
        raise SystemExit(1)

    try:
        path.write_text(json.dumps(TEMPLATE, ensure_ascii=False, indent=4) + "\n", encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Nie można zapisać pliku konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(f"[green]Możesz teraz edytować[/green] {escape(str(path))}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "init",
        aliases=["create"],
        help="Tworzy szablon pliku konfiguracji dashing.json.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zapisuje przykładowy plik konfiguracji z selektorami "title" → Package
oraz "dt a" → Command.

Przykłady:
  dashing init
  dashing init -f mojadokumentacja.json
  dashing create --force
        """,
    )
    p.add_argument(
        "--config", "-f",
        default=DEFAULT_CONFIG,
        metavar="PLIK",
        help=f"Ścieżka do pliku konfiguracji (domyślnie: {DEFAULT_CONFIG}).",
    )
    p.add_argument(
        "--force",
        action="store_true",
        help="Nadpisz istniejący plik.",
    )
    p.set_defaults(func=run)
