"""
dashing — budowanie docsetów Dash z katalogu dokumentacji HTML.

Użycie:
  dashing <komenda> [opcje]

Komendy:
  build     Buduje {package}.docset z plików HTML.
  init      Tworzy szablon pliku konfiguracji dashing.json (alias: create).
  version   Wypisuje wersję.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from dashing._version import VERSION
from dashing.commands import build as cmd_build
from dashing.commands import init as cmd_init
from dashing.commands import version as cmd_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dashing",
        description="dashing — generowanie dokumentacji Dash z plików HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"dashing {VERSION}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_build.add_parser(subparsers)
    cmd_init.add_parser(subparsers)
    cmd_version.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
