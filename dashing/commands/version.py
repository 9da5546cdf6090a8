"""Komenda: dashing version — wypisuje wersję i kończy działanie."""

from __future__ import annotations

import argparse

from rich.console import Console

from dashing._version import VERSION

console = Console()


def run(args: argparse.Namespace) -> None:
    console.print(VERSION)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "version",
        help="Wypisuje wersję i kończy działanie.",
    )
    p.set_defaults(func=run)
