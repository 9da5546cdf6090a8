"""html_parser/parser.py — parsowanie pliku HTML do dokumentu i tekst węzłów."""

from __future__ import annotations

import pathlib

from bs4 import BeautifulSoup, Tag

from data_model.documents import Document

# Rozszerzenia plików traktowanych jako HTML
HTML_SUFFIXES = frozenset({".html", ".htm", ".xhtml", ".html5"})

_PARSER = "html.parser"


def is_htmlish(path: pathlib.Path | str) -> bool:
    return pathlib.PurePath(path).suffix.lower() in HTML_SUFFIXES


def parse_html(markup: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(markup, _PARSER)


def parse_document(src: pathlib.Path, rel_path: str) -> Document:
    """
    Wczytuje plik `src` i zwraca Document.

    `rel_path` to ścieżka względem katalogu źródłowego (separator "/");
    głębokość dokumentu to liczba katalogów w tej ścieżce.

    Raises:
        OSError gdy pliku nie da się odczytać.
        bs4.builder.ParserRejectedMarkup gdy parser odrzuci treść.
    """
    soup = parse_html(src.read_bytes())
    return Document(path=rel_path, depth=rel_path.count("/"), soup=soup)


def node_text(node: Tag) -> str:
    """Tekst potomnych węzłów tekstowych w kolejności dokumentu, bez białych znaków na brzegach."""
    return node.get_text().strip()
