"""
html_parser/serializer.py — renderowanie zmodyfikowanego drzewa do pliku.

Formatter wykonuje obowiązkowe escapowanie (&, <, >) i zamienia znaki
z katalogu encji (entities.ENTITY_TABLE). Zawartość <script> i <style>
nie jest modyfikowana (bs4 pomija ją dla cdata_containing_tags).
"""

from __future__ import annotations

import pathlib

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from .entities import substitute_named_entities

OUTPUT_ENCODING = "utf-8"


def _substitute(text: str) -> str:
    return substitute_named_entities(EntitySubstitution.substitute_xml(text))


ENTITY_FORMATTER = HTMLFormatter(entity_substitution=_substitute)


def render(soup: BeautifulSoup) -> bytes:
    """Serializuje drzewo do bajtów UTF-8 z podstawieniem encji."""
    return soup.decode(formatter=ENTITY_FORMATTER).encode(OUTPUT_ENCODING)


def write_document(soup: BeautifulSoup, dest_root: pathlib.Path, rel_path: str) -> pathlib.Path:
    """
    Zapisuje dokument do `{dest_root}/{rel_path}`.

    Katalogi nadrzędne są tworzone w razie potrzeby; istniejący plik
    jest nadpisywany.
    """
    out_path = dest_root / rel_path
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(render(soup))
    return out_path
