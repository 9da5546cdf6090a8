"""
html_parser/entities.py — katalog nazwanych encji HTML dla serializera.

Katalog to tablica encji HTML 4 (litery greckie, operatory matematyczne,
typografia, litery łacińskie z akcentami, waluty, symbole porównania)
ograniczona do znaków spoza ASCII. Znaki &, <, >, " są obsługiwane przez
obowiązkowe escapowanie znaczników i nie ma ich w tablicy.
"""

from __future__ import annotations

from html.entities import codepoint2name

# codepoint → "&nazwa;" (gotowe dla str.translate)
ENTITY_TABLE: dict[int, str] = {
    cp: f"&{name};"
    for cp, name in sorted(codepoint2name.items())
    if cp > 0x7F
}


def substitute_named_entities(text: str) -> str:
    """Zamienia znaki z katalogu na encje, np. "café — €" → "caf&eacute; &mdash; &euro;"."""
    return text.translate(ENTITY_TABLE)
