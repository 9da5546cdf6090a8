"""
html_parser/paths.py — przepisywanie odnośników absolutnych względem korzenia.

Dla każdego elementu z atrybutem href lub src (tylko pierwszy z nich,
w kolejności atrybutów) wartość zaczynająca się od "/" traci wiodący
ukośnik, a opcjonalnie dostaje prefiks "../" * depth, gdzie:

    depth = liczba_segmentów(wartość[1:]) - 1 - source_depth

Domyślnie prefiks NIE jest doklejany (zachowanie zgodne z dotychczasowymi
docsetami); włącza go `prefixRootLinks: true` w dashing.json.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

_LINK_ATTRS = ("href", "src")


def _first_link_attr(node: Tag) -> str | None:
    for key in node.attrs:
        if key in _LINK_ATTRS:
            return key
    return None


def root_link_prefix(value: str, source_depth: int) -> str:
    """Prefiks "../" dla odnośnika `value` zaczynającego się od "/"."""
    depth = len(value[1:].split("/")) - 1 - source_depth
    return "../" * depth if depth > 0 else ""


def rewrite_root_link(value: str, source_depth: int = 0, apply_prefix: bool = False) -> str:
    if not value.startswith("/"):
        return value
    prefix = root_link_prefix(value, source_depth) if apply_prefix else ""
    return prefix + value[1:]


def rewrite_links(
    soup: BeautifulSoup,
    source_depth: int = 0,
    apply_prefix: bool = False,
) -> int:
    """
    Przepisuje odnośniki w całym drzewie (w miejscu).

    Returns:
        Liczba zmienionych atrybutów.
    """
    changed = 0
    for node in soup.find_all(True):
        key = _first_link_attr(node)
        if key is None:
            continue
        value = node[key]
        if not isinstance(value, str):
            continue
        new_value = rewrite_root_link(value, source_depth, apply_prefix)
        if new_value != value:
            node[key] = new_value
            changed += 1
    return changed
