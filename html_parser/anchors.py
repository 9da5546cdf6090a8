"""html_parser/anchors.py — kotwice fragmentów dla dopasowanych węzłów."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field
from urllib.parse import quote_plus

from bs4 import BeautifulSoup, Tag

AUTOLINK_CLASS = "dashingAutolink"
TOC_CLASS      = "dashAnchor"

# Docelowy format odnośnika TOC w Dash
_TOC_TARGET = "//apple_ref/cpp/{type}/{name}"


class StructuralError(RuntimeError):
    """Węzeł bez rodzica — nie da się wstawić przed nim kotwicy."""


@dataclass(slots=True)
class RunContext:
    """
    Stan współdzielony przez wszystkie dokumenty jednego przebiegu.

    Licznik kotwic zaczyna od 0 i nigdy nie jest zerowany w trakcie
    przebiegu, więc nazwy `autolink-{n}` są unikalne w całym docsecie.
    """

    ignore: frozenset[str] = frozenset()
    source_depth: int = 0
    prefix_root_links: bool = False
    _counter: Iterator[int] = field(default_factory=itertools.count, repr=False)

    def next_anchor_name(self) -> str:
        return f"autolink-{next(self._counter)}"


def _insert_before(node: Tag, new: Tag) -> None:
    if node.parent is None:
        raise StructuralError(f"Węzeł <{node.name}> nie ma rodzica.")
    node.insert_before(new)


def _new_anchor(soup: BeautifulSoup, css_class: str, name: str) -> Tag:
    return soup.new_tag("a", attrs={"class": css_class, "name": name})


def anchor_for(soup: BeautifulSoup, node: Tag, ctx: RunContext) -> str:
    """
    Zwraca nazwę kotwicy adresującej `node`.

    Element <a name="..."> jest już adresowalny — jego nazwa jest używana
    bez zmian. W pozostałych przypadkach przed węzłem wstawiany jest
    <a class="dashingAutolink" name="autolink-N">.
    """
    if node.name == "a":
        existing = node.get("name")
        if existing:
            return existing

    name = ctx.next_anchor_name()
    _insert_before(node, _new_anchor(soup, AUTOLINK_CLASS, name))
    return name


def toc_target(name: str, etype: str) -> str:
    """Odnośnik TOC: //apple_ref/cpp/{type}/{nazwa zakodowana, "+" → "%20"}."""
    escaped = quote_plus(name).replace("+", "%20")
    return _TOC_TARGET.format(type=etype, name=escaped)


def insert_toc_anchor(soup: BeautifulSoup, node: Tag, name: str, etype: str) -> Tag:
    """Wstawia kotwicę TOC bezpośrednio przed `node`."""
    anchor = _new_anchor(soup, TOC_CLASS, toc_target(name, etype))
    _insert_before(node, anchor)
    return anchor
