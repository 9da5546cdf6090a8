"""
html_parser/engine.py — silnik ekstrakcji: selektory → transformacje → kotwice.

Publiczne API:
  apply_transform(doc, rule, transform, ctx)  -> ReferenceList
  extract_references(doc, rules, ctx)         -> ReferenceList
  process_file(src, rel_path, dest_root, rules, ctx) -> ReferenceList

Kolejność dla jednego dokumentu:
  parse → (dla każdej pary wzorzec/transformacja) dopasowanie + kotwice
        → przepisanie odnośników → serializacja → referencje

Każda transformacja to osobny, pełny przebieg: lista dopasowań jest
materializowana przed pierwszą modyfikacją drzewa, a nowe węzły wstawiane
są zawsze PRZED dopasowanym węzłem. Kolejna transformacja na tym samym
wzorcu może ponownie dopasować te same węzły (np. "Function" i "Deprecated").
"""

from __future__ import annotations

import pathlib
from collections.abc import Sequence

from bs4 import Tag

from data_model.config import SelectorRule, Transform
from data_model.documents import Document, Reference, ReferenceList

from .anchors import RunContext, anchor_for, insert_toc_anchor
from .parser import node_text, parse_document
from .paths import rewrite_links
from .serializer import write_document


def derive_name(node: Tag, transform: Transform, ctx: RunContext) -> str | None:
    """
    Wyprowadza nazwę symbolu dla węzła albo zwraca None, gdy węzeł
    ma zostać pominięty (requiretext lub nazwa na liście ignore).
    """
    raw_text = node_text(node)
    if transform.require_text is not None and not transform.require_text.search(raw_text):
        return None

    if transform.attribute:
        value = node.get(transform.attribute, "")
        name = " ".join(value) if isinstance(value, list) else value
    else:
        name = raw_text

    if name in ctx.ignore:
        return None

    if transform.regexp is not None:
        name = transform.regexp.sub(transform.replacement, name)
        if name in ctx.ignore:
            return None

    return name


def apply_transform(
    doc: Document,
    rule: SelectorRule,
    transform: Transform,
    ctx: RunContext,
) -> ReferenceList:
    """Jeden przebieg transformacji po dokumencie; modyfikuje drzewo w miejscu."""
    if transform.match_path is not None and not transform.match_path.search(doc.path):
        return []

    refs: ReferenceList = []
    matches = list(rule.selector.select(doc.soup))
    for node in matches:
        name = derive_name(node, transform, ctx)
        if name is None:
            continue

        anchor = anchor_for(doc.soup, node, ctx)
        refs.append(Reference(name=name, type=transform.type, href=f"{doc.path}#{anchor}"))
        insert_toc_anchor(doc.soup, node, name, transform.type)

    return refs


def extract_references(
    doc: Document,
    rules: Sequence[SelectorRule],
    ctx: RunContext,
) -> ReferenceList:
    refs: ReferenceList = []
    for rule in rules:
        for transform in rule.transforms:
            refs.extend(apply_transform(doc, rule, transform, ctx))
    return refs


def process_document(doc: Document, rules: Sequence[SelectorRule], ctx: RunContext) -> ReferenceList:
    """Ekstrakcja + przepisanie odnośników (bez zapisu na dysk)."""
    refs = extract_references(doc, rules, ctx)
    rewrite_links(doc.soup, ctx.source_depth, ctx.prefix_root_links)
    return refs


def process_file(
    src: pathlib.Path,
    rel_path: str,
    dest_root: pathlib.Path,
    rules: Sequence[SelectorRule],
    ctx: RunContext,
) -> ReferenceList:
    """
    Przetwarza jeden plik HTML od parsowania do zapisu.

    Args:
        src:       plik źródłowy
        rel_path:  ścieżka względem katalogu źródłowego (separator "/")
        dest_root: katalog Documents docsetu
        rules:     znormalizowane reguły selektorów
        ctx:       stan przebiegu (licznik kotwic, ignore)

    Returns:
        Referencje w kolejności odnalezienia.
    """
    doc = parse_document(src, rel_path)
    refs = process_document(doc, rules, ctx)
    write_document(doc.soup, dest_root, rel_path)
    return refs
