"""
data_model/documents.py — dokument HTML w trakcie przetwarzania i odnalezione referencje.

Document jest własnością silnika ekstrakcji tylko na czas przetwarzania
jednego pliku; drzewo `soup` jest modyfikowane w miejscu.
Reference trafia do indeksu wyszukiwania (tabela searchIndex).
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup


@dataclass(slots=True)
class Document:
    path: str              # ścieżka względem katalogu źródłowego, separator "/"
    depth: int             # liczba katalogów w `path` (0 dla plików w korzeniu)
    soup: BeautifulSoup


@dataclass(frozen=True, slots=True)
class Reference:
    """
    Symbol odnaleziony w dokumencie.

    - name: nazwa symbolu (po transformacji regexp)
    - type: kategoria z konfiguracji, np. "Function", "Guide"
    - href: ścieżka dokumentu + "#" + nazwa kotwicy
    """
    name: str
    type: str
    href: str


# Referencje w kolejności odnalezienia (bez deduplikacji).
type ReferenceList = list[Reference]
