"""
data_model/config.py — znormalizowana konfiguracja budowania docsetu.

Wszystkie wyrażenia (selektory CSS, regexpy) są tu już skompilowane:
ConfigResolver odrzuca błędną konfigurację zanim przetworzony zostanie
pierwszy dokument.

Mapowanie na dashing.json:
  name, package, index, ignore, icon32x32, allowJS,
  sourceDepth, prefixRootLinks  → DashingConfig
  selectors: {wzorzec: ...}      → list[SelectorRule]
  wartość selektora              → list[Transform]
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from soupsieve import SoupSieve


@dataclass(frozen=True, slots=True)
class Transform:
    """
    Reguła wyprowadzania nazwy symbolu z dopasowanego węzła.

    - type:         kategoria symbolu (dowolna etykieta, np. "Function")
    - attribute:    nazwa atrybutu, z którego brana jest nazwa zamiast tekstu
    - regexp:       opcjonalny wzorzec zamiany w nazwie
    - replacement:  szablon zamiany w składni `re.sub` (np. r"\\g<1>")
    - require_text: węzeł pomijany, gdy tekst nie pasuje
    - match_path:   transformacja pomijana dla dokumentów o niepasującej ścieżce
    """
    type: str
    attribute: str | None = None
    regexp: re.Pattern[str] | None = None
    replacement: str = ""
    require_text: re.Pattern[str] | None = None
    match_path: re.Pattern[str] | None = None


@dataclass(frozen=True, slots=True)
class SelectorRule:
    pattern: str
    selector: SoupSieve
    transforms: tuple[Transform, ...]


@dataclass(slots=True)
class DashingConfig:
    """Konfiguracja po walidacji i dekodowaniu (wejście dla budowania docsetu)."""
    package: str
    name: str
    index: str
    selectors: list[SelectorRule]
    ignore: frozenset[str] = field(default_factory=frozenset)
    icon32x32: str = ""
    allow_js: bool = False
    source_depth: int = 0
    prefix_root_links: bool = False
