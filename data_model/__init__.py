"""
data_model — struktury danych dashing.

Użycie:
  from data_model import DashingConfig, SelectorRule, Transform, Document, Reference

Moduły:
  config    — Transform, SelectorRule, DashingConfig (po walidacji i kompilacji)
  documents — Document, Reference, ReferenceList

Mapowanie na dashing.json:
  selectors.{wzorzec}            → SelectorRule(pattern, selector, transforms)
  type / attr / regexp /
  replacement / requiretext /
  matchpath                      → Transform
"""

from .config import (
    Transform,
    SelectorRule,
    DashingConfig,
)
from .documents import (
    Document,
    Reference,
    ReferenceList,
)

__all__ = [
    # config
    "Transform",
    "SelectorRule",
    "DashingConfig",
    # documents
    "Document",
    "Reference",
    "ReferenceList",
]
