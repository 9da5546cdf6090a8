"""
config_resolver/types.py — kody błędów i wyjątek konfiguracji.

ConfigIssue — pojedynczy problem z kodem, ścieżką JSON Pointer i komunikatem.
ConfigError — wyjątek niosący wszystkie problemy wykryte podczas ładowania;
    rzucany zanim przetworzony zostanie jakikolwiek dokument.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów konfiguracji."""

    # walidacja JSON Schema
    SCHEMA_VIOLATION     = "E_SCHEMA_VIOLATION"

    # dekodowanie wartości selektorów
    TRANSFORM_SHAPE      = "E_TRANSFORM_SHAPE"
    SELECTOR_INVALID     = "E_SELECTOR_INVALID"
    REGEXP_INVALID       = "E_REGEXP_INVALID"
    REPLACEMENT_INVALID  = "E_REPLACEMENT_INVALID"

    # plik konfiguracji
    JSON_INVALID         = "E_JSON_INVALID"


@dataclass(slots=True)
class ConfigIssue:
    """
    Pojedynczy problem w konfiguracji.

    - code:    stały identyfikator klasy błędu (ErrorCode)
    - path:    JSON Pointer do miejsca błędu, np. "/selectors/dt a/0/regexp"
    - message: czytelny opis
    """

    code: ErrorCode
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.code} {self.path}: {self.message}"


class ConfigError(Exception):
    """Konfiguracja odrzucona przy ładowaniu (błąd krytyczny)."""

    def __init__(self, issues: list[ConfigIssue]) -> None:
        self.issues = issues
        lines = "\n".join(f"  {i}" for i in issues)
        super().__init__(f"Nieprawidłowa konfiguracja ({len(issues)} problem(ów)):\n{lines}")
