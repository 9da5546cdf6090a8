"""
config_resolver — ładowanie, walidacja i normalizacja dashing.json.

Interfejs publiczny:
    load_config            — plik JSON → DashingConfig
    resolve_config         — słownik (po json.loads) → DashingConfig
    decode_selector_value  — wartość selektora → list[Transform]
    ConfigError, ConfigIssue, ErrorCode — typy błędów

Typowe użycie:
    from config_resolver import ConfigError, load_config

    try:
        config = load_config(Path("dashing.json"))
    except ConfigError as e:
        for issue in e.issues:
            print(issue.code, issue.path, issue.message)
"""

from .types import ConfigError, ConfigIssue, ErrorCode
from .schema import CONFIG_SCHEMA
from .resolver import convert_replacement, decode_selector_value, load_config, resolve_config

__all__ = [
    "CONFIG_SCHEMA",
    "ConfigError",
    "ConfigIssue",
    "ErrorCode",
    "convert_replacement",
    "decode_selector_value",
    "load_config",
    "resolve_config",
]
