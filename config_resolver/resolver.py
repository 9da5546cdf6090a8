"""
config_resolver/resolver.py — ładowanie i normalizacja dashing.json.

Publiczne API:
  load_config(path)                      -> DashingConfig
  resolve_config(raw)                    -> DashingConfig
  decode_selector_value(pattern, value)  -> list[Transform]

Etapy:
  A — JSON Schema        (jsonschema, wszystkie naruszenia naraz; fail-fast)
  B — selektory CSS      (soupsieve.compile)
  C — transformacje      (re.compile dla regexp / requiretext / matchpath,
                          konwersja szablonu replacement)

Każdy problem trafia do listy ConfigIssue; jeśli lista nie jest pusta,
rzucany jest ConfigError i żaden dokument nie zostanie przetworzony.
"""

from __future__ import annotations

import json
import pathlib
import re
from typing import Any

import jsonschema
import soupsieve

from data_model.config import DashingConfig, SelectorRule, Transform

from .schema import CONFIG_SCHEMA
from .types import ConfigError, ConfigIssue, ErrorCode

# Odwołania do grup w szablonie zamiany: $1, ${1}, $name, ${name}, $$
_TEMPLATE_REF_RE = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _pointer(*parts: object) -> str:
    """Buduje JSON Pointer (RFC 6901) z kolejnych segmentów."""
    escaped = (str(p).replace("~", "~0").replace("/", "~1") for p in parts)
    return "/" + "/".join(escaped)


def _compile(
    source: str | None,
    path: str,
    issues: list[ConfigIssue],
) -> re.Pattern[str] | None:
    if source is None:
        return None
    try:
        return re.compile(source)
    except re.error as e:
        issues.append(ConfigIssue(
            code=ErrorCode.REGEXP_INVALID,
            path=path,
            message=f"Nie można skompilować wyrażenia '{source}': {e}",
        ))
        return None


def convert_replacement(
    template: str,
    regexp: re.Pattern[str],
    path: str = "/",
    issues: list[ConfigIssue] | None = None,
) -> str:
    """
    Konwertuje szablon zamiany ze składni `$1` / `${name}` na składnię `re.sub`.

    Ukośniki odwrotne w szablonie są traktowane dosłownie. Odwołanie do
    nieistniejącej grupy jest błędem konfiguracji.

    Przykłady::

        "$1"        → r"\\g<1>"
        "${name}()" → r"\\g<name>()"
        "$$x"       → "$x"
    """
    own_issues: list[ConfigIssue] = [] if issues is None else issues
    out: list[str] = []
    pos = 0

    for m in _TEMPLATE_REF_RE.finditer(template):
        out.append(template[pos:m.start()].replace("\\", "\\\\"))
        pos = m.end()

        if m.group(1):
            out.append("$")
            continue

        ref = m.group(2) or m.group(3)
        if ref.isdigit():
            known = int(ref) <= regexp.groups
        else:
            known = ref in regexp.groupindex
        if not known:
            own_issues.append(ConfigIssue(
                code=ErrorCode.REPLACEMENT_INVALID,
                path=path,
                message=(
                    f"Szablon '{template}' odwołuje się do grupy '{ref}', "
                    f"której nie ma w '{regexp.pattern}'."
                ),
            ))
            continue
        out.append(f"\\g<{ref}>")

    out.append(template[pos:].replace("\\", "\\\\"))

    if issues is None and own_issues:
        raise ConfigError(own_issues)
    return "".join(out)


def _decode_transform(
    raw: dict[str, Any],
    path: str,
    issues: list[ConfigIssue],
) -> Transform | None:
    ttype = raw.get("type")
    if not isinstance(ttype, str) or not ttype:
        issues.append(ConfigIssue(
            code=ErrorCode.TRANSFORM_SHAPE,
            path=_pointer_join(path, "type"),
            message="Transformacja wymaga niepustego pola 'type'.",
        ))
        return None

    n_before = len(issues)
    regexp       = _compile(raw.get("regexp"), _pointer_join(path, "regexp"), issues)
    require_text = _compile(raw.get("requiretext"), _pointer_join(path, "requiretext"), issues)
    match_path   = _compile(raw.get("matchpath"), _pointer_join(path, "matchpath"), issues)

    replacement = raw.get("replacement", "")
    if regexp is not None:
        replacement = convert_replacement(
            replacement, regexp, _pointer_join(path, "replacement"), issues
        )

    if len(issues) > n_before:
        return None

    return Transform(
        type=ttype,
        attribute=raw.get("attr") or None,
        regexp=regexp,
        replacement=replacement,
        require_text=require_text,
        match_path=match_path,
    )


def _pointer_join(base: str, *parts: object) -> str:
    return base.rstrip("/") + _pointer(*parts)


# ---------------------------------------------------------------------------
# Publiczny interfejs
# ---------------------------------------------------------------------------

def decode_selector_value(
    pattern: str,
    value: Any,
    issues: list[ConfigIssue] | None = None,
) -> list[Transform]:
    """
    Dekoduje polimorficzną wartość selektora do listy Transform.

    Dopuszczalne kształty:
        "Function"                                   → [Transform("Function")]
        {"type": "Function", "regexp": "..."}        → [Transform(...)]
        [{"type": "Function"}, {"type": "Method"}]   → [Transform, Transform]

    Raises:
        ConfigError gdy kształt jest niepoprawny lub wyrażenie się nie kompiluje
        (tylko gdy `issues` nie zostało podane; inaczej problemy są dopisywane).
    """
    own_issues: list[ConfigIssue] = [] if issues is None else issues
    n_before = len(own_issues)
    base = _pointer("selectors", pattern)
    transforms: list[Transform] = []

    if isinstance(value, str) and value:
        transforms.append(Transform(type=value))
    elif isinstance(value, dict):
        t = _decode_transform(value, base, own_issues)
        if t is not None:
            transforms.append(t)
    elif isinstance(value, list) and value:
        for i, item in enumerate(value):
            if not isinstance(item, dict):
                own_issues.append(ConfigIssue(
                    code=ErrorCode.TRANSFORM_SHAPE,
                    path=_pointer_join(base, i),
                    message=f"Oczekiwano obiektu transformacji, otrzymano {type(item).__name__}.",
                ))
                continue
            t = _decode_transform(item, _pointer_join(base, i), own_issues)
            if t is not None:
                transforms.append(t)
    else:
        own_issues.append(ConfigIssue(
            code=ErrorCode.TRANSFORM_SHAPE,
            path=base,
            message=(
                "Oczekiwano napisu, obiektu transformacji lub niepustej listy obiektów; "
                f"otrzymano {type(value).__name__}."
            ),
        ))

    if issues is None and len(own_issues) > n_before:
        raise ConfigError(own_issues)
    return transforms


def _stage_schema(raw: Any, issues: list[ConfigIssue]) -> None:
    validator = jsonschema.Draft202012Validator(CONFIG_SCHEMA)
    for e in sorted(validator.iter_errors(raw), key=lambda e: [str(p) for p in e.absolute_path]):
        path = _pointer(*e.absolute_path) if e.absolute_path else "/"
        issues.append(ConfigIssue(
            code=ErrorCode.SCHEMA_VIOLATION,
            path=path,
            message=e.message,
        ))


def _stage_selectors(raw: dict[str, Any], issues: list[ConfigIssue]) -> list[SelectorRule]:
    rules: list[SelectorRule] = []
    for pattern, value in raw.get("selectors", {}).items():
        try:
            compiled = soupsieve.compile(pattern)
        except soupsieve.SelectorSyntaxError as e:
            issues.append(ConfigIssue(
                code=ErrorCode.SELECTOR_INVALID,
                path=_pointer("selectors", pattern),
                message=f"Niepoprawny selektor CSS '{pattern}': {e}",
            ))
            continue

        transforms = decode_selector_value(pattern, value, issues)
        if transforms:
            rules.append(SelectorRule(
                pattern=pattern,
                selector=compiled,
                transforms=tuple(transforms),
            ))
    return rules


def resolve_config(raw: Any) -> DashingConfig:
    """
    Waliduje surową konfigurację (po json.loads) i zwraca DashingConfig.

    Raises:
        ConfigError z listą wszystkich wykrytych problemów.
    """
    issues: list[ConfigIssue] = []

    # A — JSON Schema (fail-fast: dekodowanie wymaga poprawnego kształtu)
    _stage_schema(raw, issues)
    if issues:
        raise ConfigError(issues)

    # B + C — selektory i transformacje
    rules = _stage_selectors(raw, issues)
    if issues:
        raise ConfigError(issues)

    package: str = raw["package"]
    return DashingConfig(
        package=package,
        name=raw.get("name") or package.upper(),
        index=raw.get("index") or "index.html",
        selectors=rules,
        ignore=frozenset(raw.get("ignore", [])),
        icon32x32=raw.get("icon32x32", ""),
        allow_js=raw.get("allowJS", False),
        source_depth=raw.get("sourceDepth", 0),
        prefix_root_links=raw.get("prefixRootLinks", False),
    )


def load_config(path: pathlib.Path) -> DashingConfig:
    """
    Wczytuje dashing.json z dysku.

    Raises:
        OSError     gdy pliku nie da się odczytać.
        ConfigError gdy JSON jest niepoprawny lub nie przechodzi walidacji.
    """
    text = path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError([ConfigIssue(
            code=ErrorCode.JSON_INVALID,
            path="/",
            message=f"Niepoprawny JSON w {path}: {e}",
        )]) from e
    return resolve_config(raw)
