import json
import re

import pytest

from config_resolver import (
    ConfigError,
    ErrorCode,
    convert_replacement,
    decode_selector_value,
    load_config,
    resolve_config,
)
from data_model.config import Transform


def _codes(excinfo):
    return [i.code for i in excinfo.value.issues]


def test_string_shorthand_decodes_to_type_only():
    assert decode_selector_value("title", "Package") == [Transform(type="Package")]


def test_list_of_transforms_keeps_order():
    transforms = decode_selector_value("h2", [
        {"type": "Function", "regexp": r"\(.*\)$"},
        {"type": "Deprecated", "requiretext": "deprecated", "matchpath": "^api/"},
    ])

    assert [t.type for t in transforms] == ["Function", "Deprecated"]
    assert transforms[0].regexp.pattern == r"\(.*\)$"
    assert transforms[0].replacement == ""
    assert transforms[1].require_text.search("is deprecated")
    assert transforms[1].match_path.search("api/x.html")


def test_attr_wire_name_maps_to_attribute():
    (t,) = decode_selector_value("a", {"type": "Function", "attr": "title"})
    assert t.attribute == "title"


@pytest.mark.parametrize("value", [5, None, [], ["Function"], ""])
def test_malformed_shape_rejected(value):
    with pytest.raises(ConfigError) as excinfo:
        decode_selector_value("h1", value)
    assert ErrorCode.TRANSFORM_SHAPE in _codes(excinfo)


def test_bad_regexp_fails_fast_with_pointer():
    with pytest.raises(ConfigError) as excinfo:
        decode_selector_value("dt", [{"type": "Function", "regexp": "(unclosed"}])

    (issue,) = excinfo.value.issues
    assert issue.code == ErrorCode.REGEXP_INVALID
    assert issue.path == "/selectors/dt/0/regexp"


def test_bad_guard_regexps_reported_together():
    with pytest.raises(ConfigError) as excinfo:
        decode_selector_value("dt", {"type": "F", "requiretext": "[", "matchpath": "*"})

    assert _codes(excinfo) == [ErrorCode.REGEXP_INVALID, ErrorCode.REGEXP_INVALID]


def test_replacement_template_conversion():
    regexp = re.compile(r"(?P<mod>\w+)\.(\w+)")
    converted = convert_replacement("$2 in ${mod} $$1 \\n", regexp)

    assert regexp.sub(converted, "os.path") == "path in os $1 \\n"


def test_replacement_unknown_group_rejected():
    with pytest.raises(ConfigError) as excinfo:
        convert_replacement("$3", re.compile(r"(a)(b)"))
    assert _codes(excinfo) == [ErrorCode.REPLACEMENT_INVALID]


def test_resolve_config_defaults():
    config = resolve_config({"package": "mylib", "selectors": {"title": "Package"}})

    assert config.name == "MYLIB"
    assert config.index == "index.html"
    assert config.ignore == frozenset()
    assert config.allow_js is False
    assert config.source_depth == 0
    assert config.prefix_root_links is False
    assert [r.pattern for r in config.selectors] == ["title"]


def test_resolve_config_keeps_selector_order():
    config = resolve_config({
        "package": "p",
        "selectors": {"h1": "A", "dt a": "B", "h2.api": {"type": "C"}},
        "ignore": ["ABOUT"],
        "sourceDepth": 2,
        "prefixRootLinks": True,
    })

    assert [r.pattern for r in config.selectors] == ["h1", "dt a", "h2.api"]
    assert config.ignore == frozenset({"ABOUT"})
    assert config.source_depth == 2
    assert config.prefix_root_links is True


def test_invalid_css_selector_rejected():
    with pytest.raises(ConfigError) as excinfo:
        resolve_config({"package": "p", "selectors": {"dt[": "Command"}})

    assert _codes(excinfo) == [ErrorCode.SELECTOR_INVALID]


def test_schema_violations_collected():
    with pytest.raises(ConfigError) as excinfo:
        resolve_config({"selectors": {"h1": 5}, "ignore": "ABOUT"})

    issues = excinfo.value.issues
    assert {i.code for i in issues} == {ErrorCode.SCHEMA_VIOLATION}
    paths = {i.path for i in issues}
    assert "/" in paths
    assert "/ignore" in paths
    assert "/selectors/h1" in paths


def test_unknown_transform_key_rejected():
    with pytest.raises(ConfigError) as excinfo:
        resolve_config({"package": "p", "selectors": {"h1": {"type": "A", "regex": "x"}}})
    assert _codes(excinfo) == [ErrorCode.SCHEMA_VIOLATION]


def test_load_config_from_file(tmp_path):
    path = tmp_path / "dashing.json"
    path.write_text(json.dumps({
        "name": "My Lib",
        "package": "mylib",
        "index": "docs/index.html",
        "selectors": {"dt a": {"type": "Command", "regexp": "^-+", "replacement": ""}},
        "allowJS": True,
    }), encoding="utf-8")

    config = load_config(path)

    assert config.name == "My Lib"
    assert config.index == "docs/index.html"
    assert config.allow_js is True
    assert config.selectors[0].transforms[0].regexp.pattern == "^-+"


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "dashing.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(path)
    assert _codes(excinfo) == [ErrorCode.JSON_INVALID]
