import json
import sqlite3

import pytest

from dashing._version import VERSION
from dashing.cli import main


def _write_config(path, **overrides):
    config = {
        "name": "Demo",
        "package": "demo",
        "index": "index.html",
        "selectors": {
            "h1": "Guide",
            "dt code": {"type": "Function", "regexp": r"\(.*\)$", "replacement": ""},
        },
        "ignore": ["ABOUT"],
    }
    config.update(overrides)
    path.write_text(json.dumps(config), encoding="utf-8")


def test_init_writes_template_once(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    main(["init"])

    data = json.loads((tmp_path / "dashing.json").read_text(encoding="utf-8"))
    assert data["package"] == "dashing"
    assert data["selectors"] == {"title": "Package", "dt a": "Command"}
    assert data["ignore"] == ["ABOUT"]

    with pytest.raises(SystemExit) as excinfo:
        main(["create", "-f", "dashing.json"])
    assert excinfo.value.code == 1

    main(["init", "--force"])


def test_version_command(capsys):
    main(["version"])
    assert VERSION in capsys.readouterr().out


def test_build_end_to_end(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "html"
    (src / "api").mkdir(parents=True)
    (src / "index.html").write_text("<h1>Getting Started</h1><h1>ABOUT</h1>", encoding="utf-8")
    (src / "api" / "funcs.html").write_text(
        '<dl><dt><code>doThing(a, b)</code></dt></dl><img src="/img/x.png">', encoding="utf-8"
    )
    (src / "logo.png").write_bytes(b"\x89PNG")
    _write_config(tmp_path / "dashing.json")

    main(["build", "-s", "html", "-f", "dashing.json", "-o", "out"])

    root = tmp_path / "out" / "demo.docset"
    assert (root / "Contents" / "Info.plist").exists()
    docs = root / "Contents" / "Resources" / "Documents"
    assert (docs / "logo.png").read_bytes() == b"\x89PNG"
    assert 'src="img/x.png"' in (docs / "api" / "funcs.html").read_text(encoding="utf-8")

    conn = sqlite3.connect(root / "Contents" / "Resources" / "docSet.dsidx")
    rows = conn.execute("SELECT name, type, path FROM searchIndex ORDER BY id").fetchall()
    conn.close()
    assert rows == [
        ("doThing", "Function", "api/funcs.html#autolink-0"),
        ("Getting Started", "Guide", "index.html#autolink-1"),
    ]


def test_build_in_place_skips_config_and_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text("<h1>Home</h1>", encoding="utf-8")
    _write_config(tmp_path / "dashing.json")

    main(["build"])
    main(["build"])

    docs = tmp_path / "demo.docset" / "Contents" / "Resources" / "Documents"
    assert sorted(p.name for p in docs.iterdir()) == ["index.html"]


def test_build_rejects_bad_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text("<h1>Home</h1>", encoding="utf-8")
    _write_config(tmp_path / "dashing.json", selectors={"h1": {"type": "Guide", "regexp": "(("}})

    with pytest.raises(SystemExit) as excinfo:
        main(["build"])

    assert excinfo.value.code == 2
    assert "E_REGEXP_INVALID" in capsys.readouterr().out
    assert not (tmp_path / "demo.docset").exists()


def test_build_without_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["build", "-f", "missing.json"])
    assert excinfo.value.code == 1
