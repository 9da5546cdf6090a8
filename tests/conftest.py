import pytest

from config_resolver import resolve_config
from data_model.documents import Document
from html_parser.anchors import RunContext
from html_parser.parser import parse_html


@pytest.fixture
def make_rules():
    def _make(selectors):
        return resolve_config({"package": "test", "selectors": selectors}).selectors

    return _make


@pytest.fixture
def make_doc():
    def _make(markup, path="index.html"):
        return Document(path=path, depth=path.count("/"), soup=parse_html(markup))

    return _make


@pytest.fixture
def ctx():
    return RunContext()
