import pytest

from html_parser.anchors import (
    RunContext,
    StructuralError,
    anchor_for,
    insert_toc_anchor,
    toc_target,
)
from html_parser.parser import parse_html


def test_counter_starts_at_zero_and_increases():
    ctx = RunContext()
    assert [ctx.next_anchor_name() for _ in range(3)] == ["autolink-0", "autolink-1", "autolink-2"]


def test_separate_runs_have_separate_counters():
    first, second = RunContext(), RunContext()
    first.next_anchor_name()
    assert second.next_anchor_name() == "autolink-0"


def test_anchor_inserted_before_node():
    soup = parse_html("<section><h2>Usage</h2></section>")
    h2 = soup.h2

    name = anchor_for(soup, h2, RunContext())

    assert name == "autolink-0"
    prev = h2.find_previous_sibling()
    assert prev.name == "a"
    assert prev["name"] == "autolink-0"
    assert "dashingAutolink" in prev["class"]


def test_named_anchor_reused_without_mutation():
    soup = parse_html('<p><a name="intro">Intro</a></p>')
    before = str(soup)

    assert anchor_for(soup, soup.a, RunContext()) == "intro"
    assert str(soup) == before


def test_anchor_without_name_gets_autolink():
    soup = parse_html('<p><a href="x.html">X</a></p>')

    assert anchor_for(soup, soup.find("a", href="x.html"), RunContext()) == "autolink-0"
    assert len(soup.find_all("a")) == 2


def test_detached_node_is_structural_error():
    soup = parse_html("<p>x</p>")
    orphan = soup.new_tag("h1")

    with pytest.raises(StructuralError):
        anchor_for(soup, orphan, RunContext())


@pytest.mark.parametrize(
    "name,etype,expected",
    [
        ("Getting Started", "Guide", "//apple_ref/cpp/Guide/Getting%20Started"),
        ("a+b", "Function", "//apple_ref/cpp/Function/a%2Bb"),
        ("operator<<", "Method", "//apple_ref/cpp/Method/operator%3C%3C"),
        ("zażółć", "Type", "//apple_ref/cpp/Type/za%C5%BC%C3%B3%C5%82%C4%87"),
    ],
)
def test_toc_target_escaping(name, etype, expected):
    assert toc_target(name, etype) == expected


def test_toc_anchor_carries_target():
    soup = parse_html("<h3>open</h3>")

    anchor = insert_toc_anchor(soup, soup.h3, "open", "Function")

    assert anchor.next_sibling is soup.h3
    assert anchor["name"] == "//apple_ref/cpp/Function/open"


def test_empty_name_is_not_reused():
    soup = parse_html('<p><a name="">X</a></p>')

    assert anchor_for(soup, soup.find("a"), RunContext()) == "autolink-0"
    assert soup.find("a")["name"] == "autolink-0"
