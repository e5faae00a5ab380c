"""Tests for placeholder substitution inside attribute values."""
from __future__ import annotations

from htmlcompose.core.composition.attributes import flatten_content, rewrite_attribute_slots
from htmlcompose.core.composition.nodes import Node


class TestRewriteAttributeSlots:
    def test_bound_slot(self) -> None:
        source = '<div class="card <yield name="c">default</yield>">x</div>'
        out = rewrite_attribute_slots(source, {"c": ["featured"]})
        assert out == '<div class="card featured">x</div>'

    def test_unbound_uses_default(self) -> None:
        source = '<button class="btn <yield name="class">btn--default</yield>">Go</button>'
        out = rewrite_attribute_slots(source, {})
        assert out == '<button class="btn btn--default">Go</button>'

    def test_unbound_optional_still_uses_default(self) -> None:
        source = '<div class="a <yield name="c" optional>dflt</yield>"></div>'
        assert rewrite_attribute_slots(source, {}) == '<div class="a dflt"></div>'

    def test_unbound_empty_default(self) -> None:
        source = '<div class="a <yield name="c"></yield>"></div>'
        assert rewrite_attribute_slots(source, {}) == '<div class="a "></div>'

    def test_single_quoted_name(self) -> None:
        source = "<img alt=\"<yield name='alt'>photo</yield>\">"
        assert rewrite_attribute_slots(source, {"alt": ["A cat"]}) == '<img alt="A cat">'

    def test_independent_attributes(self) -> None:
        source = (
            '<a href="/<yield name="slug">home</yield>" '
            'title="Go <yield name="title">there</yield>">x</a>'
        )
        out = rewrite_attribute_slots(source, {"slug": ["about"]})
        assert out == '<a href="/about" title="Go there">x</a>'

    def test_hyphenated_attribute(self) -> None:
        source = '<div data-state="<yield name="s">idle</yield>"></div>'
        assert rewrite_attribute_slots(source, {"s": ["busy"]}) == '<div data-state="busy"></div>'

    def test_structural_yield_untouched(self) -> None:
        source = '<p><yield name="x">D</yield></p>'
        assert rewrite_attribute_slots(source, {"x": ["C"]}) == source

    def test_bound_markup_is_flattened(self) -> None:
        source = '<div title="<yield name="t">d</yield>"></div>'
        slots = {"t": ["a ", Node("b", {"id": "k", "hidden": True}, ["bold"])]}
        assert rewrite_attribute_slots(source, slots) == '<div title="a <b id="k" hidden>bold</b>"></div>'


class TestFlattenContent:
    def test_text(self) -> None:
        assert flatten_content(["a", "b"]) == "ab"

    def test_empty(self) -> None:
        assert flatten_content([]) == ""
        assert flatten_content(None) == ""

    def test_transparent_nodes_contribute_children(self) -> None:
        assert flatten_content([Node(None, {}, ["x", Node("i", {}, ["y"])])]) == "x<i>y</i>"

    def test_empty_string_attribute_renders_bare(self) -> None:
        assert flatten_content([Node("input", {"disabled": ""})]) == "<input disabled></input>"
