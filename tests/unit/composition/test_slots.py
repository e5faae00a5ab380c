"""Tests for slot extraction and placeholder substitution."""
from __future__ import annotations

from htmlcompose.core.composition.markup import parse_markup, render_markup
from htmlcompose.core.composition.nodes import Node
from htmlcompose.core.composition.slots import extract_slots, substitute_slots


class TestExtractSlots:
    def test_named_yield_children_bind_slots(self) -> None:
        (include,) = parse_markup(
            '<include src="b.html"><yield name="text">Click</yield><yield name="class">primary</yield></include>'
        )
        slots = extract_slots(include.content)
        assert slots == {"text": ["Click"], "class": ["primary"]}

    def test_other_children_are_ignored(self) -> None:
        children = ["stray", Node("p", {}, ["no"]), Node("yield", {"name": "a"}, ["A"])]
        assert extract_slots(children) == {"a": ["A"]}

    def test_unnamed_yield_is_ignored(self) -> None:
        assert extract_slots([Node("yield", {}, ["x"]), Node("yield", {"name": ""}, ["y"])]) == {}

    def test_only_direct_children(self) -> None:
        nested = Node("div", {}, [Node("yield", {"name": "deep"}, ["x"])])
        assert extract_slots([nested]) == {}

    def test_last_binding_wins(self) -> None:
        children = [Node("yield", {"name": "a"}, ["first"]), Node("yield", {"name": "a"}, ["second"])]
        assert extract_slots(children) == {"a": ["second"]}

    def test_empty_binding(self) -> None:
        assert extract_slots([Node("yield", {"name": "a"})]) == {"a": []}

    def test_none_children(self) -> None:
        assert extract_slots(None) == {}


class TestSubstituteSlots:
    def test_bound_slot_replaces_default(self) -> None:
        tree = parse_markup('<div><yield name="x">D</yield></div>')
        count = substitute_slots(tree, {"x": ["C"]})
        assert render_markup(tree) == "<div>C</div>"
        assert count == 1

    def test_unbound_keeps_default_without_wrapper(self) -> None:
        tree = parse_markup('<div><yield name="x">D</yield></div>')
        substitute_slots(tree, {})
        assert render_markup(tree) == "<div>D</div>"

    def test_optional_unbound_renders_nothing(self) -> None:
        tree = parse_markup('<div><yield name="x" optional>D</yield></div>')
        substitute_slots(tree, {})
        assert render_markup(tree) == "<div></div>"

    def test_optional_bound_uses_binding(self) -> None:
        tree = parse_markup('<div><yield name="x" optional="true">D</yield></div>')
        substitute_slots(tree, {"x": ["C"]})
        assert render_markup(tree) == "<div>C</div>"

    def test_resolves_at_any_depth(self) -> None:
        tree = parse_markup('<a><b><c><yield name="x">D</yield></c></b></a>')
        substitute_slots(tree, {"x": ["deep"]})
        assert render_markup(tree) == "<a><b><c>deep</c></b></a>"

    def test_same_slot_twice_does_not_alias(self) -> None:
        tree = parse_markup('<p><yield name="x"></yield></p><p><yield name="x"></yield></p>')
        bound = [Node("em", {}, ["hi"])]
        substitute_slots(tree, {"x": bound})
        first = tree[0].content[0].content[0]
        second = tree[1].content[0].content[0]
        assert first is not second
        assert first is not bound[0]
        assert render_markup(tree) == "<p><em>hi</em></p><p><em>hi</em></p>"

    def test_nested_include_bindings_are_kept(self) -> None:
        tree = parse_markup(
            '<include src="button.html"><yield name="label"><yield name="title">T</yield></yield></include>'
        )
        substitute_slots(tree, {"title": ["Passed"]})
        include = tree[0]
        assert include.tag == "include"
        binding = include.content[0]
        assert binding.tag == "yield"
        assert render_markup(binding.content) == "Passed"
