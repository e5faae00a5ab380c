"""Include/slot composition engine.

Public API:
- parse_markup / render_markup: markup text <-> document tree
- IncludeExpander / expand: recursive include expansion
- extract_slots / substitute_slots / rewrite_attribute_slots: expansion steps
- PageBuilder: build a directory of pages
"""
from __future__ import annotations

from .attributes import flatten_content, rewrite_attribute_slots
from .engine import DEFAULT_MAX_DEPTH, ExpansionContext, IncludeExpander, expand
from .errors import CompositionError, FragmentReadError, MarkupParseError
from .loader import FragmentLoader
from .markup import parse_markup, render_markup
from .nodes import TRANSPARENT, IncludeDirective, Node, Placeholder, iter_nodes, visit
from .pages import PageBuilder, discover_pages
from .report import ExpansionReport
from .slots import SlotMap, extract_slots, substitute_slots

__all__ = [
    "TRANSPARENT",
    "Node",
    "IncludeDirective",
    "Placeholder",
    "visit",
    "iter_nodes",
    "parse_markup",
    "render_markup",
    "SlotMap",
    "extract_slots",
    "substitute_slots",
    "flatten_content",
    "rewrite_attribute_slots",
    "FragmentLoader",
    "DEFAULT_MAX_DEPTH",
    "ExpansionContext",
    "IncludeExpander",
    "expand",
    "ExpansionReport",
    "PageBuilder",
    "discover_pages",
    "CompositionError",
    "FragmentReadError",
    "MarkupParseError",
]
