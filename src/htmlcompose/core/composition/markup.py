"""Markup text <-> document tree conversion.

Parsing is delegated to BeautifulSoup's ``html.parser`` backend, which keeps
unknown elements such as ``<include>`` and ``<yield>`` exactly where they
appear. The soup is then converted into the plain :class:`Node` model.

Text leaves are kept in markup form: ``&``, ``<`` and ``>`` stay escaped, other
entities are decoded to their characters. Comments, doctypes and processing
instructions become literal text leaves, so :func:`render_markup` can write
them back verbatim. Files are written with ``errors="xmlcharrefreplace"`` so
any encoding can hold the result.
"""
from __future__ import annotations

import html
import warnings
from typing import Iterable, List

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.builder import ParserRejectedMarkup
from bs4.element import Doctype, NavigableString, Tag

from .errors import MarkupParseError
from .nodes import AttrValue, Content, Node, Tree

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def parse_markup(text: str) -> List[Content]:
    """Parse markup text into a list of content items.

    Raises:
        MarkupParseError: When the parser rejects the markup.
    """
    try:
        with warnings.catch_warnings():
            # Short fragments ("featured", "x.html") look like locators to bs4.
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(text, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise MarkupParseError(f"Markup rejected by parser: {exc}") from exc
    return _convert(soup.contents)


def _convert(elements: Iterable[object]) -> List[Content]:
    out: List[Content] = []
    for element in elements:
        if isinstance(element, Tag):
            out.append(
                Node(
                    tag=element.name,
                    attrs={k: _attr_value(v) for k, v in element.attrs.items()},
                    content=_convert(element.contents),
                )
            )
        elif isinstance(element, Doctype):
            out.append(f"<!DOCTYPE {element}>")
        elif isinstance(element, NavigableString):
            # Comments and declarations carry their own delimiters here.
            out.append(str(element.output_ready(formatter="minimal")))
    return out


def _attr_value(value: object) -> AttrValue:
    # html.parser reports valueless attributes as empty strings.
    if value is None or value == "":
        return True
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def render_markup(nodes: Tree) -> str:
    """Serialize a node or content list back to markup text."""
    items = [nodes] if isinstance(nodes, Node) else nodes
    return "".join(_render_item(item) for item in items)


def _render_item(item: Content) -> str:
    if isinstance(item, str):
        return item
    inner = render_markup(item.content)
    if item.is_transparent:
        return inner
    open_tag = f"<{item.tag}{render_attrs(item.attrs)}>"
    if item.tag in VOID_ELEMENTS and not item.content:
        return open_tag
    return f"{open_tag}{inner}</{item.tag}>"


def render_attrs(attrs: dict) -> str:
    parts = []
    for key, value in attrs.items():
        if value is True:
            parts.append(f" {key}")
        elif value is False or value is None:
            continue
        else:
            parts.append(f' {key}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


__all__ = ["VOID_ELEMENTS", "parse_markup", "render_markup", "render_attrs"]
