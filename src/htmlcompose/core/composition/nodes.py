"""Document tree model for markup composition.

A document is an ordered list of content items. Each item is either a text
leaf (``str``, kept in its markup form) or a :class:`Node`. Nodes nest only
through their own ``content`` list.

Include directives and yield placeholders are ordinary nodes in the tree;
:class:`IncludeDirective` and :class:`Placeholder` are validated views created
from a node once, so the engine never re-checks attribute shapes ad hoc.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Union

# Tag value of a node that renders only its children.
TRANSPARENT: None = None

INCLUDE_TAG = "include"
YIELD_TAG = "yield"

AttrValue = Union[str, bool]


@dataclass(eq=False)
class Node:
    """Element of the document tree.

    ``tag`` is an element name or :data:`TRANSPARENT`. Attribute values are
    strings, or ``True`` for a valueless (presence-only) attribute.
    """

    tag: Optional[str]
    attrs: Dict[str, AttrValue] = field(default_factory=dict)
    content: List["Content"] = field(default_factory=list)
    # Set once the engine has processed this node as a directive.
    settled: bool = field(default=False, repr=False)

    @property
    def is_transparent(self) -> bool:
        return self.tag is TRANSPARENT

    def resolve(self, content: List["Content"]) -> None:
        """Rewrite this node in place into a transparent group of ``content``."""
        self.tag = TRANSPARENT
        self.attrs = {}
        self.content = content
        self.settled = True


Content = Union[Node, str]
Tree = Union[Node, Sequence[Content]]


def visit(nodes: Optional[Tree], callback: Callable[[Node], object]) -> None:
    """Pre-order depth-first traversal calling ``callback`` on every Node.

    Text leaves are skipped. ``node.content`` is read after the callback
    returns, so a callback that replaces the content of the node it was given
    has the new content traversed.
    """
    if nodes is None:
        return
    items = [nodes] if isinstance(nodes, Node) else nodes
    for item in items:
        if isinstance(item, Node):
            callback(item)
            if item.content:
                visit(item.content, callback)


def iter_nodes(nodes: Optional[Tree]) -> Iterator[Node]:
    """Yield every Node of ``nodes`` in document order."""
    found: List[Node] = []
    visit(nodes, found.append)
    return iter(found)


def is_truthy_flag(value: Optional[AttrValue]) -> bool:
    """Presence, an empty value, or ``"true"`` all switch a boolean attribute on."""
    if value is True:
        return True
    if isinstance(value, str):
        return value == "" or value.strip().lower() == "true"
    return False


@dataclass(frozen=True)
class IncludeDirective:
    """Validated ``<include src="...">`` node."""

    node: Node
    src: str

    @classmethod
    def from_node(cls, node: Node) -> Optional["IncludeDirective"]:
        if node.tag != INCLUDE_TAG:
            return None
        src = node.attrs.get("src")
        if not isinstance(src, str) or not src:
            return None
        return cls(node=node, src=src)


@dataclass(frozen=True)
class Placeholder:
    """Validated ``<yield name="...">`` node found inside a fragment."""

    node: Node
    name: Optional[str]
    optional: bool

    @property
    def default(self) -> List[Content]:
        return self.node.content

    @classmethod
    def from_node(cls, node: Node) -> Optional["Placeholder"]:
        if node.tag != YIELD_TAG:
            return None
        name = node.attrs.get("name")
        return cls(
            node=node,
            name=name if isinstance(name, str) and name else None,
            optional=is_truthy_flag(node.attrs.get("optional")),
        )


def is_include(node: Node) -> bool:
    """True for any node still tagged ``include``, valid or not."""
    return node.tag == INCLUDE_TAG


__all__ = [
    "TRANSPARENT",
    "INCLUDE_TAG",
    "YIELD_TAG",
    "AttrValue",
    "Node",
    "Content",
    "Tree",
    "visit",
    "iter_nodes",
    "is_truthy_flag",
    "IncludeDirective",
    "Placeholder",
    "is_include",
]
