"""Named slot binding and placeholder substitution.

An include directive binds slots through its direct ``<yield name="...">``
children. Inside the loaded fragment every ``<yield>`` placeholder is then
replaced by the bound content, dropped when marked ``optional`` and unbound,
or unwrapped to its own default content.

A ``<yield>`` written directly inside a nested ``<include>`` of the fragment is a
binding for that include, not a placeholder: it is kept, and only the
placeholders inside it are substituted, so callers can pass slots through.
"""
from __future__ import annotations

import copy
import logging
from typing import Dict, List, Optional, Sequence, Set

from .nodes import INCLUDE_TAG, YIELD_TAG, Content, Node, Placeholder, Tree, visit

logger = logging.getLogger(__name__)

SlotMap = Dict[str, List[Content]]


def extract_slots(children: Optional[Sequence[Content]]) -> SlotMap:
    """Build the slot map from the direct children of an include directive.

    Only ```<yield>``` children with a non-empty ``name`` bind a slot; the last
    binding of a repeated name wins. Every other child is ignored.
    """
    slots: SlotMap = {}
    for child in children or []:
        if not isinstance(child, Node) or child.tag != YIELD_TAG:
            continue
        name = child.attrs.get("name")
        if isinstance(name, str) and name:
            slots[name] = child.content or []
    return slots


def substitute_slots(tree: Tree, slots: SlotMap) -> int:
    """Resolve every placeholder in ``tree`` in place.

    Args:
        tree: Parsed fragment (node or content list)
        slots: Slot bindings supplied by the caller

    Returns:
        Number of placeholders resolved
    """
    resolved = 0
    # Direct <yield> children of a nested include bind that include's slots;
    # only their content is substituted.
    bindings: Set[int] = set()

    def _resolve(node: Node) -> None:
        nonlocal resolved
        if node.tag == INCLUDE_TAG:
            bindings.update(id(child) for child in node.content if isinstance(child, Node))
            return
        if id(node) in bindings:
            return
        placeholder = Placeholder.from_node(node)
        if placeholder is None:
            return
        if placeholder.name is not None and placeholder.name in slots:
            # Each placeholder gets its own copy of the bound content.
            node.resolve(copy.deepcopy(slots[placeholder.name]))
        elif placeholder.optional:
            node.resolve([])
        else:
            node.resolve(placeholder.default)
        logger.debug("Resolved placeholder %r", placeholder.name)
        resolved += 1

    visit(tree, _resolve)
    return resolved


__all__ = ["SlotMap", "extract_slots", "substitute_slots"]
