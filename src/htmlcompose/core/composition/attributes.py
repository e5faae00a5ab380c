"""Slot substitution inside attribute values of raw fragment source.

Once parsed, an attribute value is an opaque string, so a placeholder written
inside one (``class="btn <yield name="class">btn--default</yield>"``) can never
become a real ``<yield>`` node. This pass rewrites such placeholders on the
source text before it reaches the parser.

Supported grammar is deliberately narrow: one placeholder per attribute
value, no quotes inside the default text, attribute and placeholder matched by
a single regular expression. Anything else is left as literal text.
"""
from __future__ import annotations

import re
from typing import Optional, Sequence

from .nodes import Content, Node
from .slots import SlotMap

# attr="...<yield name="N" ...>DEFAULT</yield>..."
ATTRIBUTE_SLOT_PATTERN = re.compile(
    r"""([\w:-]+)="([^"]*<yield\s+name=["']([^"']+)["'][^>]*>([^<]*)</yield>[^"]*)\""""
)


def _placeholder_pattern(name: str) -> "re.Pattern[str]":
    return re.compile(rf"""<yield\s+name=["']{re.escape(name)}["'][^>]*>([^<]*)</yield>""")


def flatten_content(content: Optional[Sequence[Content]]) -> str:
    """Render slot content back to markup text for use inside an attribute.

    Transparent nodes contribute only their children. Valueless attributes
    render bare.
    """
    if not content:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for item in content:
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Node):
            inner = flatten_content(item.content)
            if item.is_transparent:
                parts.append(inner)
            else:
                attrs = {k: (True if v == "" else v) for k, v in item.attrs.items()}
                parts.append(f"<{item.tag}{_raw_attrs(attrs)}>{inner}</{item.tag}>")
    return "".join(parts)


def _raw_attrs(attrs: dict) -> str:
    # Spliced into an already-quoted value, so values stay unescaped.
    return "".join(f" {k}" if v is True else f' {k}="{v}"' for k, v in attrs.items())


def rewrite_attribute_slots(source: str, slots: SlotMap) -> str:
    """Replace placeholders embedded in attribute values of ``source``.

    A bound slot is replaced by its flattened content; an unbound one by the
    default text written inside the placeholder (``optional`` does not apply
    here).
    """

    def _rewrite(match: "re.Match[str]") -> str:
        attr_name, attr_value, slot_name, default = match.groups()
        if slot_name in slots:
            replacement = flatten_content(slots[slot_name])
        else:
            replacement = default or ""
        new_value = _placeholder_pattern(slot_name).sub(lambda _m: replacement, attr_value)
        return f'{attr_name}="{new_value}"'

    return ATTRIBUTE_SLOT_PATTERN.sub(_rewrite, source)


__all__ = ["ATTRIBUTE_SLOT_PATTERN", "flatten_content", "rewrite_attribute_slots"]
