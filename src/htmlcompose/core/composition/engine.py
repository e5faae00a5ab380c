"""Recursive include expansion.

The IncludeExpander rewrites a parsed document in place. For every
``<include src="...">`` directive, in document order:

1. SLOTS       - collect the ``<yield name="...">`` bindings among its children
2. CALLER      - expand includes inside each bound slot first
3. LOAD        - read the fragment, rewrite placeholders inside attribute
                 values, parse it
4. SUBSTITUTE  - replace the fragment's ``<yield>`` placeholders
5. RECURSE     - expand includes written in the fragment itself
6. SPLICE      - turn the directive into a transparent node holding the result

Expansion is strictly sequential: a directive may already have been resolved
as a side effect of an earlier one (it was part of a slot), in which case it
is skipped. A directive whose fragment cannot be read, or whose fragment is
already being expanded further up (a cycle), or which sits deeper than
``max_depth``, is logged and left in the tree unexpanded.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, TYPE_CHECKING

from .errors import FragmentReadError
from .loader import FragmentLoader
from .markup import parse_markup, render_attrs, render_markup
from .nodes import IncludeDirective, Node, Tree, is_include, visit
from .report import ExpansionReport
from .slots import extract_slots, substitute_slots

if TYPE_CHECKING:
    from htmlcompose.core.config.domains.composition import CompositionConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True)
class ExpansionContext:
    """Chain of fragments currently being expanded."""

    stack: Tuple[Path, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.stack)

    def enter(self, path: Path) -> "ExpansionContext":
        return ExpansionContext(stack=self.stack + (path,))


class IncludeExpander:
    """Expand include directives against a fixed root directory.

    Usage:
        expander = IncludeExpander(root=Path("src"))
        html, report = expander.process(page_markup, document="index.html")
    """

    def __init__(
        self,
        root: Path,
        encoding: str = "utf-8",
        max_depth: int = DEFAULT_MAX_DEPTH,
        loader: Optional[FragmentLoader] = None,
    ) -> None:
        """Initialize the expander.

        Args:
            root: Directory every include ``src`` is resolved against
            encoding: Text encoding of fragment files
            max_depth: Maximum fragment nesting depth
            loader: Custom fragment loader (default: FragmentLoader(root, encoding))
        """
        self.root = Path(root)
        self.encoding = encoding
        self.max_depth = max_depth
        self.loader = loader or FragmentLoader(self.root, encoding)

    @classmethod
    def from_config(cls, config: "CompositionConfig") -> "IncludeExpander":
        return cls(root=config.root, encoding=config.encoding, max_depth=config.max_depth)

    def process(self, markup: str, document: str = "<document>") -> Tuple[str, ExpansionReport]:
        """Parse, expand and render one document.

        Returns:
            Tuple of (rendered markup, report)

        Raises:
            MarkupParseError: When the document or a fragment cannot be parsed.
        """
        report = ExpansionReport(document=document)
        nodes = parse_markup(markup)
        self.expand(nodes, report)
        return render_markup(nodes), report

    def expand(
        self,
        tree: Tree,
        report: Optional[ExpansionReport] = None,
        context: Optional[ExpansionContext] = None,
    ) -> Tree:
        """Expand every include directive in ``tree`` in place and return it."""
        report = report if report is not None else ExpansionReport()
        context = context or ExpansionContext()
        for directive in self.collect_includes(tree, report):
            self._expand_include(directive, report, context)
        return tree

    def collect_includes(self, tree: Tree, report: ExpansionReport) -> List[IncludeDirective]:
        """Snapshot all pending include directives in document order.

        Include nodes with a missing or invalid ``src`` are reported once and
        left in place.
        """
        found: List[IncludeDirective] = []

        def _collect(node: Node) -> None:
            if not is_include(node) or node.settled:
                return
            directive = IncludeDirective.from_node(node)
            if directive is None:
                message = f"Skipping include with invalid src: <include{render_attrs(node.attrs)}>"
                logger.warning(message)
                report.add_warning(message)
                node.settled = True
                return
            found.append(directive)

        visit(tree, _collect)
        return found

    def _expand_include(
        self,
        directive: IncludeDirective,
        report: ExpansionReport,
        context: ExpansionContext,
    ) -> None:
        node = directive.node
        if node.settled or not is_include(node):
            logger.debug("Include %s already processed; skipping", directive.src)
            return

        slots = extract_slots(node.content)
        for content in slots.values():
            self.expand(content, report, context)

        path = self.loader.resolve(directive.src)
        if path in context.stack:
            chain = " -> ".join(str(p) for p in (*context.stack, path))
            self._fail(node, report, f"Circular include detected: {chain}")
            return
        if context.depth >= self.max_depth:
            self._fail(
                node,
                report,
                f"Include depth {context.depth + 1} exceeds max_depth={self.max_depth}: {path}",
            )
            return

        try:
            fragment = self.loader.load(directive.src, slots)
        except FragmentReadError as exc:
            self._fail(node, report, str(exc))
            return

        report.placeholders_resolved += substitute_slots(fragment, slots)
        self.expand(fragment, report, context.enter(path))

        node.resolve(fragment)
        report.record_include(directive.src)

    def _fail(self, node: Node, report: ExpansionReport, message: str) -> None:
        logger.error(message)
        report.add_error(message)
        node.settled = True


def expand(
    tree: Tree,
    root: Path,
    encoding: str = "utf-8",
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    report: Optional[ExpansionReport] = None,
) -> Tree:
    """Expand ``tree`` in place against ``root``; convenience wrapper."""
    return IncludeExpander(root, encoding=encoding, max_depth=max_depth).expand(tree, report)


__all__ = ["DEFAULT_MAX_DEPTH", "ExpansionContext", "IncludeExpander", "expand"]
