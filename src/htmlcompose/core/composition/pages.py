"""Build every page of a project through the include expander."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from htmlcompose.core.exceptions import ConfigError

from .engine import IncludeExpander
from .report import ExpansionReport

logger = logging.getLogger(__name__)


def discover_pages(pages_dir: Path) -> Dict[str, Path]:
    """Map page name (file stem) to path for every ``*.html`` in ``pages_dir``.

    A missing directory yields no pages.
    """
    if not pages_dir.is_dir():
        logger.info("Pages directory not found: %s", pages_dir)
        return {}
    return {p.stem: p for p in sorted(pages_dir.glob("*.html")) if p.is_file()}


class PageBuilder:
    """Expand each page and write the result into ``out_dir``."""

    def __init__(
        self,
        expander: IncludeExpander,
        pages_dir: Path,
        out_dir: Path,
        *,
        empty_out_dir: bool = True,
    ) -> None:
        self.expander = expander
        self.pages_dir = Path(pages_dir)
        self.out_dir = Path(out_dir)
        self.empty_out_dir = empty_out_dir

    @classmethod
    def from_config(cls, config) -> "PageBuilder":
        """Create a builder from a CompositionConfig."""
        return cls(
            IncludeExpander.from_config(config),
            pages_dir=config.pages_dir,
            out_dir=config.out_dir,
            empty_out_dir=config.empty_out_dir,
        )

    def build(self, pages: Optional[List[str]] = None) -> List[ExpansionReport]:
        """Build all pages, or only the named ones.

        Raises:
            MarkupParseError: When a page or one of its fragments cannot be parsed.
            ConfigError: When emptying ``out_dir`` would delete the sources.
        """
        available = discover_pages(self.pages_dir)
        selected = available if pages is None else {n: available[n] for n in pages if n in available}
        for missing in sorted(set(pages or []) - set(available)):
            logger.warning("Page not found: %s", missing)

        if self.empty_out_dir and self.out_dir.exists():
            self._check_out_dir()
            shutil.rmtree(self.out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)

        reports: List[ExpansionReport] = []
        for name, path in selected.items():
            reports.append(self.build_page(path))
            logger.info("Built page %s", name)
        return reports

    def _check_out_dir(self) -> None:
        """Refuse to empty an output directory that holds the sources.

        Raises:
            ConfigError: When ``out_dir`` is, or contains, the pages
                directory or the fragment root.
        """
        out_dir = self.out_dir.resolve()
        for label, source in (("pages_dir", self.pages_dir), ("root", self.expander.root)):
            source = source.resolve()
            if source == out_dir or out_dir in source.parents:
                raise ConfigError(
                    f"Refusing to empty out_dir {out_dir}: it contains {label} {source}",
                    context={"out_dir": str(out_dir), label: str(source)},
                )

    def build_page(self, path: Path) -> ExpansionReport:
        markup = path.read_text(encoding=self.expander.encoding)
        html, report = self.expander.process(markup, document=path.name)
        target = self.out_dir / path.name
        # Characters the output encoding cannot hold become numeric references.
        target.write_text(html, encoding=self.expander.encoding, errors="xmlcharrefreplace")
        report.output_path = target
        return report


__all__ = ["discover_pages", "PageBuilder"]
