"""Composition configuration domain.

CompositionConfig is the ONLY way to access the ``composition`` section.
Relative directories are resolved against the project root.
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path

from ..base import BaseDomainConfig


class CompositionConfig(BaseDomainConfig):
    """Accessor for include expansion and page build settings."""

    def _config_section(self) -> str:
        return "composition"

    @cached_property
    def root(self) -> Path:
        """Directory every include ``src`` is resolved against."""
        return self._project_path(str(self.section.get("root", "src")))

    @cached_property
    def pages_dir(self) -> Path:
        return self._project_path(str(self.section.get("pages_dir", "src/pages")))

    @cached_property
    def out_dir(self) -> Path:
        return self._project_path(str(self.section.get("out_dir", "dist")))

    @cached_property
    def empty_out_dir(self) -> bool:
        return bool(self.section.get("empty_out_dir", True))

    @cached_property
    def encoding(self) -> str:
        return str(self.section.get("encoding", "utf-8"))

    @cached_property
    def max_depth(self) -> int:
        return int(self.section.get("max_depth", 10))


__all__ = ["CompositionConfig"]
