"""Shared utilities (YAML io, dict merging, logging setup)."""
from __future__ import annotations

from .io import read_yaml
from .merge import deep_merge
from .stdlib_logging import configure_stdlib_logging, reset_stdlib_logging_for_tests

__all__ = ["read_yaml", "deep_merge", "configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
