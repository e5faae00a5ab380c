"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from htmlcompose.core.config import LoggingConfig
from htmlcompose.core.utils.stdlib_logging import configure_stdlib_logging

_VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


def get_project_root(args: argparse.Namespace) -> Path:
    """Get project root from args, else the current directory."""
    raw = getattr(args, "project_root", None)
    if raw:
        return Path(raw).resolve()
    return Path.cwd().resolve()


def setup_logging(args: argparse.Namespace) -> None:
    """Configure logging from project config, raised by -v flags."""
    cfg = LoggingConfig(repo_root=get_project_root(args))
    verbose = int(getattr(args, "verbose", 0) or 0)
    level = _VERBOSITY_LEVELS.get(min(verbose, 2), cfg.level)
    configure_stdlib_logging(level=level, log_path=cfg.file)
