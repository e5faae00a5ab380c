"""Composition error classes."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from htmlcompose.core.exceptions import HtmlComposeError


class CompositionError(HtmlComposeError):
    """Raised when a document cannot be composed."""
    pass


class FragmentReadError(CompositionError, OSError):
    """Raised when a fragment file cannot be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        message = f"Could not read file: {path}"
        CompositionError.__init__(self, message, context={"path": str(path), "reason": str(cause)})
        OSError.__init__(self, message)
        self.path = path
        self.cause = cause


class MarkupParseError(CompositionError):
    """Raised when markup text is rejected by the parser."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, context=context)
