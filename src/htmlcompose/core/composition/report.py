"""Expansion reporting dataclasses.

Provides structured reports for include expansion.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class ExpansionReport:
    """Report from expanding one document.

    Contains:
    - Fragments included (in resolution order)
    - Number of placeholders substituted
    - Warnings (invalid directives) and errors (unreadable fragments, cycles)
    """

    document: str = "<document>"
    timestamp: datetime = field(default_factory=datetime.now)
    output_path: Optional[Path] = None

    includes_resolved: List[str] = field(default_factory=list)
    placeholders_resolved: int = 0

    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Check if there are any warnings or errors."""
        return bool(self.warnings or self.errors)

    def record_include(self, src: str) -> None:
        """Record that an include was resolved."""
        self.includes_resolved.append(src)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "document": self.document,
            "timestamp": self.timestamp.isoformat(),
            "output_path": str(self.output_path) if self.output_path else None,
            "includes_resolved": list(self.includes_resolved),
            "placeholders_resolved": self.placeholders_resolved,
            "warnings": self.warnings,
            "errors": self.errors,
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Expansion Report: {self.document}",
            f"  Includes: {len(self.includes_resolved)}",
            f"  Placeholders: {self.placeholders_resolved}",
        ]
        if self.output_path:
            lines.append(f"  Output: {self.output_path}")
        for warning in self.warnings:
            lines.append(f"  WARNING: {warning}")
        for error in self.errors:
            lines.append(f"  ERROR: {error}")
        return "\n".join(lines)


__all__ = ["ExpansionReport"]
