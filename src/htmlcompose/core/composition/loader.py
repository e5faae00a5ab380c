"""Fragment loading against a fixed root directory."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .attributes import rewrite_attribute_slots
from .errors import FragmentReadError
from .markup import parse_markup
from .nodes import Content
from .slots import SlotMap

logger = logging.getLogger(__name__)


class FragmentLoader:
    """Resolve include references and load fragments from ``root``.

    Every ``src`` is resolved against the same root, regardless of which file
    the include directive was written in.
    """

    def __init__(self, root: Path, encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.encoding = encoding

    def resolve(self, src: str) -> Path:
        """Return the absolute path for an include reference."""
        return (self.root / src).resolve()

    def read(self, src: str) -> str:
        """Read fragment source text.

        Raises:
            FragmentReadError: When the file cannot be read.
        """
        path = self.resolve(src)
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            cause = exc if isinstance(exc, OSError) else OSError(str(exc))
            raise FragmentReadError(path, cause) from exc

    def load(self, src: str, slots: Optional[SlotMap] = None) -> List[Content]:
        """Read, rewrite attribute placeholders, and parse a fragment."""
        source = self.read(src)
        source = rewrite_attribute_slots(source, slots or {})
        logger.debug("Loaded fragment %s (%d chars)", src, len(source))
        return parse_markup(source)


__all__ = ["FragmentLoader"]
