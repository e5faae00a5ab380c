import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'htmlcompose'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from htmlcompose.core.config.cache import clear_all_caches
from htmlcompose.core.utils.stdlib_logging import reset_stdlib_logging_for_tests


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Drop HTMLCOMPOSE_* env overrides and cached config around every test."""
    for key in list(os.environ):
        if key.startswith("HTMLCOMPOSE_"):
            monkeypatch.delenv(key, raising=False)
    clear_all_caches()
    yield
    clear_all_caches()
    reset_stdlib_logging_for_tests()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Empty fragment root directory."""
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def write_fragment(site_root: Path) -> Callable[[str, str], Path]:
    """Write a fragment file relative to ``site_root``."""

    def _write(rel: str, text: str) -> Path:
        path = site_root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
