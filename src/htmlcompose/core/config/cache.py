"""Centralized configuration caching.

Provides a single source of truth for loaded configuration across all domain
configs, keyed by project root, environment overrides and config file mtime.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

_config_cache: Dict[str, Dict[str, Any]] = {}


def _normalize_repo_root(repo_root: Optional[Path]) -> Path:
    if repo_root is None:
        return Path.cwd().resolve()
    return Path(repo_root).expanduser().resolve()


def _cache_key(repo_root: Path, validate: bool) -> str:
    from .manager import ENV_PREFIX, PROJECT_CONFIG_FILENAMES

    # Tests and long-running processes may mutate HTMLCOMPOSE_* env vars or
    # rewrite the project file after an initial load.
    env_items = sorted((k, v) for k, v in os.environ.items() if k.startswith(ENV_PREFIX))
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]

    files = []
    for name in PROJECT_CONFIG_FILENAMES:
        path = repo_root / name
        if path.exists():
            st = path.stat()
            files.append((name, int(st.st_mtime_ns), int(st.st_size)))
    cfg_fp = hashlib.sha256(repr(files).encode("utf-8")).hexdigest()[:12]

    return f"{repo_root}:validate={validate}:env={env_fp}:cfg={cfg_fp}"


def get_cached_config(repo_root: Optional[Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Get configuration with caching.

    Args:
        repo_root: Project root path. Uses the current directory if None.
        validate: Whether to validate against the bundled schema.

    Returns:
        Configuration dictionary (cached; treat as immutable).
    """
    normalized_root = _normalize_repo_root(repo_root)
    key = _cache_key(normalized_root, validate)
    if key not in _config_cache:
        from .manager import ConfigManager

        manager = ConfigManager(repo_root=normalized_root)
        # IMPORTANT: call the uncached loader to avoid recursion
        _config_cache[key] = manager._load_config_uncached(validate=validate)
    return _config_cache[key]


def clear_all_caches() -> None:
    """Clear all configuration caches."""
    from htmlcompose.data import clear_caches

    _config_cache.clear()
    clear_caches()


def is_cached(repo_root: Optional[Path] = None, validate: bool = True) -> bool:
    """Check if config for repo_root is cached."""
    normalized_root = _normalize_repo_root(repo_root)
    return _cache_key(normalized_root, validate) in _config_cache


__all__ = ["get_cached_config", "clear_all_caches", "is_cached"]
