"""
htmlcompose CLI package.

Provides the command-line interface with auto-discovery of commands from
the commands/ subfolder.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json
from ._args import add_json_flag, add_project_root_flag, add_standard_flags, add_verbose_flag
from ._utils import get_project_root, setup_logging

__all__ = [
    "OutputFormatter",
    "format_json",
    "add_json_flag",
    "add_project_root_flag",
    "add_standard_flags",
    "add_verbose_flag",
    "get_project_root",
    "setup_logging",
]
