"""
htmlcompose config command.

SUMMARY: Show the effective configuration
"""

from __future__ import annotations

import argparse

import yaml

from htmlcompose.cli import OutputFormatter, add_standard_flags, get_project_root
from htmlcompose.core.config import ConfigManager
from htmlcompose.core.exceptions import ConfigError

SUMMARY = "Show the effective configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "section",
        nargs="?",
        help="Only show this top-level section (e.g. composition)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Print merged configuration (defaults < htmlcompose.yaml < env)."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        cfg = ConfigManager(repo_root=get_project_root(args)).load_config()
    except ConfigError as e:
        formatter.error(e, error_code="config_error")
        return 1

    data = cfg
    if args.section:
        if args.section not in cfg:
            formatter.error(KeyError(args.section), f"Unknown config section: {args.section}")
            return 1
        data = {args.section: cfg[args.section]}

    if formatter.json_mode:
        formatter.json_output(data)
    else:
        formatter.text(yaml.safe_dump(data, sort_keys=False).rstrip())
    return 0
