"""
htmlcompose build command.

SUMMARY: Build every page of the project into the output directory
"""

from __future__ import annotations

import argparse

from htmlcompose.cli import OutputFormatter, add_standard_flags, get_project_root, setup_logging
from htmlcompose.core.composition import PageBuilder
from htmlcompose.core.config import CompositionConfig
from htmlcompose.core.exceptions import HtmlComposeError

SUMMARY = "Build every page of the project into the output directory"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "pages",
        nargs="*",
        help="Page names to build (file stems; default: all pages)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when any include could not be expanded",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Build pages - delegates to PageBuilder."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        setup_logging(args)
        cfg = CompositionConfig(repo_root=get_project_root(args))
        builder = PageBuilder.from_config(cfg)
        reports = builder.build(pages=args.pages or None)
    except (HtmlComposeError, OSError, UnicodeError) as e:
        formatter.error(e, error_code="build_error")
        return 1

    failed = [r for r in reports if r.errors]
    formatter.success(
        {
            "out_dir": str(cfg.out_dir),
            "pages": [r.to_dict() for r in reports],
        },
        "\n".join([r.summary() for r in reports] + [f"Built {len(reports)} page(s) into {cfg.out_dir}"]),
        status="partial" if failed else "success",
    )
    if args.strict and failed:
        return 1
    return 0
