"""
htmlcompose render command.

SUMMARY: Expand includes in one document and print the result
"""

from __future__ import annotations

import argparse
from pathlib import Path

from htmlcompose.cli import OutputFormatter, add_standard_flags, get_project_root, setup_logging
from htmlcompose.core.composition import IncludeExpander
from htmlcompose.core.config import CompositionConfig
from htmlcompose.core.exceptions import HtmlComposeError

SUMMARY = "Expand includes in one document and print the result"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("file", help="Document to expand")
    parser.add_argument(
        "--root",
        type=str,
        help="Directory include paths are resolved against (default: composition.root)",
    )
    parser.add_argument("--encoding", type=str, help="Text encoding (default: composition.encoding)")
    parser.add_argument("--max-depth", type=int, help="Maximum fragment nesting depth")
    parser.add_argument("--output", "-o", type=str, help="Write to this file instead of stdout")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Render a single document."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        setup_logging(args)
        cfg = CompositionConfig(repo_root=get_project_root(args))
        expander = IncludeExpander(
            root=Path(args.root).resolve() if args.root else cfg.root,
            encoding=args.encoding or cfg.encoding,
            max_depth=args.max_depth if args.max_depth is not None else cfg.max_depth,
        )
        source = Path(args.file)
        markup = source.read_text(encoding=expander.encoding)
        html, report = expander.process(markup, document=source.name)

        if args.output:
            target = Path(args.output)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding=expander.encoding, errors="xmlcharrefreplace")
            report.output_path = target
            formatter.success({"report": report.to_dict()}, report.summary())
        elif formatter.json_mode:
            formatter.json_output({"html": html, "report": report.to_dict()})
        else:
            formatter.text(html)
        return 0

    except (HtmlComposeError, OSError, UnicodeError) as e:
        formatter.error(e, error_code="render_error")
        return 1
