"""CLI entrypoint for readmegen."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from jinja2 import TemplateError

from .assembler import available_templates
from .collector import PromptAborted, PromptCollector
from .logging import configure_logging
from .orchestrator import Orchestrator

END_MESSAGE = (
    "README.md was successfully generated.\n"
    "Thanks for using readmegen!"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a README.md from project metadata and a few questions.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-p",
        "--path",
        dest="template_path",
        type=Path,
        default=None,
        help="Path to a custom jinja2 README template.",
    )
    parser.add_argument(
        "-t",
        "--template",
        choices=available_templates(),
        default=None,
        help="Built-in template to use instead of asking.",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Use default values for all fields without prompting.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.template_path is not None and not args.template_path.is_file():
        parser.exit(1, f"Template not found: {args.template_path}\n")

    orchestrator = Orchestrator(collector=PromptCollector(skip_prompts=bool(args.yes)))
    try:
        outcome = asyncio.run(
            orchestrator.run(
                args.path,
                custom_template=args.template_path,
                template=args.template,
            )
        )
    except PromptAborted as exc:
        parser.exit(1, f"\nreadmegen stopped: {exc}\n")
    except NotADirectoryError as exc:
        parser.exit(1, f"{exc}\n")
    except TemplateError as exc:
        parser.exit(1, f"Unable to render README template: {exc}\n")

    if outcome.written:
        print(END_MESSAGE)


if __name__ == "__main__":
    main(sys.argv[1:])
