"""CLI entrypoints for wfindex commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .inspector import InspectionResult, WorkflowInspector
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_workflow_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Path to the workflow repository root (defaults to current directory).",
    )
    parser.add_argument(
        "--path",
        required=True,
        help="Root-anchored path of the primary descriptor, e.g. /workflow/Snakefile.",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Language name (snakemake, swl). Detected from --path when omitted.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON instead of text.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wfindex",
        description="Discover and validate the files that make up a workflow repository.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    languages_parser = subparsers.add_parser(
        "languages",
        help="List the workflow languages enabled for a repository.",
    )
    _add_verbose_option(languages_parser, suppress_default=True)
    languages_parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )

    index_parser = subparsers.add_parser(
        "index",
        help="List every file that belongs to a workflow.",
    )
    _add_verbose_option(index_parser, suppress_default=True)
    _add_workflow_arguments(index_parser)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Index a workflow and check it against its language's conventions.",
    )
    _add_verbose_option(validate_parser, suppress_default=True)
    _add_workflow_arguments(validate_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for wfindex commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.root))
    except ConfigError as exc:
        parser.exit(1, f"wfindex: {exc}\n")

    configure_logging(config.logging, verbose=bool(args.verbose))
    inspector = WorkflowInspector(config)

    if args.command == "languages":
        try:
            languages = inspector.languages()
        except ValueError as exc:
            parser.exit(1, f"wfindex: {exc}\n")
        for name, language in languages.items():
            print(f"{name}\t{language.short_name}\t{language.long_name}")
        return 0

    try:
        result = inspector.inspect(args.root, args.path, language=args.language)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"wfindex: {exc}\n")
    except ValueError as exc:
        parser.exit(1, f"wfindex {args.command} failed: {exc}\n")

    if args.command == "index":
        _print_index(result, as_json=bool(args.json))
        return 0
    if args.command == "validate":
        _print_validation(result, as_json=bool(args.json))
        return 0 if result.valid else 1
    parser.exit(1, "Unknown command\n")  # pragma: no cover - argparse enforces choices
    return 1


def _print_index(result: InspectionResult, *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
        return
    print(f"{result.language.long_name} workflow at {result.initial_path}")
    for path, record in sorted(result.files.items()):
        print(f"  {path}\t{record.role.value}")


def _print_validation(result: InspectionResult, *, as_json: bool) -> None:
    if as_json:
        payload = result.to_dict()
        payload.pop("files", None)
        print(json.dumps(payload, indent=2, sort_keys=True))
        return
    status = "valid" if result.valid else "invalid"
    print(f"{result.initial_path}: {status} ({result.language.short_name}, {len(result.files)} files)")
    for path, message in sorted(result.workflow_validation.messages.items()):
        print(f"  {path}: {message}")


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
