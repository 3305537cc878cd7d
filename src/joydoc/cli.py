"""Command line entry point: joydoc-validate PATH..."""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from joydoc.config.project import ProjectConfig
from joydoc.core.validator import JoyDocValidator
from joydoc.handlers import get_handler


EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2

logger = logging.getLogger("joydoc")


def setup_logger(verbose: bool = False) -> logging.Logger:
    """Setup the joydoc logger with a Rich handler on stderr.

    stdout is reserved for results so --json output stays parseable.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joydoc-validate",
        description="Validate JoyDoc documents (.json, .yaml, .yml)",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Document file(s) to validate")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--warnings", action="store_true", help="Also print advisory warnings")
    parser.add_argument("--config", metavar="DIR", help="Directory containing .joydoc/config.json")
    parser.add_argument("--export-schema", metavar="FILE", help="Write the JSON Schema to FILE")
    parser.add_argument("--schema-version", metavar="VERSION", help="$joyfillSchemaVersion for --export-schema")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _print_text(path: str, entry: dict, show_warnings: bool) -> None:
    status = "valid" if entry["valid"] else "INVALID"
    print(f"{path}: {status}")
    for v in entry["violations"]:
        print(f"  [{v['code']}] {v['path']}: {v['message']}")
    if show_warnings:
        for w in entry["warnings"]:
            print(f"  warning [{w['code']}] {w['path']}: {w['message']}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.paths and not args.export_schema:
        parser.error("at least one PATH or --export-schema is required")
    setup_logger(args.verbose)

    try:
        config = ProjectConfig(Path(args.config) if args.config else None)
        context = config.to_context()
    except (OSError, ValueError) as e:
        logger.error("Could not load config: %s", e)
        return EXIT_UNREADABLE

    validator = JoyDocValidator(context)

    if args.export_schema:
        try:
            exported = get_handler("export_schema")(
                validator, {"version": args.schema_version, "output_path": args.export_schema},
            )
        except OSError as e:
            logger.error("Could not write %s: %s", args.export_schema, e)
            return EXIT_UNREADABLE
        logger.info("Wrote JSON Schema to %s", exported["output_path"])

    validate = get_handler("validate_document")
    exit_code = EXIT_VALID
    report = {}

    for path in args.paths:
        try:
            entry = validate(validator, {"doc_path": path})
        except (OSError, ValueError) as e:
            logger.error("Could not load %s: %s", path, e)
            report[path] = {"error": str(e)}
            exit_code = EXIT_UNREADABLE
            continue

        if not entry["valid"] and exit_code == EXIT_VALID:
            exit_code = EXIT_INVALID

        if args.json:
            if not args.warnings:
                entry.pop("warnings")
                entry.pop("warning_count")
            report[path] = entry
        else:
            _print_text(path, entry, args.warnings)

    if args.json and args.paths:
        print(json.dumps(report, indent=2, ensure_ascii=False))
    elif any("error" in entry for entry in report.values()):
        for path, entry in report.items():
            if "error" in entry:
                print(f"{path}: ERROR {entry['error']}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
