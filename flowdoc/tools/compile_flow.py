#!/usr/bin/env python3
"""
compile_flow.py - Compile an editor model file into Flow JSON (or back).

The editor model may be JSON or YAML. Compile warnings (dropped or
adjusted components) go to stderr; the document goes to stdout or --output.

Exit codes:
  0 - Compiled (and, with --validate, the result is valid)
  1 - --validate found problems in the compiled document
  2 - Fatal error (file missing, unreadable, flow has no name)

Usage:
  flowdoc-compile editor.yaml
  flowdoc-compile editor.json --validate --output flow.json
  flowdoc-compile flow.json --reverse
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from flowdoc.spec.compiler import FlowCompiler
from flowdoc.spec.errors import FlowSpecError
from flowdoc.spec.parser import parse_document
from flowdoc.validator.flow_validator import validate

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_VALIDATION_FAILED = 1
EXIT_FATAL_ERROR = 2

YAML_SUFFIXES = (".yaml", ".yml")


def load_input(path: Path) -> Any:
    """Read a JSON or YAML file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content does not parse.
    """
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e


def write_output(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %s", output)
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Flow Document compiler - editor model to Flow JSON and back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0 - Compiled successfully
  1 - Compiled, but --validate found problems
  2 - Fatal error (unreadable input, missing flow name)

Examples:
  flowdoc-compile editor.yaml
  flowdoc-compile editor.json --validate --output flow.json
  flowdoc-compile flow.json --reverse
        """
    )
    parser.add_argument("editor_file", metavar="EDITOR_FILE", help="Editor model (JSON or YAML)")
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="Treat the input as Flow JSON and emit the editor model",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the compiled document and fail on errors",
    )
    parser.add_argument("--output", "-o", metavar="PATH", help="Write the result to PATH")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.editor_file)
    try:
        data = load_input(path)
    except (OSError, ValueError) as e:
        print(f"ERROR: Cannot load {path}: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL_ERROR)

    try:
        if args.reverse:
            flow = parse_document(data)
            write_output(json.dumps(flow.to_dict(), indent=2, ensure_ascii=False), args.output)
            sys.exit(EXIT_SUCCESS)
        if not isinstance(data, dict):
            print(f"ERROR: {path} must contain an editor model object", file=sys.stderr)
            sys.exit(EXIT_FATAL_ERROR)
        result = FlowCompiler().compile(data)
    except FlowSpecError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL_ERROR)

    if result.warnings:
        logger.info("%d compile warnings", len(result.warnings))

    write_output(result.document.to_json(), args.output)

    if args.validate:
        report = validate(result.document)
        if report.has_errors():
            for error in report.sorted_errors():
                print(error.format(), file=sys.stderr)
            print(f"\nCompiled document is INVALID ({len(report.errors)} errors).", file=sys.stderr)
            sys.exit(EXIT_VALIDATION_FAILED)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
