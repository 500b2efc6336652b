#!/usr/bin/env python3
"""
validate_flow.py - Validate a Flow Document file against the component registry.

Reports every violation in one pass:
- Root: version, screens, data_api_version/routing_model hoisting
- Screens: identifiers, layout, exactly one TextBody, uploads, terminal flag,
  declared data sources and example arrays
- Components: known kind, required/forbidden fields, identifiers, actions,
  navigate targets, data-source format, upload options

Exit codes:
  0 - Document is valid
  1 - Validation failed
  2 - Fatal error (file missing or not JSON)

Usage:
  flowdoc-validate flow.json
  flowdoc-validate flow.json --json
  flowdoc-validate flow.json --report markdown
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from flowdoc.validator.errors import DOCUMENT_PARSE_FAILURE, ValidationError, ValidationResult
from flowdoc.validator.flow_validator import validate

logger = logging.getLogger(__name__)

# Exit codes per contract
EXIT_SUCCESS = 0
EXIT_VALIDATION_FAILED = 1
EXIT_FATAL_ERROR = 2


# ============================================================================
# Reports
# ============================================================================

def build_report_json(result: ValidationResult, flow_file: str) -> Dict[str, Any]:
    """Build the machine-readable report."""
    report = result.to_dict()
    report["file"] = flow_file
    report["timestamp"] = datetime.now(timezone.utc).isoformat(timespec="seconds")
    return report


def build_report_markdown(result: ValidationResult, flow_file: str) -> str:
    """Build markdown validation report."""
    lines: List[str] = []

    lines.append("# Flow Validation Report")
    lines.append("")
    lines.append(f"**File**: {flow_file}")
    lines.append(f"**Timestamp**: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')}")
    lines.append(f"**Status**: {'PASSED' if not result.has_errors() else 'FAILED'}")
    lines.append("")

    error_count = len(result.errors)
    lines.append(f"## Errors ({error_count})")
    lines.append("")

    if error_count == 0:
        lines.append("_No errors found._")
    else:
        for error in result.sorted_errors():
            lines.append(f"### {error.error_type}")
            lines.append(f"**Location**: {error.location}")
            lines.append(f"**Error**: {error.problem}")
            if error.fix_action:
                lines.append(f"**Fix**: {error.fix_action}")
            lines.append("")

    lines.append("")

    warning_count = len(result.warnings)
    lines.append(f"## Warnings ({warning_count})")
    lines.append("")

    if warning_count == 0:
        lines.append("_No warnings._")
    else:
        for warning in result.sorted_warnings():
            lines.append(f"### {warning.error_type}")
            lines.append(f"**Location**: {warning.location}")
            lines.append(f"**Warning**: {warning.problem}")
            if warning.fix_action:
                lines.append(f"**Fix**: {warning.fix_action}")
            lines.append("")

    return "\n".join(lines)


# ============================================================================
# CLI and Main
# ============================================================================

def print_warnings(result: ValidationResult) -> None:
    """Print warnings to stderr grouped by type."""
    if not result.has_warnings():
        return
    by_type: Dict[str, List[ValidationError]] = defaultdict(list)
    for warning in result.sorted_warnings():
        by_type[warning.error_type].append(warning)

    print("\n", file=sys.stderr)
    print("=" * 70, file=sys.stderr)
    print("WARNINGS (accepted by the platform, but worth a look):", file=sys.stderr)
    print("=" * 70, file=sys.stderr)
    for warn_type in sorted(by_type.keys()):
        warnings = by_type[warn_type]
        print(f"\n{warn_type} Warnings ({len(warnings)}):", file=sys.stderr)
        for warning in warnings:
            print(warning.format().replace("[FAIL]", "[WARN]"), file=sys.stderr)


def print_success(result: ValidationResult) -> None:
    """Print success message to stdout, including warnings if any."""
    print("Flow validation PASSED.")
    print("  [PASS] Every component matches its registry contract")
    print("  [PASS] Every screen satisfies the layout rules")
    print_warnings(result)


def print_errors(result: ValidationResult) -> None:
    """Print errors and warnings to stderr in deterministic order."""
    by_type: Dict[str, List[ValidationError]] = defaultdict(list)
    for error in result.sorted_errors():
        by_type[error.error_type].append(error)

    for error_type in sorted(by_type.keys()):
        errors = by_type[error_type]
        print(f"\n{error_type} Errors ({len(errors)}):", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        for error in errors:
            print(error.format(), file=sys.stderr)

    print_warnings(result)
    print(f"\nFlow validation FAILED ({len(result.errors)} errors).", file=sys.stderr)


def _exit_code(result: ValidationResult) -> int:
    if any(e.error_type == DOCUMENT_PARSE_FAILURE for e in result.errors):
        return EXIT_FATAL_ERROR
    return EXIT_VALIDATION_FAILED if result.has_errors() else EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Flow Document validator - check Flow JSON against the component registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0 - All validation checks passed
  1 - Validation failed
  2 - Fatal error (file missing, not JSON)

Examples:
  flowdoc-validate flow.json
  flowdoc-validate flow.json --json
  flowdoc-validate flow.json --report markdown
        """
    )

    parser.add_argument("flow_file", metavar="FLOW_FILE", help="Flow JSON file to validate")

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Output the full validation result as JSON"
    )
    output.add_argument(
        "--report",
        choices=["json", "markdown"],
        help="Output format for validation report (json or markdown)"
    )

    args = parser.parse_args(argv)

    path = Path(args.flow_file)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"ERROR: Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL_ERROR)

    result = validate(content)
    exit_code = _exit_code(result)

    if args.report == "json":
        print(json.dumps(build_report_json(result, str(path)), indent=2))
    elif args.report == "markdown":
        print(build_report_markdown(result, str(path)))
    elif args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.has_errors():
        print_errors(result)
    else:
        print_success(result)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
