# flowdoc/validator/errors.py
"""Validation error collection and formatting."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

# Error message template: [FAIL] TYPE: location problem -> Fix: action
ERROR_TEMPLATE = "[FAIL] {error_type}: {location} {problem}\n  Fix: {fix_action}"

# Error types
UNKNOWN_COMPONENT_KIND = "UnknownComponentKind"
MISSING_REQUIRED_FIELD = "MissingRequiredField"
FORBIDDEN_FIELD_PRESENT = "ForbiddenFieldPresent"
INVALID_IDENTIFIER_FORMAT = "InvalidIdentifierFormat"
INVALID_ACTION_NAME = "InvalidActionName"
INVALID_DATA_SOURCE_FORMAT = "InvalidDataSourceFormat"
STRUCTURAL_CONSTRAINT_VIOLATION = "StructuralConstraintViolation"
DOCUMENT_PARSE_FAILURE = "DocumentParseFailure"

_DIGITS = re.compile(r"(\d+)")


def _natural_key(text: str) -> Tuple[Any, ...]:
    """Split digits out so Screen[10] sorts after Screen[2]."""
    return tuple(
        (0, int(part)) if part.isdigit() else (1, part)
        for part in _DIGITS.split(text)
        if part
    )


class ValidationError:
    """Structured validation error."""

    def __init__(
        self,
        error_type: str,
        location: str,
        problem: str,
        fix_action: str,
        sequence: int = 0,
    ):
        self.error_type = error_type
        self.location = location
        self.problem = problem
        self.fix_action = fix_action
        self.sequence = sequence

    @property
    def message(self) -> str:
        """One-line form used in ``{valid, errors}`` results."""
        return f"{self.location}: {self.problem}"

    def format(self) -> str:
        """Format error message."""
        return ERROR_TEMPLATE.format(
            error_type=self.error_type,
            location=self.location,
            problem=self.problem,
            fix_action=self.fix_action,
        )

    def sort_key(self) -> Tuple[Any, ...]:
        """Sort key for deterministic ordering."""
        return (_natural_key(self.location), self.sequence)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "type": self.error_type,
            "location": self.location,
            "problem": self.problem,
            "fix_action": self.fix_action,
            "message": self.message,
        }


class ValidationResult:
    """Collects validation errors and warnings."""

    def __init__(self):
        self.errors: List[ValidationError] = []
        self.warnings: List[ValidationError] = []
        self._sequence = 0

    def _next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def add_error(
        self,
        error_type: str,
        location: str,
        problem: str,
        fix_action: str,
    ):
        """Add a validation error."""
        self.errors.append(
            ValidationError(error_type, location, problem, fix_action, self._next_sequence())
        )

    def add_warning(
        self,
        error_type: str,
        location: str,
        problem: str,
        fix_action: str,
    ):
        """Add a validation warning (accepted by the platform, but suspicious)."""
        self.warnings.append(
            ValidationError(error_type, location, problem, fix_action, self._next_sequence())
        )

    def extend(self, other: "ValidationResult"):
        """Extend with errors and warnings from another result."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        """Error lines in deterministic order."""
        return [e.message for e in self.sorted_errors()]

    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if any warnings were collected."""
        return len(self.warnings) > 0

    def sorted_errors(self) -> List[ValidationError]:
        """Get errors in deterministic order."""
        return sorted(self.errors, key=lambda e: e.sort_key())

    def sorted_warnings(self) -> List[ValidationError]:
        """Get warnings in deterministic order."""
        return sorted(self.warnings, key=lambda e: e.sort_key())

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "valid": self.valid,
            "errors": self.messages,
            "details": [e.to_dict() for e in self.sorted_errors()],
            "warnings": [w.to_dict() for w in self.sorted_warnings()],
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "status": "FAIL" if self.has_errors() else "PASS",
        }
