# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for validation artifacts."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["warning", "error"]


@dataclass(frozen=True)
class ValidationIssue:
    """Represent one documentation rule violation.

    Attributes:
        message: Human-readable description of the violation.
        severity: Issue severity.
        line: Source line the issue points at (1-based).
        field: Tag or signature element at fault, e.g. ``@param``.
    """

    message: str
    severity: Severity
    line: int
    field: str


@dataclass(frozen=True)
class ValidationResult:
    """Represent the validation outcome for one circuit.

    Attributes:
        circuit_name: Validated circuit name.
        file_path: Source file path.
        line: Circuit declaration line (1-based).
        is_valid: ``True`` iff ``issues`` is empty.
        issues: Issues in rule order.
    """

    circuit_name: str
    file_path: str
    line: int
    is_valid: bool
    issues: list[ValidationIssue]


@dataclass(frozen=True)
class FileSummary:
    """Represent aggregate validation counters for one file."""

    file_path: str
    total_circuits: int
    valid_circuits: int
    circuits_with_issues: int
    total_warnings: int
    total_errors: int
