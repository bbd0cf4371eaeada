# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the Compact documentation linter."""

from docslint.analyzer import (
    AnalyzerError,
    CircuitRecord,
    CircuitSignature,
    DocParam,
    DocReturns,
    DocThrows,
    ParameterSignature,
    ParsedDoc,
)
from docslint.analyzers import CompactAnalyzer
from docslint.discovery import DiscoveryError, discover_compact_files
from docslint.linter import DocsLinter, FileReport, RunSummary
from docslint.model import FileSummary, Severity, ValidationIssue, ValidationResult
from docslint.validator import DocValidator, ValidatorConfig

__all__ = [
    "AnalyzerError",
    "CircuitRecord",
    "CircuitSignature",
    "CompactAnalyzer",
    "DiscoveryError",
    "DocParam",
    "DocReturns",
    "DocThrows",
    "DocValidator",
    "DocsLinter",
    "FileReport",
    "FileSummary",
    "ParameterSignature",
    "ParsedDoc",
    "RunSummary",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "ValidatorConfig",
    "discover_compact_files",
]
