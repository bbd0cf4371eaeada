# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run extraction and validation over source files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from docslint.analyzer import AnalyzerError, CircuitAnalyzer
from docslint.analyzers import CompactAnalyzer
from docslint.model import FileSummary, ValidationResult
from docslint.validator import DocValidator, ValidatorConfig

logger = logging.getLogger(__name__)

ReadText = Callable[[Path], str]


@dataclass(frozen=True)
class FileReport:
    """Represent validation output for one file."""

    file_path: str
    results: list[ValidationResult]
    summary: FileSummary


@dataclass(frozen=True)
class RunSummary:
    """Represent counters totaled across all linted files."""

    files_checked: int
    total_circuits: int
    valid_circuits: int
    circuits_with_issues: int
    total_warnings: int
    total_errors: int

    @classmethod
    def from_reports(cls, reports: list[FileReport]) -> "RunSummary":
        summaries = [report.summary for report in reports]
        return cls(
            files_checked=len(summaries),
            total_circuits=sum(s.total_circuits for s in summaries),
            valid_circuits=sum(s.valid_circuits for s in summaries),
            circuits_with_issues=sum(s.circuits_with_issues for s in summaries),
            total_warnings=sum(s.total_warnings for s in summaries),
            total_errors=sum(s.total_errors for s in summaries),
        )

    @property
    def has_issues(self) -> bool:
        return self.circuits_with_issues > 0


def read_utf8(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class DocsLinter:
    """Lint documentation of circuits in source text or files."""

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        analyzer: CircuitAnalyzer | None = None,
    ) -> None:
        """Initialize linter.

        Args:
            config: Rule selection passed to the validator.
            analyzer: Circuit extractor; defaults to ``CompactAnalyzer``.
        """
        self._analyzer = analyzer or CompactAnalyzer()
        self._validator = DocValidator(config=config)

    def lint_source(self, source: str, file_path: str) -> FileReport:
        """Extract and validate the circuits of one file's text.

        Args:
            source: Full file text.
            file_path: Path reported in results.

        Returns:
            Per-circuit results and the file summary.
        """
        records = self._analyzer.analyze(source)
        results = self._validator.validate_all(records, file_path)
        return FileReport(
            file_path=file_path,
            results=results,
            summary=self._validator.summarize(results, file_path),
        )

    def lint_files(
        self, file_paths: list[Path], read_text: ReadText = read_utf8
    ) -> tuple[list[FileReport], list[AnalyzerError]]:
        """Lint each file, continuing past files that cannot be read.

        Args:
            file_paths: Files to lint, in reporting order.
            read_text: Function returning one file's text.

        Returns:
            A tuple of file reports and recoverable read errors.
        """
        reports: list[FileReport] = []
        errors: list[AnalyzerError] = []
        for file_path in file_paths:
            try:
                source = read_text(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    f"Skipping file due to read failure (file_path={file_path} error={exc})"
                )
                errors.append(AnalyzerError(file_path=str(file_path), message=str(exc)))
                continue
            reports.append(self.lint_source(source, str(file_path)))
        logger.info(f"Lint completed (files={len(reports)} errors={len(errors)})")
        return reports, errors
