# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation consistency rules for extracted circuits."""

import logging
import re
from dataclasses import dataclass, replace

import Levenshtein

from docslint.analyzer import CircuitRecord
from docslint.model import FileSummary, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

CIRCUIT_INFO_PATTERN = re.compile(r"k\s*=\s*(\d+)\s*,\s*rows\s*=\s*(\d+)")
CIRCUIT_INFO_EXPECTED = "k=<number>, rows=<number>"


@dataclass(frozen=True)
class ValidatorConfig:
    """Select which documentation rules apply.

    Attributes:
        exported_only: Only check circuits declared with ``export``.
        require_title: Require ``@title``.
        require_description: Require ``@description``.
        require_remarks: Require ``@remarks``.
        require_circuit_info: Require a well-formed ``@circuitInfo``.
        require_params: Require ``@param`` docs matching the signature.
        require_throws: Require at least one ``@throws``.
        require_returns: Require ``@returns``.
    """

    exported_only: bool = True
    require_title: bool = False
    require_description: bool = True
    require_remarks: bool = False
    require_circuit_info: bool = True
    require_params: bool = True
    require_throws: bool = False
    require_returns: bool = True

    @classmethod
    def strict(cls) -> "ValidatorConfig":
        """Return the default rules plus title, remarks and throws."""
        return replace(
            cls(), require_title=True, require_remarks=True, require_throws=True
        )


class DocValidator:
    """Validate circuit documentation against its signature."""

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        suggestion_threshold: float = 0.8,
    ) -> None:
        """Initialize validator.

        Args:
            config: Rule selection; defaults to ``ValidatorConfig()``.
            suggestion_threshold: Inclusive name similarity in [0.0, 1.0] above
                which a misnamed ``@param`` gets a "did you mean" hint.

        Raises:
            ValueError: If threshold is outside [0.0, 1.0].
        """
        if suggestion_threshold < 0.0 or suggestion_threshold > 1.0:
            raise ValueError("suggestion_threshold must be between 0.0 and 1.0.")
        self._config = config or ValidatorConfig()
        self._suggestion_threshold = suggestion_threshold

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def validate(self, record: CircuitRecord, file_path: str) -> ValidationResult:
        """Validate one circuit's documentation.

        Args:
            record: Extracted circuit record.
            file_path: Path reported in the result.

        Returns:
            Result holding every issue found, in rule order.
        """
        signature = record.signature
        if self._config.exported_only and not signature.is_exported:
            return _result(record, file_path, [])

        if not record.has_docs:
            return _result(
                record,
                file_path,
                [
                    _warning(
                        "Circuit has no documentation comment",
                        line=signature.declaration_line,
                        field="documentation",
                    )
                ],
            )

        parsed = record.parsed
        line = record.doc_start_line
        issues: list[ValidationIssue] = []
        if self._config.require_title and not parsed.title:
            issues.append(_warning("Missing @title tag", line, "@title"))
        if self._config.require_description and not parsed.description:
            issues.append(_warning("Missing @description tag", line, "@description"))
        if self._config.require_remarks and not parsed.remarks:
            issues.append(_warning("Missing @remarks section", line, "@remarks"))
        if self._config.require_circuit_info:
            issues.extend(_check_circuit_info(parsed.circuit_info, line))
        if self._config.require_params and signature.parameters:
            issues.extend(self._check_params(record))
        if self._config.require_throws and not parsed.throws:
            issues.append(_warning("Missing @throws documentation", line, "@throws"))
        if self._config.require_returns and parsed.returns is None:
            issues.append(_warning("Missing @returns tag", line, "@returns"))
        return _result(record, file_path, issues)

    def validate_all(
        self, records: list[CircuitRecord], file_path: str
    ) -> list[ValidationResult]:
        """Validate every record of one file, preserving order."""
        results = [self.validate(record, file_path) for record in records]
        logger.debug(
            f"Validated circuits (file_path={file_path} circuits={len(results)} "
            f"invalid={sum(1 for result in results if not result.is_valid)})"
        )
        return results

    def summarize(
        self, results: list[ValidationResult], file_path: str
    ) -> FileSummary:
        """Fold validation results into per-file counters.

        Args:
            results: Results for one file.
            file_path: Path reported in the summary.

        Returns:
            Aggregate counters for the file.
        """
        valid = sum(1 for result in results if result.is_valid)
        severities = [issue.severity for result in results for issue in result.issues]
        return FileSummary(
            file_path=file_path,
            total_circuits=len(results),
            valid_circuits=valid,
            circuits_with_issues=len(results) - valid,
            total_warnings=severities.count("warning"),
            total_errors=severities.count("error"),
        )

    def _check_params(self, record: CircuitRecord) -> list[ValidationIssue]:
        """Cross-check signature parameters against documented ``@param`` names."""
        line = record.doc_start_line
        documented = {param.name for param in record.parsed.params}
        declared = {param.name for param in record.signature.parameters}
        undocumented = [
            param
            for param in record.signature.parameters
            if param.name not in documented
        ]

        issues = [
            _warning(
                f'Missing @param documentation for parameter "{param.name}" '
                f"(type: {param.type})",
                line,
                "@param",
            )
            for param in undocumented
        ]
        for doc_param in record.parsed.params:
            if doc_param.name in declared:
                continue
            message = (
                f'Documented @param "{doc_param.name}" does not exist in circuit '
                "signature"
            )
            suggestion = self._suggest(
                doc_param.name, [param.name for param in undocumented]
            )
            if suggestion:
                message = f'{message} (did you mean "{suggestion}"?)'
            issues.append(_warning(message, line, "@param"))
        return issues

    def _suggest(self, name: str, candidates: list[str]) -> str | None:
        best: str | None = None
        best_ratio = 0.0
        for candidate in candidates:
            ratio = Levenshtein.ratio(name, candidate)
            if ratio >= self._suggestion_threshold and ratio > best_ratio:
                best, best_ratio = candidate, ratio
        return best


def _check_circuit_info(circuit_info: str | None, line: int) -> list[ValidationIssue]:
    if not circuit_info:
        return [_warning("Missing @circuitInfo tag", line, "@circuitInfo")]
    if CIRCUIT_INFO_PATTERN.fullmatch(circuit_info.strip()):
        return []
    return [
        _warning(
            f'Invalid @circuitInfo format: "{circuit_info}". '
            f"Expected: {CIRCUIT_INFO_EXPECTED}",
            line,
            "@circuitInfo",
        )
    ]


def _warning(message: str, line: int, field: str) -> ValidationIssue:
    return ValidationIssue(message=message, severity="warning", line=line, field=field)


def _result(
    record: CircuitRecord, file_path: str, issues: list[ValidationIssue]
) -> ValidationResult:
    return ValidationResult(
        circuit_name=record.signature.name,
        file_path=file_path,
        line=record.signature.declaration_line,
        is_valid=not issues,
        issues=issues,
    )
