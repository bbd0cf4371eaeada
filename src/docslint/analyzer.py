# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analyzer interfaces and DTOs for circuit extraction."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class ParameterSignature:
    """Represent one formal parameter of a circuit signature.

    Attributes:
        name: Parameter identifier.
        type: Raw type expression text, e.g. ``Either<A, B>``.
    """

    name: str
    type: str


@dataclass(frozen=True)
class CircuitSignature:
    """Represent one circuit declaration.

    Attributes:
        name: Circuit identifier.
        is_exported: Whether the declaration carries the ``export`` keyword.
        parameters: Formal parameters in declaration order.
        return_type: Return type text; ``"[]"`` when none was found.
        declaration_line: Declaration line in source (1-based).
    """

    name: str
    is_exported: bool
    parameters: list[ParameterSignature]
    return_type: str
    declaration_line: int


@dataclass(frozen=True)
class DocParam:
    """Represent one ``@param`` entry."""

    name: str
    type: str
    description: str


@dataclass(frozen=True)
class DocThrows:
    """Represent one ``@throws`` entry."""

    type: str
    message: str


@dataclass(frozen=True)
class DocReturns:
    """Represent the ``@returns`` entry; ``type`` is empty when omitted."""

    type: str
    description: str


@dataclass(frozen=True)
class ParsedDoc:
    """Represent the tagged fields parsed from one documentation block.

    Attributes:
        title: ``@title`` text, ``None`` when absent.
        description: ``@description`` text, ``None`` when absent.
        remarks: ``@remarks`` text, ``None`` when absent.
        circuit_info: ``@circuitInfo`` text, ``None`` when absent.
        params: ``@param`` entries in block order.
        throws: ``@throws`` entries in block order.
        returns: ``@returns`` entry, ``None`` when absent.
    """

    title: str | None = None
    description: str | None = None
    remarks: str | None = None
    circuit_info: str | None = None
    params: list[DocParam] = field(default_factory=list)
    throws: list[DocThrows] = field(default_factory=list)
    returns: DocReturns | None = None


@dataclass(frozen=True)
class CircuitRecord:
    """Represent one circuit together with its documentation block.

    Attributes:
        signature: Parsed circuit signature.
        doc_comment: Raw documentation block; empty when undocumented.
        parsed: Structured documentation fields.
        has_docs: Whether a documentation block precedes the declaration.
        doc_start_line: First line of the block (1-based).
        doc_end_line: Last line of the block (1-based).
    """

    signature: CircuitSignature
    doc_comment: str
    parsed: ParsedDoc
    has_docs: bool
    doc_start_line: int
    doc_end_line: int


@dataclass(frozen=True)
class AnalyzerError:
    """Represent an analyzer error for one file."""

    file_path: str
    message: str


class CircuitAnalyzer(Protocol):
    """Source analyzer contract for circuit extraction."""

    def analyze(self, source: str) -> list[CircuitRecord]:
        """Extract circuit records from one file's text, in file order."""
