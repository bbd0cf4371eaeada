# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Compact source analyzer implementation."""

import logging
import re
from dataclasses import dataclass

from docslint.analyzer import (
    CircuitRecord,
    CircuitSignature,
    ParameterSignature,
)
from docslint.doc_parser import parse_doc_comment

logger = logging.getLogger(__name__)

DEFAULT_RETURN_TYPE = "[]"

_DECLARATION_PATTERN = re.compile(r"^\s*(export\s+)?(pure\s+)?circuit\s+(\w+)\s*\(")
_PARAMETER_PATTERN = re.compile(r"^(\w+)\s*:\s*(.+)$", re.DOTALL)
_RETURN_TYPE_PATTERN = re.compile(r"^\s*:\s*([^{]+)")


@dataclass(frozen=True)
class _DocBlock:
    text: str
    start_line: int
    end_line: int


class CompactAnalyzer:
    """Extract circuit declarations and their documentation from Compact text."""

    def analyze(self, source: str) -> list[CircuitRecord]:
        """Extract every circuit declaration in file order.

        Malformed declarations never raise; they yield records with whatever
        was recovered (no parameters, default return type).

        Args:
            source: Full text of one source file.

        Returns:
            One record per declaration, exported or not.
        """
        lines = source.split("\n")
        records: list[CircuitRecord] = []
        for index, line in enumerate(lines):
            match = _DECLARATION_PATTERN.match(line)
            if not match:
                continue
            signature = self._parse_signature(
                lines=lines,
                start_index=index,
                name=match.group(3),
                is_exported=match.group(1) is not None,
            )
            doc_block = self._find_doc_block(lines=lines, declaration_index=index)
            records.append(
                CircuitRecord(
                    signature=signature,
                    doc_comment=doc_block.text,
                    parsed=parse_doc_comment(doc_block.text),
                    has_docs=bool(doc_block.text),
                    doc_start_line=doc_block.start_line,
                    doc_end_line=doc_block.end_line,
                )
            )
        logger.debug(f"Circuit extraction completed (circuits={len(records)})")
        return records

    def _parse_signature(
        self, lines: list[str], start_index: int, name: str, is_exported: bool
    ) -> CircuitSignature:
        buffer = self._collect_signature_text(lines=lines, start_index=start_index)
        open_index = buffer.find("(")
        close_index = _find_matching_paren(buffer, open_index)
        if close_index is None:
            logger.debug(
                f"Unbalanced parameter list (circuit={name} line={start_index + 1})"
            )
            parameters: list[ParameterSignature] = []
            return_type = DEFAULT_RETURN_TYPE
        else:
            parameters = parse_parameters(buffer[open_index + 1 : close_index])
            return_type = _extract_return_type(buffer[close_index + 1 :])
        return CircuitSignature(
            name=name,
            is_exported=is_exported,
            parameters=parameters,
            return_type=return_type,
            declaration_line=start_index + 1,
        )

    def _collect_signature_text(self, lines: list[str], start_index: int) -> str:
        """Accumulate declaration lines until the return type separator is seen.

        Stops on the first line, at or after the one closing the parameter
        list, that carries a colon or opens the body.
        """
        collected: list[str] = []
        depth = 0
        closed = False
        for line in lines[start_index:]:
            collected.append(line)
            for char in line:
                if char == "(":
                    depth += 1
                elif char == ")":
                    depth -= 1
                    if depth == 0:
                        closed = True
            if closed and (":" in line or "{" in line):
                break
        return "\n".join(collected)

    def _find_doc_block(self, lines: list[str], declaration_index: int) -> _DocBlock:
        declaration_line = declaration_index + 1
        undocumented = _DocBlock(
            text="", start_line=declaration_line, end_line=declaration_line
        )
        cursor = declaration_index - 1
        while cursor >= 0 and not lines[cursor].strip():
            cursor -= 1
        if cursor < 0 or not lines[cursor].strip().endswith("*/"):
            return undocumented

        end_index = cursor
        while cursor >= 0:
            stripped = lines[cursor].strip()
            if stripped.startswith("/**"):
                break
            # A plain comment or an earlier declaration ends the search.
            if stripped.startswith("/*") or _DECLARATION_PATTERN.match(lines[cursor]):
                return undocumented
            cursor -= 1
        if cursor < 0:
            return undocumented
        return _DocBlock(
            text="\n".join(lines[cursor : end_index + 1]).strip(),
            start_line=cursor + 1,
            end_line=end_index + 1,
        )


def parse_parameters(parameter_text: str) -> list[ParameterSignature]:
    """Parse a raw parameter list into ordered parameter signatures.

    Fragments that do not match ``name: Type`` are skipped.

    Args:
        parameter_text: Text between the parameter list parentheses.

    Returns:
        Parsed parameters in declaration order.
    """
    parameters: list[ParameterSignature] = []
    for fragment in split_top_level(parameter_text):
        match = _PARAMETER_PATTERN.match(fragment.strip())
        if not match:
            continue
        type_text = " ".join(match.group(2).split()).rstrip(",").rstrip()
        parameters.append(ParameterSignature(name=match.group(1), type=type_text))
    return parameters


def split_top_level(parameter_text: str) -> list[str]:
    """Split on commas that sit outside generic angle brackets.

    Args:
        parameter_text: Raw parameter list text.

    Returns:
        Non-blank fragments in order.
    """
    fragments: list[str] = []
    current: list[str] = []
    angle_depth = 0
    for char in parameter_text:
        if char == "<":
            angle_depth += 1
        elif char == ">":
            angle_depth -= 1
        elif char == "," and angle_depth == 0:
            fragments.append("".join(current))
            current = []
            continue
        current.append(char)
    fragments.append("".join(current))
    return [fragment for fragment in fragments if fragment.strip()]


def _find_matching_paren(text: str, open_index: int) -> int | None:
    if open_index < 0:
        return None
    depth = 0
    for index in range(open_index, len(text)):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


def _extract_return_type(text_after_params: str) -> str:
    match = _RETURN_TYPE_PATTERN.match(text_after_params)
    if not match:
        return DEFAULT_RETURN_TYPE
    return_type = " ".join(match.group(1).split())
    return return_type or DEFAULT_RETURN_TYPE
