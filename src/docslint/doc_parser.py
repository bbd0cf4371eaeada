# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Tag extraction for circuit documentation blocks.

A tag section starts at its ``@tag`` marker and runs until the next tag
marker at the start of a line, a blank line, or the end of the block.
Single-valued tags keep their first occurrence only.
"""

import logging
import re

from docslint.analyzer import DocParam, DocReturns, DocThrows, ParsedDoc
from docslint.normalizer import clean_multiline_text, normalize_doc_comment

logger = logging.getLogger(__name__)

_SECTION_END = r"(?=\n[ \t]*@|\n[ \t]*\n|\Z)"
# A line-leading @remarks inside a remarks section does not start a new one.
_REMARKS_SECTION_END = r"(?=\n[ \t]*@(?!remarks\b)|\n[ \t]*\n|\Z)"

_TITLE_PATTERN = re.compile(rf"@title\b(.*?){_SECTION_END}", re.DOTALL)
_DESCRIPTION_PATTERN = re.compile(rf"@description\b(.*?){_SECTION_END}", re.DOTALL)
_REMARKS_PATTERN = re.compile(rf"@remarks\b(.*?){_REMARKS_SECTION_END}", re.DOTALL)
_CIRCUIT_INFO_PATTERN = re.compile(rf"@circuitInfo\b(.*?){_SECTION_END}", re.DOTALL)
_PARAM_PATTERN = re.compile(
    rf"@param[ \t]+\{{([^}}]+)\}}[ \t]*(\w+)[ \t]*-?[ \t]*(.*?){_SECTION_END}",
    re.DOTALL,
)
_THROWS_PATTERN = re.compile(
    rf"@throws[ \t]+\{{([^}}]+)\}}[ \t]*(.*?){_SECTION_END}", re.DOTALL
)
_RETURNS_PATTERN = re.compile(
    rf"@returns?\b[ \t]*(?:\{{([^}}]*)\}})?[ \t]*-?[ \t]*(.*?){_SECTION_END}",
    re.DOTALL,
)


def parse_doc_comment(doc_comment: str) -> ParsedDoc:
    """Parse a raw documentation block into structured tagged fields.

    Malformed tags are skipped rather than reported; a ``@param`` or
    ``@throws`` without a ``{Type}`` token is not recognized.

    Args:
        doc_comment: Raw ``/** ... */`` block text, possibly empty.

    Returns:
        Parsed documentation; empty when the block is empty.
    """
    if not doc_comment.strip():
        return ParsedDoc()

    normalized = normalize_doc_comment(doc_comment)
    params = [
        DocParam(
            name=match.group(2),
            type=match.group(1).strip(),
            description=clean_multiline_text(match.group(3)),
        )
        for match in _PARAM_PATTERN.finditer(normalized)
    ]
    throws = [
        DocThrows(
            type=match.group(1).strip(),
            message=clean_multiline_text(match.group(2)),
        )
        for match in _THROWS_PATTERN.finditer(normalized)
    ]
    returns: DocReturns | None = None
    returns_match = _RETURNS_PATTERN.search(normalized)
    if returns_match:
        return_type = (returns_match.group(1) or "").strip()
        return_description = clean_multiline_text(returns_match.group(2))
        # A bare @returns carries nothing and counts as missing.
        if return_type or return_description:
            returns = DocReturns(type=return_type, description=return_description)

    parsed = ParsedDoc(
        title=_first_section(_TITLE_PATTERN, normalized),
        description=_first_section(_DESCRIPTION_PATTERN, normalized),
        remarks=_first_section(_REMARKS_PATTERN, normalized),
        circuit_info=_first_section(_CIRCUIT_INFO_PATTERN, normalized),
        params=params,
        throws=throws,
        returns=returns,
    )
    logger.debug(
        f"Parsed documentation block (params={len(params)} throws={len(throws)} "
        f"has_returns={returns is not None})"
    )
    return parsed


def _first_section(pattern: re.Pattern[str], normalized: str) -> str | None:
    """Return the cleaned text of the first matching section, if non-empty."""
    match = pattern.search(normalized)
    if not match:
        return None
    text = clean_multiline_text(match.group(1))
    return text or None
