"""Text normalization helpers for documentation blocks."""

import re

_OPENING_MARKER = re.compile(r"^/\*\*\s*")
_CLOSING_MARKER = re.compile(r"\s*\*/$")
_LINE_PREFIX = re.compile(r"^\s*\*\s?")


def normalize_doc_comment(doc_comment: str) -> str:
    """Strip comment markers from a documentation block.

    Removes the opening ``/**`` and closing ``*/`` markers and one leading
    ``*`` (plus one following space) from every line. Text that does not
    open with ``/**`` is already normalized and only gets trimmed, so a
    body line such as ``* first item`` survives a second pass.

    Args:
        doc_comment: Raw documentation block text.

    Returns:
        Normalized block text; empty when the block holds no content.
    """
    text = doc_comment.strip()
    if not _OPENING_MARKER.match(text):
        return _strip_trailing_whitespace(text.split("\n")).strip()
    text = _CLOSING_MARKER.sub("", _OPENING_MARKER.sub("", text))
    lines = [_LINE_PREFIX.sub("", line) for line in text.split("\n")]
    return _strip_trailing_whitespace(lines).strip()


def clean_multiline_text(text: str) -> str:
    """Collapse line breaks and whitespace runs into single spaces."""
    return " ".join(text.split())


def _strip_trailing_whitespace(lines: list[str]) -> str:
    """Join lines after removing trailing whitespace from each one."""
    return "\n".join(line.rstrip() for line in lines)
