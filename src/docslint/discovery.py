# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Locate Compact source files beneath a target path."""

import logging
import os
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

COMPACT_EXTENSION = ".compact"


class DiscoveryError(RuntimeError):
    """Represent an invalid lint target or unreadable ignore file."""


class IgnoreMatcher:
    """Match project paths against .gitignore patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        self._spec = spec

    @classmethod
    def from_project_root(cls, root: Path) -> "IgnoreMatcher":
        """Build matcher from root and nested .gitignore files.

        Args:
            root: Directory being scanned.

        Returns:
            Configured ignore matcher; matches nothing without .gitignore files.

        Raises:
            OSError: If .gitignore files cannot be read.
            UnicodeDecodeError: If .gitignore files contain invalid UTF-8.
        """
        patterns: list[str] = []
        for ignore_path in sorted(root.rglob(".gitignore")):
            base = ignore_path.parent.relative_to(root).as_posix()
            if base == ".":
                base = ""
            for line in ignore_path.read_text(encoding="utf-8").splitlines():
                patterns.append(_translate_gitignore_line(line=line, base=base))
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    @classmethod
    def empty(cls) -> "IgnoreMatcher":
        return cls(spec=pathspec.GitIgnoreSpec.from_lines([]))

    def matches(self, relative_path: str, is_dir: bool) -> bool:
        """Check whether a root-relative path is ignored."""
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        if self._spec.match_file(normalized):
            return True
        return is_dir and self._spec.match_file(f"{normalized}/")


def discover_compact_files(target: Path, respect_gitignore: bool = True) -> list[Path]:
    """Resolve a lint target into the Compact files to check.

    Args:
        target: A ``.compact`` file or a directory to scan recursively.
        respect_gitignore: Skip paths matched by the directory's .gitignore files.

    Returns:
        Matching files sorted by path.

    Raises:
        DiscoveryError: If the target is missing, is a file without the
            ``.compact`` extension, or its .gitignore files cannot be read.
    """
    if not target.exists():
        raise DiscoveryError(f"Path not found: {target}")
    if not target.is_dir():
        if target.suffix != COMPACT_EXTENSION:
            raise DiscoveryError(
                f"File must have {COMPACT_EXTENSION} extension: {target}"
            )
        return [target]

    if respect_gitignore:
        try:
            matcher = IgnoreMatcher.from_project_root(target)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Failed to read .gitignore files (error={exc})")
            raise DiscoveryError(f"Failed to read .gitignore files: {exc}") from exc
    else:
        matcher = IgnoreMatcher.empty()

    files: list[Path] = []
    queue: list[Path] = [target]
    while queue:
        current = queue.pop(0)
        try:
            children = sorted(current.iterdir(), key=lambda item: item.name)
        except OSError as exc:
            logger.warning(f"Skipping unreadable directory (path={current} error={exc})")
            continue
        for child in children:
            if child.name == ".git" and child.is_dir():
                continue
            relative = child.relative_to(target).as_posix()
            if matcher.matches(relative_path=relative, is_dir=child.is_dir()):
                logger.debug(f"Skipping ignored path (path={relative})")
                continue
            if child.is_dir():
                queue.append(child)
            elif child.suffix == COMPACT_EXTENSION:
                files.append(child)
    logger.info(f"Discovered Compact files (root={target} files={len(files)})")
    return sorted(files)


def _translate_gitignore_line(line: str, base: str) -> str:
    """Translate one .gitignore line to a root-relative pattern.

    Args:
        line: Original .gitignore line.
        base: Parent directory relative to the scan root.

    Returns:
        Root-relative pattern line.
    """
    if not base or not line or line.lstrip().startswith("#"):
        return line
    if line.startswith(r"\!") or line.startswith(r"\#"):
        return line
    is_negation = line.startswith("!")
    pattern = line[1:] if is_negation else line
    anchored = pattern.startswith("/")
    normalized_pattern = pattern[1:] if anchored else pattern
    prefixed = f"{base}/{normalized_pattern}" if normalized_pattern else base
    if anchored:
        prefixed = f"/{prefixed}"
    return f"!{prefixed}" if is_negation else prefixed
