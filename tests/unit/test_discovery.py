# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for Compact file discovery."""

from pathlib import Path

import pytest

from docslint.discovery import DiscoveryError, discover_compact_files


def _write_file(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_discovery_walks_directories_and_filters_extension(tmp_path: Path) -> None:
    _write_file(tmp_path / "Token.compact")
    _write_file(tmp_path / "nested" / "deep" / "Access.compact")
    _write_file(tmp_path / "nested" / "notes.md")
    _write_file(tmp_path / ".git" / "hooks" / "Hidden.compact")

    files = discover_compact_files(tmp_path)

    assert [path.relative_to(tmp_path).as_posix() for path in files] == [
        "Token.compact",
        "nested/deep/Access.compact",
    ]


def test_discovery_honors_root_and_nested_gitignore(tmp_path: Path) -> None:
    _write_file(tmp_path / ".gitignore", "build/\n")
    _write_file(tmp_path / "src" / ".gitignore", "generated.compact\n")
    _write_file(tmp_path / "build" / "Out.compact")
    _write_file(tmp_path / "src" / "generated.compact")
    _write_file(tmp_path / "src" / "Token.compact")

    files = discover_compact_files(tmp_path)

    assert [path.relative_to(tmp_path).as_posix() for path in files] == [
        "src/Token.compact"
    ]


def test_discovery_can_ignore_gitignore(tmp_path: Path) -> None:
    _write_file(tmp_path / ".gitignore", "build/\n")
    _write_file(tmp_path / "build" / "Out.compact")

    files = discover_compact_files(tmp_path, respect_gitignore=False)

    assert [path.name for path in files] == ["Out.compact"]


def test_discovery_accepts_single_compact_file(tmp_path: Path) -> None:
    target = tmp_path / "Token.compact"
    _write_file(target)

    assert discover_compact_files(target) == [target]


def test_discovery_rejects_file_without_compact_extension(tmp_path: Path) -> None:
    target = tmp_path / "Token.ts"
    _write_file(target)

    with pytest.raises(DiscoveryError, match="extension"):
        discover_compact_files(target)


def test_discovery_rejects_missing_target(tmp_path: Path) -> None:
    with pytest.raises(DiscoveryError, match="Path not found"):
        discover_compact_files(tmp_path / "missing")
