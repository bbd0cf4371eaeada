# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analyzer package for the documentation linter."""

from docslint.analyzers.compact import CompactAnalyzer

__all__ = ["CompactAnalyzer"]
