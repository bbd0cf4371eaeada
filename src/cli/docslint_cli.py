# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line documentation linter for Compact contracts."""

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from docslint.analyzer import AnalyzerError
from docslint.discovery import (
    COMPACT_EXTENSION,
    DiscoveryError,
    discover_compact_files,
)
from docslint.linter import DocsLinter, FileReport, RunSummary
from docslint.validator import ValidatorConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2

SEVERITY_STYLES: dict[str, Style] = {
    "warning": Style(color="yellow"),
    "error": Style(color="red"),
}

DOC_TEMPLATE = """\
/**
 * @title Foo circuit
 * @description Reverts unless the caller is the contract admin.
 *
 * @remarks
 * Requirements:
 * - `caller` must equal `admin`, otherwise the circuit aborts.
 *
 * @circuitInfo k=11, rows=1305
 *
 * @param {Type} paramName - Description of the parameter.
 *
 * @throws {Error} "error message" if condition.
 *
 * @returns {Type} - Description of return value.
 */"""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="compact-docslint",
        description="Documentation linter for Compact contracts.",
        epilog=f"Expected documentation template:\n\n{DOC_TEMPLATE}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=".",
        help="Path to a .compact file or directory (default: .).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Check all circuits, not just exported ones.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require @title, @remarks and @throws as well.",
    )
    strict_group = parser.add_argument_group("strict options")
    strict_group.add_argument(
        "--require-title", action="store_true", help="Require @title tag."
    )
    strict_group.add_argument(
        "--require-remarks", action="store_true", help="Require @remarks section."
    )
    strict_group.add_argument(
        "--require-throws", action="store_true", help="Require @throws documentation."
    )
    relaxed_group = parser.add_argument_group("relaxed options")
    relaxed_group.add_argument(
        "--no-require-description",
        action="store_true",
        help="Do not require @description.",
    )
    relaxed_group.add_argument(
        "--no-require-circuit-info",
        action="store_true",
        help="Do not require @circuitInfo.",
    )
    relaxed_group.add_argument(
        "--no-require-params",
        action="store_true",
        help="Do not require @param for parameters.",
    )
    relaxed_group.add_argument(
        "--no-require-returns",
        action="store_true",
        help="Do not require @returns.",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Scan paths matched by .gitignore files too.",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    return parser


def build_config(args: argparse.Namespace) -> ValidatorConfig:
    """Translate parsed flags into validator configuration.

    Args:
        args: Parsed CLI arguments.

    Returns:
        Validator configuration; explicit ``--no-require-*`` flags win over
        ``--strict``.
    """
    config = ValidatorConfig.strict() if args.strict else ValidatorConfig()
    config = replace(
        config,
        exported_only=not args.all,
        require_title=config.require_title or args.require_title,
        require_remarks=config.require_remarks or args.require_remarks,
        require_throws=config.require_throws or args.require_throws,
    )
    if args.no_require_description:
        config = replace(config, require_description=False)
    if args.no_require_circuit_info:
        config = replace(config, require_circuit_info=False)
    if args.no_require_params:
        config = replace(config, require_params=False)
    if args.no_require_returns:
        config = replace(config, require_returns=False)
    return config


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the linter.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code: 0 when clean, 1 when issues were found, 2 on usage errors.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code == 0:
            return EXIT_OK
        logger.warning(f"Argument parsing failed (argv={argv})")
        return EXIT_USAGE
    if args.output and args.format != "json":
        stderr.write("--output requires --format json\n")
        return EXIT_USAGE

    target = Path(args.target).resolve()
    try:
        files = discover_compact_files(
            target=target, respect_gitignore=not args.no_gitignore
        )
    except DiscoveryError as exc:
        logger.warning(f"Target discovery failed (target={target} error={exc})")
        stderr.write(f"Error: {exc}\n")
        return EXIT_USAGE
    if not files and args.format == "table":
        stdout.write(f"No {COMPACT_EXTENSION} files found in {target}\n")
        return EXIT_OK

    config = build_config(args)
    reports, errors = DocsLinter(config=config).lint_files(files)
    summary = RunSummary.from_reports(reports)
    _write_errors(errors=errors, stderr=stderr)

    if args.format == "json":
        if args.output:
            try:
                _write_json_file(
                    reports=reports,
                    summary=summary,
                    errors=errors,
                    output_path=Path(args.output),
                )
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return EXIT_USAGE
        else:
            _write_json(reports=reports, summary=summary, errors=errors, stdout=stdout)
    else:
        _write_table(reports=reports, summary=summary, target=target, stdout=stdout)
    return EXIT_ISSUES if summary.has_issues else EXIT_OK


def _write_errors(errors: list[AnalyzerError], stderr: TextIO) -> None:
    for error in errors:
        stderr.write(f"read_error: {error.file_path}: {error.message}\n")


def _build_payload(
    reports: list[FileReport], summary: RunSummary, errors: list[AnalyzerError]
) -> dict[str, object]:
    return {
        "files": [asdict(report) for report in reports],
        "summary": asdict(summary),
        "errors": [asdict(error) for error in errors],
    }


def _write_json(
    reports: list[FileReport],
    summary: RunSummary,
    errors: list[AnalyzerError],
    stdout: TextIO,
) -> None:
    """Write reports in JSON format.

    Args:
        reports: Per-file validation reports.
        summary: Run totals.
        errors: Recoverable read errors.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(_build_payload(reports, summary, errors), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(
    reports: list[FileReport],
    summary: RunSummary,
    errors: list[AnalyzerError],
    output_path: Path,
) -> None:
    """Write raw JSON payload to an output file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(_build_payload(reports, summary, errors), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def _write_table(
    reports: list[FileReport], summary: RunSummary, target: Path, stdout: TextIO
) -> None:
    """Write issues grouped per file, followed by run totals.

    Args:
        reports: Per-file validation reports.
        summary: Run totals.
        target: Lint target used to shorten displayed paths.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    base = target if target.is_dir() else target.parent
    for report in reports:
        invalid = [result for result in report.results if not result.is_valid]
        if not invalid:
            continue
        console.rule(
            _display_path(report.file_path, base),
            style=Style(color="cyan"),
            characters="-",
        )
        table = Table(show_header=True, show_lines=False, expand=True)
        table.add_column("line", justify="right", no_wrap=True)
        table.add_column("severity", no_wrap=True)
        table.add_column("field", no_wrap=True)
        table.add_column("circuit", overflow="fold")
        table.add_column("message", ratio=1, overflow="fold")
        for result in invalid:
            for issue in result.issues:
                table.add_row(
                    Text(str(issue.line)),
                    Text(issue.severity, style=SEVERITY_STYLES[issue.severity]),
                    Text(issue.field),
                    Text(result.circuit_name),
                    Text(issue.message),
                )
        console.print(table)

    console.print()
    console.print("[bold]Summary:[/bold]")
    console.print(
        f"  Files checked: {summary.files_checked}, "
        f"Circuits: {summary.total_circuits}, Valid: {summary.valid_circuits}",
        markup=False,
        highlight=False,
    )
    if summary.total_warnings or summary.total_errors:
        console.print(
            f"  Issues: {summary.total_warnings} warning(s), "
            f"{summary.total_errors} error(s)",
            markup=False,
            highlight=False,
        )
    else:
        console.print(
            "All circuits have valid documentation",
            style=Style(color="green"),
            markup=False,
            highlight=False,
        )


def _display_path(file_path: str, base: Path) -> str:
    try:
        return Path(file_path).relative_to(base).as_posix()
    except ValueError:
        return file_path


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
