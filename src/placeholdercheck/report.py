from collections.abc import Callable, Iterable
from typing import TextIO

import click

from placeholdercheck.classes import FileOutcome, KeyWarning, PlaceholderMismatch, Report

WARNING_SAMPLE_SIZE = 5

Writer = Callable[[str], None]


def _writer(stream: TextIO | None, err: bool) -> Writer:
    def write(line: str) -> None:
        click.echo(line, file=stream, err=err)

    return write


def _format_sample(items: list[KeyWarning], formatter: Callable[[KeyWarning], str]) -> str:
    sample = [formatter(item) for item in items[:WARNING_SAMPLE_SIZE]]
    if len(items) <= WARNING_SAMPLE_SIZE:
        return ", ".join(sample)
    return ", ".join(sample) + (", " if sample else "") + "…"


def summarize_warnings(warnings: Iterable[KeyWarning], prefix: str = "  • ") -> list[str]:
    groups: dict[str, list[KeyWarning]] = {}
    for warning in warnings:
        groups.setdefault(warning.type, []).append(warning)

    lines = []
    for warning_type, items in groups.items():
        items = sorted(items, key=lambda item: item.key)
        if warning_type == "missing-key":
            label = "Missing key (placeholder check skipped)"
            details = _format_sample(items, lambda item: item.key)
        elif warning_type == "non-string":
            label = "Non-string values (placeholder check skipped)"
            details = _format_sample(items, lambda item: f"{item.key} as {item.actual_type}")
        else:
            label = warning_type
            details = _format_sample(items, lambda item: item.key)
        suffix = f" (e.g. {details})" if details else ""
        lines.append(f"{prefix}{label}: {len(items)} total{suffix}")
    return lines


def format_mismatch(issue: PlaceholderMismatch) -> list[str]:
    diff = issue.diff
    lines = [f"  • Placeholder mismatch for key {issue.key}"]
    if diff.missing:
        lines.append(f"    - Missing placeholders: {', '.join(diff.missing)}")
    if diff.extra:
        lines.append(f"    - Extra placeholders: {', '.join(diff.extra)}")
    for entry in diff.count_mismatch:
        lines.append(
            f'    - Placeholder "{entry.token}" count mismatch '
            f"(expected {entry.expected}, found {entry.actual})"
        )
    lines.append(f"    - Expected: [{', '.join(issue.expected)}]")
    lines.append(f"    - Actual:   [{', '.join(issue.actual)}]")
    return lines


def _write_warning_files(outcomes: list[FileOutcome], write: Writer) -> None:
    for outcome in outcomes:
        write(f"{outcome.file}:")
        for line in summarize_warnings(outcome.warnings, prefix="  • "):
            write(line)
        write("")


def render_report(report: Report, out: TextIO | None = None, err: TextIO | None = None) -> bool:
    """Print a human readable report and return ``report.ok``.

    The success banner goes to ``out``, everything else to ``err``. Both
    default to the process stdout and stderr.
    """
    write_out = _writer(out, err=False)
    write_err = _writer(err, err=True)

    if report.ok:
        write_out(f"All locale files match {report.source_file} placeholders.")
        if report.warnings_only:
            write_err("\nWarnings:")
            _write_warning_files(report.warnings_only, write_err)
        return report.ok

    write_err(f"Placeholder inconsistencies detected (source: {report.source_file}):\n")
    for outcome in report.failures:
        write_err(f"{outcome.file}:")
        for issue in outcome.errors:
            for line in format_mismatch(issue):
                write_err(line)

        if outcome.warnings:
            write_err("  Warnings:")
            for line in summarize_warnings(outcome.warnings, prefix="    - "):
                write_err(line)
        write_err("")

    if report.warnings_only:
        write_err("Additional warnings:")
        _write_warning_files(report.warnings_only, write_err)

    return report.ok
