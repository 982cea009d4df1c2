from concurrent.futures import ThreadPoolExecutor
import logging
import os
from typing import Any

from placeholdercheck import parser
from placeholdercheck.classes import (
    CheckOptions,
    CountMismatch,
    FileOutcome,
    KeyWarning,
    PlaceholderDiff,
    PlaceholderMap,
    PlaceholderMismatch,
    Report,
)
from placeholdercheck.report import render_report
from placeholdercheck.tokenizer import collect_placeholders, format_placeholder_map

logger = logging.getLogger(__name__)


def diff_placeholders(source: PlaceholderMap, target: PlaceholderMap) -> PlaceholderDiff:
    missing = []
    count_mismatch = []
    for token, count in source.items():
        target_count = target.get(token)
        if target_count is None:
            missing.append(token)
        elif target_count != count:
            count_mismatch.append(CountMismatch(token, count, target_count))

    extra = [token for token in target if token not in source]
    return PlaceholderDiff(missing, extra, count_mismatch)


def compare_locale(
    file: str,
    source_table: dict[str, PlaceholderMap],
    target_entries: dict[str, Any],
    keyword_prefixes: list[str] | None = None,
) -> FileOutcome:
    prefixes = keyword_prefixes or []
    errors: list[PlaceholderMismatch] = []
    warnings: list[KeyWarning] = []

    # Keys that only exist in the target are never looked at
    for key, source_placeholders in source_table.items():
        if key not in target_entries:
            warnings.append(KeyWarning("missing-key", key))
            continue

        target_value = target_entries[key]
        if not isinstance(target_value, str):
            warnings.append(
                KeyWarning("non-string", key, parser.json_type_name(target_value))
            )
            continue

        target_placeholders = collect_placeholders(target_value, prefixes)
        diff = diff_placeholders(source_placeholders, target_placeholders)
        if not diff.clean:
            errors.append(
                PlaceholderMismatch(
                    key,
                    diff,
                    expected=format_placeholder_map(source_placeholders),
                    actual=format_placeholder_map(target_placeholders),
                )
            )

    return FileOutcome(file, errors, warnings)


def check_placeholders(options: CheckOptions | None = None) -> Report:
    options = options or CheckOptions()
    directory = os.path.abspath(options.cwd)
    keyword_prefixes = [prefix for prefix in options.keyword_prefixes if prefix]

    entries = parser.list_directory(directory)
    source = parser.resolve_source(
        entries, directory, options.source, options.source_candidates
    )
    logger.info(f"Using {source} as source locale")

    ignore = {source, *options.default_ignores}
    ignore.update(name for name in options.ignore if name)
    locale_files = parser.discover_locale_files(entries, ignore)

    source_entries = parser.load_locale(os.path.join(directory, source))
    source_table = parser.build_placeholder_table(source_entries, keyword_prefixes)

    def check_file(file: str) -> FileOutcome:
        target_entries = parser.load_locale(os.path.join(directory, file))
        return compare_locale(file, source_table, target_entries, keyword_prefixes)

    if options.jobs > 1 and len(locale_files) > 1:
        with ThreadPoolExecutor(max_workers=options.jobs) as executor:
            results = list(executor.map(check_file, locale_files))
    else:
        results = [check_file(file) for file in locale_files]

    logger.info(f"Checked {len(locale_files)} locale files against {source}")

    failures = [result for result in results if result.errors]
    warnings_only = [
        result for result in results if not result.errors and result.warnings
    ]
    for result in failures:
        logger.debug(f"{result.file}: {len(result.errors)} placeholder mismatches")

    return Report(
        ok=not failures,
        directory=directory,
        source_file=source,
        files_checked=locale_files,
        failures=failures,
        warnings_only=warnings_only,
    )


def run(options: CheckOptions | None = None) -> bool:
    report = check_placeholders(options)
    return render_report(report)
