import re
from collections import Counter
from collections.abc import Iterable
from typing import Any

from placeholdercheck.classes import PlaceholderMap

PLACEHOLDER_REGEX = re.compile(r"\{([^{}]+)\}")


def _keyword_regex(prefix: str) -> re.Pattern[str]:
    return re.compile(re.escape(prefix) + r"[0-9]+")


def collect_placeholders(value: Any, keyword_prefixes: Iterable[str] = ()) -> PlaceholderMap:
    """Count the placeholder tokens found in a locale string.

    Brace tokens are skipped when the opening brace is escaped with a
    backslash or doubled (``{{x}``), and when the closing brace is doubled
    (``{x}}``). Tokens are trimmed and empty ones are dropped.

    For every keyword prefix, bare ``<prefix><digits>`` occurrences count as
    tokens too, unless they sit directly inside a brace pair and were already
    counted by the brace scan.
    """
    if not isinstance(value, str):
        return {}

    counts: Counter[str] = Counter()

    for match in PLACEHOLDER_REGEX.finditer(value):
        start, end = match.span()
        if start > 0 and value[start - 1] in ("\\", "{"):
            continue
        if end < len(value) and value[end] == "}":
            continue

        token = match.group(1).strip()
        if not token:
            continue
        counts[token] += 1

    for prefix in dict.fromkeys(keyword_prefixes):
        if not prefix:
            continue
        for match in _keyword_regex(prefix).finditer(value):
            start, end = match.span()
            # Braced form was counted above
            if start > 0 and value[start - 1] == "{" and end < len(value) and value[end] == "}":
                continue
            counts[match.group(0)] += 1

    return dict(counts)


def format_placeholder_map(placeholders: PlaceholderMap) -> list[str]:
    return sorted(
        f"{token} (x{count})" if count > 1 else token
        for token, count in placeholders.items()
    )
