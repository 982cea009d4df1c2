from placeholdercheck.checker import check_placeholders, run
from placeholdercheck.classes import (
    DEFAULT_IGNORES,
    DEFAULT_SOURCE_CANDIDATES,
    CheckOptions,
    Report,
)
from placeholdercheck.report import render_report
from placeholdercheck.tokenizer import collect_placeholders

__all__ = [
    "DEFAULT_IGNORES",
    "DEFAULT_SOURCE_CANDIDATES",
    "CheckOptions",
    "Report",
    "check_placeholders",
    "collect_placeholders",
    "render_report",
    "run",
]
