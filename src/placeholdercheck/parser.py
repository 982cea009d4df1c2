# Copyright (c) 2023 Peace-Maker
from collections.abc import Iterable
import json
import logging
import os
import pathlib
from typing import Any

from placeholdercheck.classes import PlaceholderMap
from placeholdercheck.exceptions import (
    LocaleDirectoryError,
    LocaleParseError,
    SourceResolutionError,
)
from placeholdercheck.tokenizer import collect_placeholders

logger = logging.getLogger(__name__)


def list_directory(path: str) -> list[os.DirEntry]:
    try:
        with os.scandir(path) as entries:
            return list(entries)
    except OSError as ex:
        raise LocaleDirectoryError(f"Cannot read locale directory {path}: {ex}") from ex


def _regular_files(entries: Iterable[os.DirEntry]) -> set[str]:
    return {entry.name for entry in entries if entry.is_file(follow_symlinks=False)}


def resolve_source(
    entries: Iterable[os.DirEntry],
    directory: str,
    source: str | None,
    candidates: Iterable[str],
) -> str:
    files = _regular_files(entries)

    # An explicit source must exist, there is no fallback for it
    if source:
        if source not in files:
            raise SourceResolutionError(directory, [source])
        return source

    probed = list(candidates)
    for candidate in probed:
        if candidate in files:
            logger.debug(f"Using default source candidate {candidate}")
            return candidate
    raise SourceResolutionError(directory, probed)


def discover_locale_files(entries: Iterable[os.DirEntry], ignore: Iterable[str]) -> list[str]:
    ignore_set = set(ignore)
    return sorted(
        name
        for name in _regular_files(entries)
        if name.endswith(".json") and name not in ignore_set
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def load_locale(path: str) -> dict[str, Any]:
    file = pathlib.Path(path)
    logger.debug(f"Parsing {file}")
    try:
        data = json.loads(file.read_text("utf-8"), parse_constant=_reject_constant)
    except (OSError, ValueError) as ex:
        raise LocaleParseError(file.name, str(ex)) from ex

    if not isinstance(data, dict):
        raise LocaleParseError(
            file.name, f"top-level value must be an object, got {json_type_name(data)}"
        )
    return data


def build_placeholder_table(
    entries: dict[str, Any], keyword_prefixes: Iterable[str] = ()
) -> dict[str, PlaceholderMap]:
    prefixes = list(keyword_prefixes)
    return {
        key: collect_placeholders(value, prefixes) for key, value in entries.items()
    }


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
