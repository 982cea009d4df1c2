import logging
import os
from typing import Any

import yaml

from placeholdercheck.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join("config", "config.yml")

DEFAULT_LOGGING: dict[str, str] = {
    "level": "WARNING",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "datefmt": "%Y-%m-%d %H:%M:%S",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Read the YAML config, returning an empty mapping when the file is absent."""
    config_file_path = os.path.abspath(path or DEFAULT_CONFIG_PATH)
    try:
        with open(config_file_path, "r", encoding="utf-8") as file:
            config = yaml.safe_load(file)
    except FileNotFoundError:
        if path:
            raise ConfigError(f"Config file {config_file_path} not found") from None
        logger.debug(f"No config file at {config_file_path}, using defaults")
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid config file {config_file_path}: {exc}") from exc

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file_path} must contain a mapping")
    return config


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f'Config section "{name}" must be a mapping')
    return section


def setup_logging(config: dict[str, Any]) -> None:
    settings = {**DEFAULT_LOGGING, **_section(config, "logging")}
    level = logging.getLevelName(str(settings["level"]).upper())
    if not isinstance(level, int):
        raise ConfigError(f'Unknown logging level "{settings["level"]}"')

    logging.basicConfig(
        level=level,
        format=settings["format"],
        datefmt=settings["datefmt"],
    )


def split_values(values: Any) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    result = []
    for value in values:
        result.extend(part.strip() for part in str(value).split(","))
    return [part for part in result if part]


def check_defaults(config: dict[str, Any]) -> dict[str, Any]:
    section = _section(config, "check")
    jobs = section.get("jobs", 1)
    if not isinstance(jobs, int) or isinstance(jobs, bool) or jobs < 1:
        raise ConfigError(f'Config value "check.jobs" must be a positive integer, got {jobs!r}')

    return {
        "source": section.get("source") or None,
        "ignore": split_values(section.get("ignore")),
        "keyword_prefixes": split_values(section.get("keyword_prefixes")),
        "jobs": jobs,
    }
