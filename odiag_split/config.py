"""Configuration loading from CLI args, env vars, and optional YAML file."""

import codecs
import os
import logging
from dataclasses import dataclass, replace

import yaml

logger = logging.getLogger(__name__)

# File naming: appLog-YYYY-MM-DD-hh-mm-ss.log
FILE_NAME_PREFIX = "appLog-"
FILE_NAME_EXTENSION = ".log"
FILE_NAME_FORMAT = FILE_NAME_PREFIX + "%Y-%m-%d-%H-%M-%S" + FILE_NAME_EXTENSION

# Line tags, whitespace included
TIME_TAG = "Time:\t"
SEND_TAG = "Send:\t"
RECEIVE_TAG = "Receive: "

MAX_ENTRIES = 850

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    max_entries: int = MAX_ENTRIES
    backup_suffix: str = ".backup"
    encoding: str = "utf-8"
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path.

    Raises ValueError if the file is not valid YAML or does not hold a mapping.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must hold a mapping, got {type(data).__name__}")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config from defaults, YAML data, env vars, then CLI args (highest wins)."""
    yaml_data = yaml_data or {}

    max_entries = int(yaml_data.get("max_entries", Config.max_entries))
    backup_suffix = yaml_data.get("backup_suffix", Config.backup_suffix)
    encoding = yaml_data.get("encoding", Config.encoding)
    log_level = yaml_data.get("log_level", Config.log_level)

    max_entries = int(os.environ.get("ODIAG_MAX_ENTRIES", max_entries))
    backup_suffix = os.environ.get("ODIAG_BACKUP_SUFFIX", backup_suffix)
    encoding = os.environ.get("ODIAG_ENCODING", encoding)
    log_level = os.environ.get("ODIAG_LOG_LEVEL", log_level)

    config = Config(
        max_entries=max_entries,
        backup_suffix=backup_suffix,
        encoding=encoding,
        log_level=str(log_level).upper(),
    )

    if cli_args is not None:
        overrides = {}
        if getattr(cli_args, "max_entries", None) is not None:
            overrides["max_entries"] = cli_args.max_entries
        if getattr(cli_args, "backup_suffix", None) is not None:
            overrides["backup_suffix"] = cli_args.backup_suffix
        if getattr(cli_args, "log_level", None) is not None:
            overrides["log_level"] = cli_args.log_level.upper()
        config = replace(config, **overrides)

    if config.max_entries < 1:
        raise ValueError(f"max_entries must be positive, got {config.max_entries}")
    if not config.backup_suffix:
        raise ValueError("backup_suffix must not be empty")
    if config.log_level not in LOG_LEVELS:
        raise ValueError(f"unknown log_level {config.log_level!r}")
    try:
        codecs.lookup(config.encoding)
    except LookupError as exc:
        raise ValueError(f"unknown encoding {config.encoding!r}") from exc

    return config
