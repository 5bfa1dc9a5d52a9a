#!/usr/bin/env python3
"""odiag-split — split OpenDiag session logs that hold too many exchanges."""

import argparse
import logging
import sys

from odiag_split.config import load_config, load_yaml_config
from odiag_split.errors import OdiagSplitError
from odiag_split.processor import process_directory

logger = logging.getLogger("odiag_split")


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="odiag-split",
        description="Split OpenDiag appLog-*.log files into files of at most N entries.",
    )
    parser.add_argument(
        "directory",
        help="Directory holding appLog-YYYY-MM-DD-hh-mm-ss.log files",
    )
    parser.add_argument(
        "--max-entries", type=int, default=None,
        help="Maximum entries per file (default: 850)",
    )
    parser.add_argument(
        "--backup-suffix", default=None,
        help="Suffix appended to split originals (default: .backup)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv=None) -> int:
    parser = build_cli_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [odiag-split] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args, load_yaml_config(args.config))
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.debug("Config: %s", config)

    try:
        summary = process_directory(args.directory, config)
    except (OdiagSplitError, OSError, UnicodeError) as exc:
        logger.error("Process failed: %s", exc)
        return 1

    logger.info(
        "Done: %d file(s) scanned, %d split into %d file(s), %d kept",
        summary.files_scanned, summary.files_split,
        summary.files_written, summary.files_kept,
    )
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
