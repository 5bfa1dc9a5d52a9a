"""Directory processing: find oversized OpenDiag logs, split them, back up the originals."""

import logging
import os
from dataclasses import dataclass, field

from odiag_split.config import Config
from odiag_split.decoder import decode
from odiag_split.encoder import encode
from odiag_split.errors import FileCollisionError
from odiag_split.filename import date_from_file_name, is_supported_file_name
from odiag_split.splitter import need_split, split_log

logger = logging.getLogger(__name__)


@dataclass
class ProcessSummary:
    files_scanned: int = 0
    files_split: int = 0
    files_kept: int = 0
    written: list[str] = field(default_factory=list)

    @property
    def files_written(self) -> int:
        return len(self.written)


def list_candidates(directory: str) -> list[str]:
    """Return the names of log files in *directory*, sorted, directories excluded."""
    names = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_dir(follow_symlinks=False):
                continue
            if not is_supported_file_name(entry.name):
                logger.debug("Skipping %s: not a log file", entry.name)
                continue
            names.append(entry.name)
    names.sort()
    return names


def write_new_file(path: str, data: str, encoding: str = "utf-8") -> None:
    """Write *data* to a file that must not exist yet.

    Raises FileCollisionError if *path* is already taken.
    """
    if os.path.exists(path):
        raise FileCollisionError(path)
    try:
        with open(path, "x", encoding=encoding, errors="surrogateescape", newline="") as f:
            f.write(data)
    except FileExistsError as exc:
        raise FileCollisionError(path) from exc


def process_file(path: str, config: Config | None = None) -> list[str]:
    """Split one log file if it holds too many entries.

    Returns the paths written, or an empty list when the file was left alone.
    On a split the original is renamed to ``<path><backup_suffix>``.
    """
    config = config or Config()
    directory, name = os.path.split(path)

    created_at = date_from_file_name(name)

    with open(path, "r", encoding=config.encoding, errors="surrogateescape", newline="") as f:
        content = f.read()

    log = decode(created_at, content)

    if not need_split(log, config.max_entries):
        logger.info("Keeping %s: %d entries", name, len(log.entries))
        return []

    written = []
    for part in split_log(log, config.max_entries):
        new_name, data = encode(part)
        new_path = os.path.join(directory, new_name)
        write_new_file(new_path, data, config.encoding)
        logger.info("Wrote %s (%d entries)", new_path, len(part.entries))
        written.append(new_path)

    backup_path = path + config.backup_suffix
    os.rename(path, backup_path)
    logger.info("Backed up %s -> %s", path, backup_path)

    return written


def process_directory(directory: str, config: Config | None = None) -> ProcessSummary:
    """Process every log file in *directory*. The first error aborts the run."""
    config = config or Config()
    summary = ProcessSummary()

    for name in list_candidates(directory):
        summary.files_scanned += 1
        written = process_file(os.path.join(directory, name), config)
        if written:
            summary.files_split += 1
            summary.written.extend(written)
        else:
            summary.files_kept += 1

    return summary
