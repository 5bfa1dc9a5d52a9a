"""Batch splitter — cuts an oversized Log into logs of at most max_entries entries."""

import logging
from dataclasses import replace

from odiag_split.config import MAX_ENTRIES
from odiag_split.models import Log

logger = logging.getLogger(__name__)


def _check_max(max_entries: int) -> None:
    if max_entries < 1:
        raise ValueError(f"max_entries must be positive, got {max_entries}")


def need_split(log: Log, max_entries: int = MAX_ENTRIES) -> bool:
    """Return True when the log holds more than *max_entries* entries."""
    _check_max(max_entries)
    return len(log.entries) > max_entries


def split_log(log: Log, max_entries: int = MAX_ENTRIES) -> list[Log]:
    """Partition the log's entries into consecutive batches.

    Every batch shares the original header and file_created_at. All batches
    but the last hold exactly *max_entries* entries; the last holds the
    remainder. A log that does not need splitting comes back unchanged as
    the only element.
    """
    if not need_split(log, max_entries):
        return [log]

    batches = [
        replace(log, entries=log.entries[start:start + max_entries])
        for start in range(0, len(log.entries), max_entries)
    ]
    logger.debug(
        "Split %d entries into %d batches of up to %d",
        len(log.entries), len(batches), max_entries,
    )
    return batches
