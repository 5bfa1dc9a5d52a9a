"""Log encoder — turns a Log back into (file name, text) in the decodable format."""

from datetime import datetime

from odiag_split.config import TIME_TAG
from odiag_split.filename import format_file_name
from odiag_split.models import Log


def format_time_line(moment: datetime) -> str:
    """Format a timestamp as a ``Time:\\thh:mm:ss,mmm`` line."""
    return f"{TIME_TAG}{moment:%H:%M:%S},{moment.microsecond // 1000:03d}"


def encode(log: Log) -> tuple[str, str]:
    """Return (file_name, data) for a Log.

    The file name comes from the first entry's time, or from
    ``file_created_at`` when the log has no entries.
    """
    parts = [log.header + "\n"]
    for entry in log.entries:
        parts.append(f"{format_time_line(entry.time)}\n{entry.send}\n{entry.receive}\n")

    file_date = log.entries[0].time if log.entries else log.file_created_at
    if file_date is None:
        raise ValueError("log has neither entries nor a creation time to name it by")

    return format_file_name(file_date), "".join(parts)
