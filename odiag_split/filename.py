"""File name helpers: candidate check, creation date extraction, and formatting."""

import re
from datetime import datetime

from odiag_split.config import FILE_NAME_EXTENSION, FILE_NAME_FORMAT, FILE_NAME_PREFIX
from odiag_split.errors import FileNameError

FILE_NAME_PATTERN = re.compile(
    r"^" + re.escape(FILE_NAME_PREFIX)
    + r"\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-\d{2}"
    + re.escape(FILE_NAME_EXTENSION) + r"$"
)


def is_supported_file_name(name: str) -> bool:
    """Return True when the name carries the log extension."""
    return name.endswith(FILE_NAME_EXTENSION)


def date_from_file_name(name: str) -> datetime:
    """Parse the creation timestamp out of an appLog-YYYY-MM-DD-hh-mm-ss.log name.

    The device that wrote the log is assumed to share the timezone of the
    machine running this code, so the result is an aware datetime in the
    local timezone.

    Raises FileNameError if the name does not match the pattern exactly.
    """
    if not FILE_NAME_PATTERN.match(name):
        raise FileNameError(name)
    try:
        parsed = datetime.strptime(name, FILE_NAME_FORMAT)
    except ValueError as exc:
        raise FileNameError(name) from exc
    return parsed.astimezone()


def format_file_name(moment: datetime) -> str:
    """Format a timestamp as appLog-YYYY-MM-DD-hh-mm-ss.log (wall clock of *moment*)."""
    return moment.strftime(FILE_NAME_FORMAT)
