"""Log record model — frozen dataclasses for one diagnostic session file."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Entry:
    """One request/response exchange.

    ``send`` and ``receive`` hold the raw lines, tags included, with any
    continuation lines joined by newlines.
    """

    time: datetime
    send: str
    receive: str


@dataclass(frozen=True)
class Log:
    header: str
    entries: tuple[Entry, ...] = field(default_factory=tuple)
    file_created_at: datetime | None = None
