"""Log decoder — rebuilds a Log from raw OpenDiag text with a small state machine.

Every line is either tagged (Time / Send / Receive) or a continuation of
whatever section is open. Tagged lines drive the machine through

    HEADER -> TIME -> SEND -> RECEIVE -> TIME -> ...

and any other transition is a FormatError naming the offending line.
"""

import logging
import re
from datetime import datetime, time
from enum import Enum

from odiag_split.config import RECEIVE_TAG, SEND_TAG, TIME_TAG
from odiag_split.errors import FormatError, TimeParseError
from odiag_split.models import Entry, Log

logger = logging.getLogger(__name__)

TIME_LINE_PATTERN = re.compile(
    re.escape(TIME_TAG) + r"(\d{2}):(\d{2}):(\d{2}),(\d{3})"
)


class State(Enum):
    HEADER = "header"
    TIME = "time"
    SEND = "send"
    RECEIVE = "receive"


# target state -> (states it may follow, error reason)
TRANSITIONS = {
    State.TIME: (frozenset({State.HEADER, State.RECEIVE}), "time not after header or receive"),
    State.SEND: (frozenset({State.TIME}), "send not after time"),
    State.RECEIVE: (frozenset({State.SEND}), "receive not after send"),
}


class _PendingEntry:
    """Mutable builder for the entry currently being read."""

    def __init__(self, entry_time: datetime):
        self.time = entry_time
        self.send: list[str] = []
        self.receive: list[str] = []

    def build(self) -> Entry:
        return Entry(
            time=self.time,
            send="\n".join(self.send),
            receive="\n".join(self.receive),
        )


def classify_line(line: str) -> State | None:
    """Return the state a tagged line opens, or None for a continuation line."""
    if line.startswith(TIME_TAG):
        return State.TIME
    if line.startswith(SEND_TAG):
        return State.SEND
    if line.startswith(RECEIVE_TAG):
        return State.RECEIVE
    return None


def parse_time_of_day(line: str, line_number: int = 0) -> time:
    """Parse a ``Time:\\thh:mm:ss,mmm`` line into a time of day.

    Raises TimeParseError if the value is malformed or out of range.
    """
    match = TIME_LINE_PATTERN.fullmatch(line)
    if not match:
        raise TimeParseError("malformed time", line, line_number)

    hour, minute, second, millis = (int(g) for g in match.groups())
    try:
        return time(hour, minute, second, millis * 1000)
    except ValueError as exc:
        raise TimeParseError("time out of range", line, line_number) from exc


def entry_time(file_created_at: datetime, time_of_day: time) -> datetime:
    """Combine the file's creation date with a time of day.

    No rollover past midnight: an entry logged after midnight keeps the
    creation date.
    """
    return datetime.combine(
        file_created_at.date(), time_of_day, tzinfo=file_created_at.tzinfo
    )


def split_lines(data: str) -> list[str]:
    """Split on newlines only; a final newline terminates the last line."""
    lines = data.split("\n")
    if data.endswith("\n"):
        lines.pop()
    return lines


def decode(file_created_at: datetime, data: str) -> Log:
    """Decode the full text of a log file into a Log.

    Raises FormatError on an ordering violation and TimeParseError on a bad
    time of day.
    """
    headers: list[str] = []
    entries: list[Entry] = []
    state = State.HEADER
    pending = None

    for line_number, line in enumerate(split_lines(data), 1):
        target = classify_line(line)

        if target is None:
            if state is State.HEADER:
                headers.append(line)
            elif state is State.TIME:
                # Continuation between Time and Send has no home; dropped.
                logger.debug("Discarding line %d after Time: %r", line_number, line)
            elif state is State.SEND:
                pending.send.append(line)
            else:
                pending.receive.append(line)
            continue

        allowed, reason = TRANSITIONS[target]
        if state not in allowed:
            raise FormatError(reason, line, line_number)

        if target is State.TIME:
            if state is State.RECEIVE:
                entries.append(pending.build())
            time_of_day = parse_time_of_day(line, line_number)
            pending = _PendingEntry(entry_time(file_created_at, time_of_day))
        elif target is State.SEND:
            pending.send = [line]
        else:
            pending.receive = [line]

        state = target

    if state is State.RECEIVE:
        entries.append(pending.build())

    logger.debug("Decoded %d header line(s) and %d entries", len(headers), len(entries))

    return Log(
        header="\n".join(headers),
        entries=tuple(entries),
        file_created_at=file_created_at,
    )
