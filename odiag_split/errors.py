"""Exceptions raised while reading, decoding, and splitting OpenDiag logs."""


class OdiagSplitError(Exception):
    """Base class for every error raised by odiag-split."""


class FileNameError(OdiagSplitError, ValueError):
    """Raised when a file name does not match appLog-YYYY-MM-DD-hh-mm-ss.log."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"can't parse date from file name: '{name}'")


class LineError(OdiagSplitError, ValueError):
    """An error tied to one raw line of the log text."""

    def __init__(self, reason: str, line: str, line_number: int):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        super().__init__(f"can't parse, {reason} at line {line_number}: '{line}'")


class TimeParseError(LineError):
    """Raised when a Time: line carries a malformed time of day."""


class FormatError(LineError):
    """Raised when a line breaks the Time -> Send -> Receive ordering."""


class FileCollisionError(OdiagSplitError, FileExistsError):
    """Raised when a split output file would overwrite an existing file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"strange, but file '{path}' exists")
