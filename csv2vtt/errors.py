"""
Error types raised while converting CSV rows to WebVTT cues.

MissingHeaderKeyError is file-level and stops a parse before any row is read.
Every other error is row-level: the parser records it, skips the row and
carries on, so one pass reports every problem in the file.
"""

from typing import Optional, Sequence


class ParsingError(Exception):
    """Base error for CSV parsing problems."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        return self.message


class MissingHeaderKeyError(ParsingError):
    """
    Raised when columns named by the key map are missing from the CSV header.

    Can be resolved by passing a custom key_map to the parser.
    """

    def __init__(self, missing_keys: Sequence[str]):
        # utils imports this module
        from .utils import format_key_list

        self.missing_keys = list(missing_keys)
        super().__init__(
            f"CSV is missing the following header keys: {format_key_list(self.missing_keys)}",
            line_number=1,
        )


class TimestampFormattingError(ParsingError):
    """Raised if a timestamp is formatted in a way we're not expecting."""

    def __init__(self, value: str, line_number: Optional[int] = None):
        self.value = value
        super().__init__(
            f"Line {line_number}: Unable to parse timestamp from value '{value}'",
            line_number=line_number,
        )


class MissingTimestampError(ParsingError):
    """Raised when a row's timestamp field holds a single timestamp."""

    def __init__(self, value: str, line_number: Optional[int] = None):
        self.value = value
        super().__init__(
            f"Line {line_number}: Missing start or end timestamp value from '{value}'",
            line_number=line_number,
        )


class InvalidTimestampRangeError(ParsingError):
    """Raised when a cue does not end after it starts."""

    def __init__(self, start_time: str, end_time: str, line_number: Optional[int] = None):
        self.start_time = start_time
        self.end_time = end_time
        super().__init__(
            f"Invalid timestamp range on Line {line_number}: "
            f"{end_time} can not come before {start_time}",
            line_number=line_number,
        )


class InvalidTimestampSequenceError(ParsingError):
    """Raised when a cue starts earlier than the cue before it."""

    def __init__(
        self,
        start_time: str,
        previous_start_time: str,
        line_number: Optional[int] = None,
        previous_line_number: Optional[int] = None,
    ):
        self.start_time = start_time
        self.previous_start_time = previous_start_time
        self.previous_line_number = previous_line_number
        super().__init__(
            f"Invalid timestamp sequence on Lines {previous_line_number}, {line_number}: "
            f"current start timestamp is {start_time} "
            f"and the previous one was {previous_start_time}",
            line_number=line_number,
        )


class OrphanContinuationRowError(ParsingError):
    """
    Raised when a row without a timestamp has no cue to attach to.

    That is the case before the first cue, and after a row that should have
    started a cue but failed.
    """

    def __init__(self, line_number: Optional[int] = None, after_failed_row: bool = False):
        self.after_failed_row = after_failed_row
        if after_failed_row:
            reason = "the cue it belongs to could not be read"
        else:
            reason = "there is no previous cue to add it to"
        super().__init__(
            f"Line {line_number}: Row has no timestamp and {reason}",
            line_number=line_number,
        )


class CSVFormatError(ParsingError):
    """Raised when the CSV text itself cannot be read. Stops the parse."""

    def __init__(self, reason: str, line_number: Optional[int] = None):
        self.reason = reason
        super().__init__(
            f"Line {line_number}: Unable to read CSV: {reason}",
            line_number=line_number,
        )


# Errors the parser records per row instead of aborting
ROW_ERRORS = (
    TimestampFormattingError,
    MissingTimestampError,
    InvalidTimestampRangeError,
    InvalidTimestampSequenceError,
    OrphanContinuationRowError,
)
