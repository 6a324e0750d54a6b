"""
Timing checks applied to each cue as the parser produces it.

A cue must end after it starts, and must not start before the cue that came
before it. Overlapping cues are allowed.
"""

from typing import Optional

from .errors import InvalidTimestampRangeError, InvalidTimestampSequenceError
from .models import Cue


def validate_timestamp_range(cue: Cue, line_number: int) -> None:
    """
    Raises:
        InvalidTimestampRangeError: If the cue's end is not after its start
    """
    if cue.end_time_seconds <= cue.start_time_seconds:
        raise InvalidTimestampRangeError(
            start_time=cue.start_time,
            end_time=cue.end_time,
            line_number=line_number,
        )


def validate_timestamp_sequence(
    current_cue: Cue,
    previous_cue: Optional[Cue],
    line_number: int,
    previous_line_number: Optional[int] = None,
) -> None:
    """
    Check start times never move backwards between consecutive cues.

    Skipped for the first cue and for continuation rows, where the current
    cue is the previous cue. Equal start times are allowed.

    Raises:
        InvalidTimestampSequenceError: If the previous cue starts later
    """
    if previous_cue is None or previous_cue is current_cue:
        return

    if previous_cue.start_time_seconds > current_cue.start_time_seconds:
        raise InvalidTimestampSequenceError(
            start_time=current_cue.start_time,
            previous_start_time=previous_cue.start_time,
            line_number=line_number,
            previous_line_number=previous_line_number,
        )


def validate_cue(
    current_cue: Cue,
    previous_cue: Optional[Cue],
    line_number: int,
    previous_line_number: Optional[int] = None,
) -> None:
    """Run the range check, then the sequence check."""
    validate_timestamp_range(current_cue, line_number)
    validate_timestamp_sequence(current_cue, previous_cue, line_number, previous_line_number)
