"""
Shared utility functions for csv2vtt.

Provides the timestamp normalization used by every cue, plus small text
helpers for cue content, cue settings and error messages.
"""

import re
from typing import Dict, List, Optional, Sequence

from .errors import MissingTimestampError, TimestampFormattingError

# Accepted timestamp shapes, checked in order against the whole value. Each
# entry maps a pattern to the prefix and suffix needed to reach HH:MM:SS.mmm.
# Digits are ASCII only.
TIMESTAMP_PATTERNS = [
    (re.compile(r'[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}'), '', ''),
    (re.compile(r'[0-9]{2}:[0-9]{2}:[0-9]{2}'), '', '.000'),
    (re.compile(r'[0-9]:[0-9]{2}:[0-9]{2}'), '0', '.000'),
    (re.compile(r'[0-9]{2}:[0-9]{2}\.[0-9]{3}'), '00:', ''),
    (re.compile(r'[0-9]{2}:[0-9]{2}'), '00:', '.000'),
    (re.compile(r'[0-9]{2}\.[0-9]{3}'), '00:00:', ''),
    (re.compile(r'[0-9]{2}'), '00:00:', '.000'),
]

# Hyphen, en dash and em dash
TIMESTAMP_SEPARATOR = re.compile(r'[-\u2013\u2014]+')

CUE_SETTING_KEYS = ('vertical', 'line', 'position', 'size', 'align', 'region')


def normalize_timestamp(value: str, line_number: Optional[int] = None) -> str:
    """
    Convert a loosely formatted timestamp to HH:MM:SS.mmm.

    Digit counts are strict but ranges are not checked, so "99:99:99" is
    accepted as-is.

    Args:
        value: One side of a timestamp range, already trimmed
        line_number: CSV line the value came from, used in errors

    Returns:
        Timestamp string in HH:MM:SS.mmm format

    Raises:
        TimestampFormattingError: If the value matches none of the known shapes

    Example:
        >>> normalize_timestamp("01:30")
        '00:01:30.000'
        >>> normalize_timestamp("1:02:03")
        '01:02:03.000'
    """
    for pattern, prefix, suffix in TIMESTAMP_PATTERNS:
        if pattern.fullmatch(value):
            return f"{prefix}{value}{suffix}"

    raise TimestampFormattingError(value=value, line_number=line_number)


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert HH:MM:SS.mmm format to seconds.

    Args:
        timestamp: Timestamp string in HH:MM:SS.mmm (or HH:MM:SS) format

    Returns:
        Time in seconds as float

    Example:
        >>> timestamp_to_seconds("01:23:45")
        5025.0
    """
    h, m, s = timestamp.split(':')
    return int(h) * 3600 + int(m) * 60 + float(s)


def split_timestamp_range(raw: str, line_number: Optional[int] = None) -> List[str]:
    """
    Split a "start-end" field into its two trimmed sides.

    Any run of hyphens, en dashes or em dashes separates the sides.

    Raises:
        MissingTimestampError: If fewer than two sides are present
        TimestampFormattingError: If more than two sides are present
    """
    parts = [part.strip() for part in TIMESTAMP_SEPARATOR.split(raw)]
    parts = [part for part in parts if part]

    if len(parts) < 2:
        raise MissingTimestampError(value=raw, line_number=line_number)
    if len(parts) > 2:
        raise TimestampFormattingError(value=raw, line_number=line_number)

    return parts


def escape_cue_text(text: Optional[str]) -> str:
    """
    Escape characters that are not allowed in cue text spans.

    Ampersands and less-than signs are replaced by their entities, and the
    ">" of any "-->" becomes "&gt;". Blank lines are dropped, since a blank
    line ends the cue block, and surrounding whitespace is trimmed.

    Example:
        >>> escape_cue_text(" Fish & chips\\n\\n--> next ")
        'Fish &amp; chips\\n--&gt; next'
    """
    if text is None:
        return ''

    escaped = text.replace('&', '&amp;').replace('<', '&lt;').replace('-->', '--&gt;')
    lines = [line.rstrip() for line in escaped.splitlines() if line.strip()]
    return '\n'.join(lines).strip()


def parse_cue_settings(raw: Optional[str]) -> Dict[str, str]:
    """
    Parse a whitespace separated "key:value" string into a settings mapping.

    Tokens without a colon or with an empty key are ignored. Keys are kept
    even when unrecognized; CueSettings does the filtering.

    Example:
        >>> parse_cue_settings("align:start line:0")
        {'align': 'start', 'line': '0'}
    """
    settings: Dict[str, str] = {}
    if not raw:
        return settings

    for token in raw.split():
        key, sep, value = token.partition(':')
        if not sep or not key:
            continue
        settings[key] = value

    return settings


def format_key_list(keys: Sequence[str]) -> str:
    """
    Quote and join names into an English list.

    Example:
        >>> format_key_list(["A", "B", "C"])
        '"A", "B", and "C"'
    """
    quoted = [f'"{key}"' for key in keys]
    if len(quoted) <= 2:
        return ' and '.join(quoted)

    return f"{', '.join(quoted[:-1])}, and {quoted[-1]}"
