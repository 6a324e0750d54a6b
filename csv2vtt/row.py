"""
Transient CSV row handling.

A Row lives for one iteration of the parse loop. Rows with a timestamp start
a new cue; rows with an empty timestamp add another caption to the cue
before them.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .models import Caption, Cue
from .utils import normalize_timestamp, parse_cue_settings, split_timestamp_range


@dataclass
class Row:
    """One CSV record, mapped through the key map."""
    line_number: int
    timestamp: str = ''
    speaker: Optional[str] = None
    content: str = ''
    settings: Dict[str, str] = field(default_factory=dict)

    @property
    def has_timestamp(self) -> bool:
        return bool(self.timestamp and self.timestamp.strip())

    @property
    def is_blank(self) -> bool:
        return not (self.has_timestamp or self.speaker or self.content.strip() or self.settings)

    def caption(self) -> Caption:
        return Caption(text=self.content, speaker=self.speaker)

    def cue(self) -> Optional[Cue]:
        """
        Build a new cue from this row.

        Returns:
            A cue holding this row's caption, or None for a continuation row

        Raises:
            MissingTimestampError: If only one timestamp is present
            TimestampFormattingError: If a timestamp has an unexpected shape
        """
        if not self.has_timestamp:
            return None

        raw_start, raw_end = split_timestamp_range(self.timestamp, line_number=self.line_number)
        return Cue(
            start_time=normalize_timestamp(raw_start, line_number=self.line_number),
            end_time=normalize_timestamp(raw_end, line_number=self.line_number),
            captions=[self.caption()],
            settings=self.settings,
        )


def row_from_record(record: Mapping[str, Optional[str]], key_map: Mapping[str, str], line_number: int) -> Row:
    """
    Build a Row from a csv.DictReader record.

    Missing cells (short rows) come through as empty values.
    """
    def cell(key: str) -> str:
        value = record.get(key_map[key])
        return value if value is not None else ''

    speaker = cell('speaker').strip()
    return Row(
        line_number=line_number,
        timestamp=cell('timestamp').strip(),
        speaker=speaker or None,
        content=cell('content'),
        settings=parse_cue_settings(cell('settings')),
    )
