"""
CSV to WebVTT parser.

Reads a CSV of timestamp ranges, speakers and text, checks the header
against the key map, turns each row into a cue (or an extra caption on the
previous cue), validates cue timing and assembles a Document.

Row-level problems do not stop the parse. Every error found is collected so
a single run reports the whole file; a Document is only produced when no
error was found.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import (
    ROW_ERRORS,
    CSVFormatError,
    MissingHeaderKeyError,
    OrphanContinuationRowError,
    ParsingError,
)
from .models import Cue, Document
from .row import Row, row_from_record
from .validator import validate_cue

logger = logging.getLogger(__name__)

# By default, these are the CSV header keys we expect. The input CSV may have
# other columns, but these four must be present.
DEFAULT_KEY_MAP: Dict[str, str] = {
    "timestamp": "Time Stamp",
    "speaker": "Speaker",
    "content": "Text",
    "settings": "Style",
}

KEY_ALIASES = {"style": "settings"}

CueCallback = Callable[[Cue], None]


@dataclass
class ParseResult:
    """Outcome of one parse: a document, or the list of errors found."""
    document: Optional[Document] = None
    errors: List[ParsingError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def normalize_key_map(key_map: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Merge a user key map over the defaults.

    Raises:
        ValueError: If a logical key is not one the parser knows
    """
    merged = dict(DEFAULT_KEY_MAP)
    for key, column in (key_map or {}).items():
        logical = KEY_ALIASES.get(key, key)
        if logical not in DEFAULT_KEY_MAP:
            raise ValueError(
                f"Unknown key map field '{key}', expected one of: {', '.join(DEFAULT_KEY_MAP)}"
            )
        merged[logical] = column
    return merged


class CSVParser:
    """
    Parser for converting CSV caption sheets to WebVTT documents.

    The parser only holds its key map; each call to parse() or
    parse_content() starts from a clean state, so one instance can be reused
    for any number of files.

    Example:
        >>> parser = CSVParser()
        >>> result = parser.parse_content(
        ...     "Time Stamp,Speaker,Text,Style\\n00:00:00-00:00:02,Cool Dog,Woof!,"
        ... )
        >>> print(result.document.render())
        WEBVTT
        <BLANKLINE>
        00:00:00.000 --> 00:00:02.000
        <v Cool Dog>Woof!</v>
    """

    def __init__(self, key_map: Optional[Mapping[str, str]] = None):
        """
        Initialize CSV parser.

        Args:
            key_map: Maps logical fields (timestamp, speaker, content,
                settings) to CSV column names. Fields left out keep their
                default column name.
        """
        self.key_map = normalize_key_map(key_map)

    @property
    def required_columns(self) -> List[str]:
        columns: List[str] = []
        for column in self.key_map.values():
            if column not in columns:
                columns.append(column)
        return columns

    def parse(
        self,
        path: str,
        on_cue: Optional[CueCallback] = None,
        style: Optional[List[str]] = None,
        encoding: str = "utf-8",
    ) -> ParseResult:
        """
        Parse a CSV file into a WebVTT document.

        The whole file is read before parsing starts.

        Args:
            path: Path to the input CSV file
            on_cue: Called with each completed cue, in order
            style: Style blocks to place after the WEBVTT header
            encoding: File encoding (default: utf-8)

        Returns:
            ParseResult with either a document or the errors found

        Raises:
            OSError: If the file cannot be read
        """
        logger.info(f"Parsing CSV file: {path}")

        with open(path, 'r', encoding=encoding, newline='') as f:
            content = f.read()

        return self.parse_content(content, on_cue=on_cue, style=style)

    def parse_content(
        self,
        content: str,
        on_cue: Optional[CueCallback] = None,
        style: Optional[List[str]] = None,
    ) -> ParseResult:
        """
        Parse CSV content string into a WebVTT document (no file I/O).

        Args:
            content: CSV text, header row first
            on_cue: Called with each completed cue, in order. A cue counts as
                completed once the next cue starts; the last cue is passed
                after the final row.
            style: Style blocks to place after the WEBVTT header

        Returns:
            ParseResult with either a document or the errors found
        """
        reader = csv.DictReader(io.StringIO(content.lstrip('\ufeff')))
        try:
            fieldnames = reader.fieldnames or []
        except csv.Error as e:
            error = CSVFormatError(str(e), line_number=reader.line_num or 1)
            logger.info(error.message)
            return ParseResult(document=None, errors=[error])

        headers = [name.strip() for name in fieldnames]
        reader.fieldnames = headers

        missing = [column for column in self.required_columns if column not in headers]
        if missing:
            error = MissingHeaderKeyError(missing_keys=missing)
            logger.info(error.message)
            return ParseResult(document=None, errors=[error])

        cues: List[Cue] = []
        errors: List[ParsingError] = []
        previous_cue: Optional[Cue] = None
        previous_line: Optional[int] = None
        # Set while the latest timestamp row failed, so its continuation rows
        # are not attached to an earlier cue
        cue_failed = False

        for line_number, record in iter_records(reader, errors):
            row = row_from_record(record, self.key_map, line_number)
            if row.is_blank:
                logger.debug(f"Skipping blank row on line {line_number}")
                continue

            try:
                current_cue, is_new = self._extract_cue(row, previous_cue, cue_failed)
                validate_cue(current_cue, previous_cue, line_number, previous_line)
            except ROW_ERRORS as e:
                logger.debug(f"Row error: {e}")
                errors.append(e)
                if row.has_timestamp:
                    cue_failed = True
                continue

            if not is_new:
                continue

            if previous_cue is not None and on_cue is not None:
                on_cue(previous_cue)

            cues.append(current_cue)
            previous_cue = current_cue
            previous_line = line_number
            cue_failed = False

        if previous_cue is not None and on_cue is not None:
            on_cue(previous_cue)

        if errors:
            logger.info(f"CSV parsing failed with {len(errors)} error(s)")
            return ParseResult(document=None, errors=errors)

        logger.info(f"CSV parsing complete: {len(cues)} cues extracted")
        return ParseResult(document=Document(cues=cues, style=list(style or [])))

    def _extract_cue(self, row: Row, previous_cue: Optional[Cue], cue_failed: bool = False) -> Tuple[Cue, bool]:
        """
        Turn a row into the cue it belongs to.

        Returns:
            Tuple of (cue, is_new). Continuation rows return the previous
            cue with the row's caption appended.

        Raises:
            OrphanContinuationRowError: If a continuation row has no cue, or
                its cue is the timestamp row that just failed
        """
        cue = row.cue()
        if cue is not None:
            return cue, True

        if previous_cue is None or cue_failed:
            raise OrphanContinuationRowError(line_number=row.line_number, after_failed_row=cue_failed)

        previous_cue.add_caption(row.caption())
        return previous_cue, False


def record_start_line(record: Mapping[Optional[str], Any], end_line: int) -> int:
    """
    Work out the file line a record starts on.

    The reader only reports the line a record ends on; quoted cells that span
    several lines are counted back off.
    """
    newlines = 0
    for value in record.values():
        cells = value if isinstance(value, list) else [value]
        newlines += sum(cell.count('\n') for cell in cells if cell)
    return end_line - newlines


def iter_records(reader: csv.DictReader, errors: List[ParsingError]) -> Iterator[Tuple[int, Dict]]:
    """
    Yield (line_number, record) pairs from a DictReader.

    Line numbers are file lines, so blank lines the reader skips and
    multi-line cells are counted. If the CSV text cannot be read, a
    CSVFormatError is added to errors and iteration stops.
    """
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            error = CSVFormatError(str(e), line_number=reader.line_num)
            logger.debug(f"Row error: {error}")
            errors.append(error)
            return

        yield record_start_line(record, reader.line_num), record


def parse_csv_content(
    content: str,
    key_map: Optional[Mapping[str, str]] = None,
    style: Optional[List[str]] = None,
) -> ParseResult:
    """Parse CSV content with a one-off parser."""
    return CSVParser(key_map=key_map).parse_content(content, style=style)


def parse_csv(
    path: str,
    key_map: Optional[Mapping[str, str]] = None,
    style: Optional[List[str]] = None,
    encoding: str = "utf-8",
) -> ParseResult:
    """Parse a CSV file with a one-off parser."""
    return CSVParser(key_map=key_map).parse(path, style=style, encoding=encoding)
