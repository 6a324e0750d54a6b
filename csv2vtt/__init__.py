"""
csv2vtt - CSV to WebVTT Conversion Toolkit

Converts caption sheets (CSV rows of timestamp ranges, speakers and text)
into WebVTT subtitle documents.

Features:
- Loose timestamp formats ("30", "01:30", "1:02:03", "00:01:30.500", ...)
- Several captions per cue through continuation rows
- Cue settings and STYLE blocks
- Complete error reports: every bad row in one pass
- Configurable CSV column names

Example usage:
    >>> from csv2vtt import CSVParser
    >>>
    >>> parser = CSVParser()
    >>> result = parser.parse("captions.csv")
    >>> if result.ok:
    ...     print(result.document.render())
    ... else:
    ...     for error in result.errors:
    ...         print(error.message)
"""

import logging

__version__ = "1.0.0"
__author__ = "csv2vtt Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core utility functions
from .utils import (
    normalize_timestamp,
    timestamp_to_seconds,
    split_timestamp_range,
    escape_cue_text,
    parse_cue_settings,
)

# Errors
from .errors import (
    ParsingError,
    MissingHeaderKeyError,
    TimestampFormattingError,
    MissingTimestampError,
    InvalidTimestampRangeError,
    InvalidTimestampSequenceError,
    OrphanContinuationRowError,
    CSVFormatError,
)

# Data models
from .models import Caption, Comment, CueSettings, Cue, Document, ConvertConfig

# Main classes
from .row import Row, row_from_record
from .validator import validate_cue, validate_timestamp_range, validate_timestamp_sequence
from .parser import CSVParser, ParseResult, DEFAULT_KEY_MAP, parse_csv, parse_csv_content
from .loader import read_source, read_style

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Timestamp and text utilities
    "normalize_timestamp",
    "timestamp_to_seconds",
    "split_timestamp_range",
    "escape_cue_text",
    "parse_cue_settings",

    # Errors
    "ParsingError",
    "MissingHeaderKeyError",
    "TimestampFormattingError",
    "MissingTimestampError",
    "InvalidTimestampRangeError",
    "InvalidTimestampSequenceError",
    "OrphanContinuationRowError",
    "CSVFormatError",

    # Models
    "Caption",
    "Comment",
    "CueSettings",
    "Cue",
    "Document",
    "ConvertConfig",

    # Parsing
    "Row",
    "row_from_record",
    "validate_cue",
    "validate_timestamp_range",
    "validate_timestamp_sequence",
    "CSVParser",
    "ParseResult",
    "DEFAULT_KEY_MAP",
    "parse_csv",
    "parse_csv_content",

    # Loading
    "read_source",
    "read_style",
]
