"""
Command line entry point for csv2vtt.

Usage:
  csv2vtt captions.csv                  # writes ./captions.vtt
  csv2vtt captions.csv -o out/          # writes out/captions.vtt
  csv2vtt captions.csv -o subs.vtt --style theme.css
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import requests

from . import __version__
from .loader import read_source, read_style
from .models import ConvertConfig
from .parser import CSVParser, DEFAULT_KEY_MAP, ParseResult

logger = logging.getLogger(__name__)

COLUMN_OPTIONS = {
    "timestamp": "timestamp_column",
    "speaker": "speaker_column",
    "content": "text_column",
    "settings": "style_column",
}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv2vtt",
        description="Convert a CSV caption sheet into a WebVTT subtitle file.",
    )
    parser.add_argument("input", help="input CSV file path or http(s) URL")
    parser.add_argument(
        "-o", "--output",
        help="output file or directory (default: current directory)",
    )
    parser.add_argument("--style", help="CSS file to embed as a STYLE block")
    parser.add_argument(
        "--encoding", default="utf-8",
        help="encoding of the input and style files (default: utf-8)",
    )
    parser.add_argument(
        "--timeout", type=int, default=30,
        help="request timeout in seconds for URL inputs (default: 30)",
    )
    for key, dest in COLUMN_OPTIONS.items():
        parser.add_argument(
            f"--{dest.replace('_', '-')}", dest=dest, default=None,
            help=f"CSV column holding the {key} (default: \"{DEFAULT_KEY_MAP[key]}\")",
        )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_output_path(input_source: str, output: Optional[str]) -> str:
    """
    Work out where the VTT file goes.

    When output is a directory (or not given, meaning the current
    directory) the file is named after the input with a .vtt extension.
    """
    target = output or os.getcwd()
    if not os.path.isdir(target):
        return target

    stem = Path(input_source.rstrip('/').rsplit('/', 1)[-1]).stem or "captions"
    return os.path.join(target, f"{stem}.vtt")


def config_from_args(args: argparse.Namespace) -> ConvertConfig:
    key_map: Dict[str, str] = {}
    for key, dest in COLUMN_OPTIONS.items():
        column = getattr(args, dest)
        if column:
            key_map[key] = column

    return ConvertConfig(
        input=args.input,
        output=resolve_output_path(args.input, args.output),
        style_path=args.style,
        key_map=key_map or None,
        encoding=args.encoding,
        timeout=args.timeout,
    )


def convert(config: ConvertConfig) -> ParseResult:
    """
    Run a conversion and write the VTT file when it succeeds.

    Raises:
        OSError: If the input, style or output file cannot be accessed
        requests.RequestException: If a URL input cannot be fetched
    """
    content = read_source(config.input, encoding=config.encoding, timeout=config.timeout)

    style: List[str] = []
    if config.style_path:
        block = read_style(config.style_path, encoding=config.encoding, timeout=config.timeout)
        if block:
            style.append(block)

    result = CSVParser(key_map=config.key_map).parse_content(content, style=style)
    if result.document is None:
        return result

    with open(config.output, 'w', encoding='utf-8') as f:
        f.write(result.document.render() + "\n")

    logger.info(f"Wrote {len(result.document.cues)} cues to {config.output}")
    return result


def report_errors(messages: Sequence[str]) -> None:
    count = len(messages)
    print(f"Encountered {count} error{'' if count == 1 else 's'}:", file=sys.stderr)
    for message in messages:
        print(f"  {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        result = convert(config)
    except (ValueError, OSError, requests.RequestException) as e:
        report_errors([str(e)])
        return 1

    if not result.ok:
        report_errors([error.message for error in result.errors])
        return 1

    print(f"Wrote VTT content to {config.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
