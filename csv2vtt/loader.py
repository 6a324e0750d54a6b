"""
Input loading for csv2vtt.

Reads caption sheets and style sheets from local paths or HTTP(S) URLs.
The whole source is loaded into memory before parsing.
"""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


def is_remote_source(source: str) -> bool:
    """Check if source is an HTTP or HTTPS URL."""
    return source.lower().startswith(('http://', 'https://'))


def read_source(source: str, encoding: str = "utf-8", timeout: int = 30) -> str:
    """
    Read text from a local file or an HTTP(S) URL.

    A leading byte order mark is removed.

    Args:
        source: Local path or URL
        encoding: Text encoding (default: utf-8)
        timeout: Request timeout in seconds for URLs (default: 30)

    Returns:
        Source content as string

    Raises:
        OSError: If a local file cannot be read
        requests.RequestException: If a URL cannot be fetched
    """
    if is_remote_source(source):
        logger.info(f"Downloading {source}")
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        response.encoding = encoding
        content = response.text
    else:
        logger.debug(f"Reading {source}")
        with open(source, 'r', encoding=encoding, newline='') as f:
            content = f.read()

    return content.lstrip('\ufeff')


def style_block(css: str) -> Optional[str]:
    """
    Wrap CSS in a WebVTT STYLE block.

    Returns None for empty CSS. Blank lines are removed since they would
    end the block early.
    """
    lines = [line.rstrip() for line in css.splitlines() if line.strip()]
    if not lines:
        return None
    return "STYLE\n" + "\n".join(lines)


def read_style(source: str, encoding: str = "utf-8", timeout: int = 30) -> Optional[str]:
    """Read a CSS file or URL and return it as a STYLE block."""
    return style_block(read_source(source, encoding=encoding, timeout=timeout))
