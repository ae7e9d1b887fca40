"""
Text Utilities

Helper functions for text and URL cleanup shared by the parsers and the renderer.
"""

import html
import re
from typing import Optional

from .constants import BASE_URL


def clean_text(text: Optional[str]) -> str:
    """Collapse runs of whitespace to a single space and strip the ends."""
    if not text:
        return ""
    return ' '.join(text.split()).strip()


def escape_text(text: str) -> str:
    """Escape text for safe embedding into HTML markup (quotes included)."""
    return html.escape(text, quote=True)


def normalize_url(url: Optional[str], base_url: str = BASE_URL) -> Optional[str]:
    """
    Turn an image or page reference into an absolute URL.

    Args:
        url: Absolute, protocol-relative (//host/path) or root-relative URL
        base_url: Site base URL prefixed to root-relative paths

    Returns:
        Absolute URL, or None for empty input
    """
    if not url:
        return None

    url = url.strip()
    if not url:
        return None

    if url.startswith('//'):
        return 'https:' + url
    if url.startswith('http'):
        return url

    return base_url.rstrip('/') + '/' + url.lstrip('/')


def strip_query(url: str) -> str:
    """
    Drop the query string from an image URL.

    Resized image URLs carry cache-busting parameters after the file
    extension; only the bare file path identifies the image.
    """
    return url.split('?', 1)[0]


def sanitize_filename(name: str, max_length: int = 100) -> str:
    """Replace everything outside [A-Za-z0-9_-] with underscores and cap the length."""
    return re.sub(r'[^a-zA-Z0-9_-]', '_', name)[:max_length]


def format_file_size(size: int) -> str:
    """
    Format a byte count for humans.

    Example:
        0 -> "0 B", 1536 -> "1.5 KB"
    """
    if size <= 0:
        return "0 B"

    units = ['B', 'KB', 'MB', 'GB']
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1

    return f"{round(value, 2):g} {units[index]}"


def reference_from_url(url: str) -> str:
    """Return the last run of digits in a product URL (the reference), or the URL itself."""
    digits = re.findall(r'\d+', url or "")
    return digits[-1] if digits else (url or "")
