"""
Utilities for handling file paths, extensions and source URLs.
"""

from pathlib import Path

from pathvalidate import sanitize_filename


def is_url(token: str) -> bool:
    """Anything starting with 'http' is fetched rather than read from disk."""
    return token.startswith("http")


def url_suffix(url: str) -> str:
    """
    Derives a temporary-file suffix from the text after the URL's final dot.

    'https://host/audio.flac' gives '.flac'; a URL without any dot gives ''.
    Characters that cannot appear in a file name are dropped.
    """
    if "." not in url:
        return ""
    ext = sanitize_filename(url.rsplit(".", 1)[1])
    return f".{ext}" if ext else ""


def file_extension(path: Path) -> str | None:
    """Returns the extension without its leading dot, or None if there is none."""
    suffix = Path(path).suffix
    return suffix[1:] if suffix else None
