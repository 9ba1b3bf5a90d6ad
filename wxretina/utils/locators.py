from __future__ import annotations

from pathlib import Path
from typing import Union
from urllib.parse import urlsplit
from urllib.request import urlopen

from wxretina.ui.constants import RETINA_SUFFIX

Locator = Union[str, Path]

__all__ = [
    "Locator",
    "locator_text",
    "is_url",
    "derive_retina_locator",
    "fetch_bytes",
]

# Schemes handed to urllib; anything else is treated as a filesystem path.
_URL_SCHEMES = {"file", "http", "https", "ftp"}


def locator_text(locator: Locator) -> str:
    """Return the string form of a locator (paths via str(), URLs unchanged)."""
    return str(locator)


def is_url(locator: Locator) -> bool:
    # Single-letter "schemes" are Windows drive letters, not URLs.
    scheme = urlsplit(locator_text(locator)).scheme.lower()
    return len(scheme) > 1 and scheme in _URL_SCHEMES


def derive_retina_locator(locator: Locator) -> str:
    """
    Derive the double-density locator by inserting "@2x" before the last dot
    of the locator's string form, or appending it when there is no dot:

        "a/b/icon.png" -> "a/b/icon@2x.png"
        "a/b/icon"     -> "a/b/icon@2x"
        "x.y.png"      -> "x.y@2x.png"

    The split is on the last dot of the whole string, so a dot in a
    directory name of an extension-less file is where the suffix lands.
    The result is always a string, even for Path input.
    """
    text = locator_text(locator)
    dot = text.rfind(".")
    if dot == -1:
        return text + RETINA_SUFFIX
    return text[:dot] + RETINA_SUFFIX + text[dot:]


def fetch_bytes(locator: Locator, *, timeout: float | None = None) -> bytes:
    """
    Read the raw bytes behind a locator. Blocks for the whole transfer.
    Raises OSError (including urllib's URLError) when the resource is
    missing or unreadable, ValueError for a malformed URL.
    """
    text = locator_text(locator)
    if is_url(text):
        kwargs = {} if timeout is None else {"timeout": timeout}
        with urlopen(text, **kwargs) as resp:
            return resp.read()
    return Path(text).expanduser().read_bytes()
