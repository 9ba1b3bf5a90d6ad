from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict
from urllib.parse import urlsplit

import wx

__all__ = ["IMAGE_EXTS", "bitmap_type_for"]

# Raster formats wx can decode, mapped to the handler hint passed to wx.Image
IMAGE_EXTS: Dict[str, int] = {
    "png": wx.BITMAP_TYPE_PNG,
    "jpg": wx.BITMAP_TYPE_JPEG,
    "jpeg": wx.BITMAP_TYPE_JPEG,
    "gif": wx.BITMAP_TYPE_GIF,
    "bmp": wx.BITMAP_TYPE_BMP,
    "ico": wx.BITMAP_TYPE_ICO,
    "tif": wx.BITMAP_TYPE_TIFF,
    "tiff": wx.BITMAP_TYPE_TIFF,
}


def _extension(locator) -> str:
    # Use only the path component so query strings do not leak into the suffix
    path = urlsplit(str(locator).replace("\\", "/")).path
    return PurePosixPath(path).suffix.lower().lstrip(".")


def bitmap_type_for(locator) -> int:
    """
    Return the wx.BITMAP_TYPE_* hint for a locator, or wx.BITMAP_TYPE_ANY
    when the extension is unknown or missing so wx sniffs the stream.
    """
    return IMAGE_EXTS.get(_extension(locator), wx.BITMAP_TYPE_ANY)
