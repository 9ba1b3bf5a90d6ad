'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import io
import wx

from wxretina.core.log import Log
from wxretina.utils.image_types import bitmap_type_for
from wxretina.utils.locators import Locator, fetch_bytes

__all__ = ["read_image", "read_bitmap"]


def _ensure_wx_app() -> None:
    """
    Ensure a wx.App exists (safe if already created).
    Decoding does not need a shown window, but some platforms require app init.
    """
    if not wx.App.IsMainLoopRunning():
        app = wx.App.GetInstance()
        if app is None:
            wx.App(False)


def _decode(data: bytes, hint: int) -> wx.Image:
    # Silence wx's own "can't load image" message boxes; failures are reported by raising.
    no_log = wx.LogNull()
    try:
        img = wx.Image(io.BytesIO(data), hint)
        if not img.IsOk() and hint != wx.BITMAP_TYPE_ANY:
            # Extension lied about the format; let wx sniff the stream
            img = wx.Image(io.BytesIO(data), wx.BITMAP_TYPE_ANY)
    finally:
        del no_log
    return img


def read_image(locator: Locator) -> wx.Image:
    """
    Fetch and decode the image behind `locator`.
    Raises OSError if the resource cannot be read, RuntimeError if it cannot be decoded.
    """
    _ensure_wx_app()

    data = fetch_bytes(locator)
    img = _decode(data, bitmap_type_for(locator))
    if not img.IsOk():
        raise RuntimeError(f"failed to decode image: {locator}")

    Log.debug(f"read_image({str(locator)!r}) -> {img.GetWidth()}x{img.GetHeight()}", 3)
    return img


def read_bitmap(locator: Locator) -> wx.Bitmap:
    """Decode `locator` into a drawable wx.Bitmap."""
    bmp = wx.Bitmap(read_image(locator))
    if not bmp.IsOk():
        raise RuntimeError(f"failed to convert image to bitmap: {locator}")
    return bmp
