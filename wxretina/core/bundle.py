# core/bundle.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import wx

from wxretina.ui.constants import RETINA_SCALE

__all__ = ["ImageBundle"]


@dataclass(slots=True, frozen=True)
class ImageBundle:
    """
    The decoded variants of one icon asset.

    • plain   – standard-resolution raster (always set by the default factory)
    • retina  – double-resolution raster, or None when no @2x asset exists
    • width   – logical width in px (the plain image's width)
    • height  – logical height in px (the plain image's height)

    Rasters only need GetWidth()/GetHeight(); the default factory stores wx.Bitmap.
    """
    plain: Optional[Any]
    retina: Optional[Any]
    width: int
    height: int

    @classmethod
    def from_images(cls, plain, retina=None) -> "ImageBundle":
        """
        Build a bundle whose logical size comes from the plain image.
        Factories that cannot supply a plain image get half the retina size,
        and an empty bundle is 0x0.
        """
        if plain is not None:
            return cls(plain, retina, int(plain.GetWidth()), int(plain.GetHeight()))
        if retina is not None:
            return cls(
                None,
                retina,
                int(retina.GetWidth()) // RETINA_SCALE,
                int(retina.GetHeight()) // RETINA_SCALE,
            )
        return cls(None, None, 0, 0)

    @property
    def has_retina(self) -> bool:
        return self.retina is not None

    def to_bitmap_bundle(self):
        """
        Hand the variants to wx's own HiDPI container so stock widgets
        (buttons, toolbars, menus) can pick the right one themselves.
        Returns an empty wx.BitmapBundle when neither variant is present.
        """
        bitmaps = [b for b in (self.plain, self.retina) if b is not None]
        if not bitmaps:
            return wx.BitmapBundle()
        if len(bitmaps) == 1:
            return wx.BitmapBundle.FromBitmap(bitmaps[0])
        return wx.BitmapBundle.FromBitmaps(bitmaps)
