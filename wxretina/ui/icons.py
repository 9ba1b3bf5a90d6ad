################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the retina-aware icon that picks a plain or @2x bitmap at paint time.
'''
################################################################################################

from __future__ import annotations

import wx

from wxretina.core.bundle import ImageBundle
from wxretina.core.log import Log
from wxretina.ui.constants import RETINA_SCALE
from wxretina.ui.density import DensityDetector, DEFAULT_DETECTOR

__all__ = ["RetinaIcon"]

################################################################################################

def _graphics_context_for(dc: wx.DC):
    """
    Return a graphics context drawing into `dc`, or None when wx cannot make one.
    A wx.GCDC already owns one; other DCs go through GraphicsContext.Create,
    which only accepts window, memory and printer DCs.
    """
    if isinstance(dc, wx.GCDC):
        return dc.GetGraphicsContext()
    try:
        return wx.GraphicsContext.Create(dc)
    except TypeError as e:
        Log.debug(f"no graphics context for {type(dc).__name__}: {e}", 3)
        return None

################################################################################################

class RetinaIcon:
    """
    Paintable icon over one ImageBundle.

    The reported size is always the bundle's logical (plain) size. Which
    variant is drawn is decided on every paint() from the density of the
    target context:
      - high density: @2x bitmap at half scale, else plain unscaled
      - standard:     plain unscaled, else @2x unscaled
    """

    def __init__(self, bundle: ImageBundle, detector: DensityDetector = DEFAULT_DETECTOR):
        self._bundle = bundle
        self._detector = detector

    # ------------------------------------------------------------------ #
    # size
    # ------------------------------------------------------------------ #

    @property
    def bundle(self) -> ImageBundle:
        return self._bundle

    @property
    def width(self) -> int:
        return self._bundle.width

    @property
    def height(self) -> int:
        return self._bundle.height

    def GetWidth(self) -> int:
        return self.width

    def GetHeight(self) -> int:
        return self.height

    # ------------------------------------------------------------------ #
    # painting
    # ------------------------------------------------------------------ #

    def paint(self, ctx, x: int, y: int) -> None:
        """
        Draw the icon with its top-left corner at (x, y).
        `ctx` is a wx.GraphicsContext, or a wx.DC which gets a graphics
        context for the duration of the call. Never raises for missing variants
        or for DCs wx cannot build a graphics context over.
        """
        if isinstance(ctx, wx.DC):
            gc = _graphics_context_for(ctx)
            if gc is None:
                return
            # Density must come from the DC: a GC made over it may not know its window
            retina = self._detector.is_high_density(ctx)
            try:
                self._paint(gc, retina, x, y)
            finally:
                gc.Flush()
                del gc
            return

        self._paint(ctx, self._detector.is_high_density(ctx), x, y)

    def _paint(self, gc, retina: bool, x: int, y: int) -> None:
        Log.debug(f"paint at ({x}, {y}) retina={retina}", 5)
        if retina:
            if not self._paint_retina(gc, x, y):
                self._paint_plain(gc, x, y)
        else:
            # Oversized when only the @2x bitmap exists; kept as the last resort
            if not self._paint_plain(gc, x, y):
                self._paint_retina(gc, x, y, scaled=False)

    def _paint_retina(self, gc, x: int, y: int, scaled: bool = True) -> bool:
        bmp = self._bundle.retina
        if bmp is None:
            return False

        bw, bh = bmp.GetWidth(), bmp.GetHeight()
        if not scaled:
            gc.DrawBitmap(bmp, x, y, bw, bh)
            return True

        # Clip to the logical box, then draw the native-size bitmap at half scale
        gc.PushState()
        try:
            gc.Clip(x, y, self.width, self.height)
            gc.Translate(x, y)
            gc.Scale(1.0 / RETINA_SCALE, 1.0 / RETINA_SCALE)
            gc.DrawBitmap(bmp, 0, 0, bw, bh)
        finally:
            gc.ResetClip()
            gc.PopState()
        return True

    def _paint_plain(self, gc, x: int, y: int) -> bool:
        bmp = self._bundle.plain
        if bmp is None:
            return False
        gc.DrawBitmap(bmp, x, y, bmp.GetWidth(), bmp.GetHeight())
        return True

    # ------------------------------------------------------------------ #
    # wx interop
    # ------------------------------------------------------------------ #

    def to_bitmap_bundle(self) -> wx.BitmapBundle:
        return self._bundle.to_bitmap_bundle()

################################################################################################
