'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Sequence
import wx

from wxretina import create_icon, is_retina
from wxretina.core.errors import LoadError
from wxretina.core.log import Log
from wxretina.ui.constants import PADDING, DEFAULT_BG_COLOR
from wxretina.ui.density import DensityDetector, DEFAULT_DETECTOR
from wxretina.ui.icons import RetinaIcon

__all__ = ["IconPanel", "ViewerFrame", "layout_icons"]


def layout_icons(icons: Sequence[RetinaIcon], pad: int = PADDING) -> List[tuple]:
    """
    Place icons left to right, top-aligned, `pad` px apart.
    Returns [(icon, x, y), ...]. Only logical sizes are used, so the layout
    is the same on every display.
    """
    placed = []
    x = pad
    for icon in icons:
        placed.append((icon, x, pad))
        x += icon.width + pad
    return placed


class IconPanel(wx.Panel):
    """Paints a row of RetinaIcons; every repaint re-checks the display density."""

    def __init__(self, parent: wx.Window, icons: Sequence[RetinaIcon] = ()):
        super().__init__(parent, style=wx.BORDER_NONE)
        self._icons: List[RetinaIcon] = list(icons)

        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_ERASE_BACKGROUND, lambda e: None)
        self._update_min_size()

    def _update_min_size(self):
        w = sum(icon.width for icon in self._icons) + PADDING * (len(self._icons) + 1)
        h = max((icon.height for icon in self._icons), default=0) + 2 * PADDING
        self.SetMinSize((max(w, 64), max(h, 64)))

    def _on_paint(self, _evt: wx.PaintEvent):
        dc = wx.AutoBufferedPaintDC(self)
        dc.SetBackground(wx.Brush(self.GetBackgroundColour()))
        dc.Clear()
        for icon, x, y in layout_icons(self._icons):
            icon.paint(dc, x, y)


class ViewerFrame(wx.Frame):
    """Top-level window showing the icons given on the command line."""

    def __init__(self, locators: Sequence[str], detector: DensityDetector = DEFAULT_DETECTOR):
        super().__init__(None, title="wxretina")
        self._detector = detector

        icons = []
        failed = []
        for loc in locators:
            try:
                icons.append(create_icon(loc, detector=detector))
            except LoadError as e:
                Log.debug(str(e), 0)
                failed.append(loc)

        self.panel = IconPanel(self, icons)
        self.CreateStatusBar()

        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.panel, 1, wx.EXPAND)
        self.SetSizerAndFit(sizer)

        # Moving to another monitor can change density
        self.Bind(wx.EVT_MOVE, self._on_move)
        self._update_status(failed)

    def _on_move(self, evt: wx.MoveEvent):
        self._update_status()
        self.panel.Refresh()
        evt.Skip()

    def _update_status(self, failed: Sequence[str] = ()):
        dens = "high-density" if is_retina(self, self._detector) else "standard density"
        text = f"{dens} window"
        if failed:
            text += f"; failed to load: {', '.join(failed)}"
        self.SetStatusText(text)
