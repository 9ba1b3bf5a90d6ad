################################################################################################
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the display density probes used to decide which icon variant to paint.
'''
################################################################################################

from __future__ import annotations

from typing import Iterable, List
import wx

from wxretina.core.log import Log
from wxretina.ui.constants import (
    RETINA_SCALE,
    SCALE_ATTRIBUTE,
    DENSITY_KINDS,
    DEFAULT_DENSITY_KIND,
)

__all__ = [
    "DensityDetector",
    "WxDensityDetector",
    "IntrospectionDensityDetector",
    "make_detector",
    "describe_screens",
    "DEFAULT_DETECTOR",
]

################################################################################################

def _is_render_context(target) -> bool:
    # wx.DC and wx.GraphicsContext both expose GetWindow(); windows and displays do not.
    return isinstance(target, (wx.DC, wx.GraphicsContext)) or callable(getattr(target, "GetWindow", None))


def _context_window(ctx):
    """Return the window a render context draws into, or None (memory/printer DCs)."""
    get_window = getattr(ctx, "GetWindow", None)
    if get_window is None:
        return None
    try:
        window = get_window()
    except Exception as e:
        Log.debug(f"GetWindow() failed on {type(ctx).__name__}: {e}", 3)
        return None
    return window

################################################################################################

class DensityDetector:
    """
    Reports whether a display surface is high-density (2x).

    Every query fails closed: anything that cannot be determined is
    reported as standard density. Nothing is cached since a window can
    move to another monitor between two paints.
    """

    def is_high_density(self, target=None) -> bool:
        """
        - no target      -> True if any attached screen is high-density
        - render context -> density of the window it draws into
        - anything else  -> treated as a surface (window or display)
        """
        if target is None:
            return self.any_high_density()
        if _is_render_context(target):
            return self.context_is_high_density(target)
        return self.surface_is_high_density(target)

    def screens(self) -> Iterable:
        try:
            return [wx.Display(i) for i in range(wx.Display.GetCount())]
        except Exception as e:
            Log.debug(f"display enumeration failed: {e}", 3)
            return []

    def any_high_density(self) -> bool:
        return any(self.surface_is_high_density(s) for s in self.screens())

    def context_is_high_density(self, ctx) -> bool:
        window = _context_window(ctx)
        if window is None:
            return False
        return self.surface_is_high_density(window)

    def surface_is_high_density(self, surface) -> bool:
        raise NotImplementedError

################################################################################################

class WxDensityDetector(DensityDetector):
    """Uses wx's public scale-factor queries (windows and wx.Display)."""

    _PROBES = ("GetContentScaleFactor", "GetScaleFactor")

    def surface_is_high_density(self, surface) -> bool:
        for name in self._PROBES:
            probe = getattr(surface, name, None)
            if callable(probe):
                break
        else:
            return False

        try:
            factor = float(probe())
        except Exception as e:
            Log.debug(f"{name}() failed on {type(surface).__name__}: {e}", 3)
            return False
        return factor == RETINA_SCALE


class IntrospectionDensityDetector(DensityDetector):
    """
    Reads a normally private scale attribute straight off the surface.
    Only an int exactly equal to 2 counts; bools, floats and missing or
    raising attributes all read as standard density.
    """

    def __init__(self, attribute: str = SCALE_ATTRIBUTE) -> None:
        self.attribute = attribute

    def surface_is_high_density(self, surface) -> bool:
        try:
            scale = getattr(surface, self.attribute)
        except Exception as e:
            Log.debug(f"no '{self.attribute}' on {type(surface).__name__}: {e}", 3)
            return False
        return isinstance(scale, int) and not isinstance(scale, bool) and scale == RETINA_SCALE

################################################################################################

_KIND_MAP = {
    "wx": WxDensityDetector,
    "introspect": IntrospectionDensityDetector,
}


def make_detector(kind: str = DEFAULT_DENSITY_KIND) -> DensityDetector:
    """Build the detector named by `kind` (one of DENSITY_KINDS)."""
    key = (kind or "").strip().lower()
    if key not in DENSITY_KINDS:
        raise ValueError(f"unknown density detector {kind!r}; expected one of {', '.join(DENSITY_KINDS)}")
    return _KIND_MAP[key]()


def describe_screens(detector: DensityDetector) -> List[str]:
    """One human-readable line per attached display, for the --info CLI."""
    lines = []
    for i, screen in enumerate(detector.screens()):
        try:
            geo = screen.GetGeometry()
            size = f"{geo.width}x{geo.height}"
        except Exception:
            size = "?x?"
        dens = "high-density" if detector.surface_is_high_density(screen) else "standard"
        lines.append(f"display {i}: {size} {dens}")
    return lines

################################################################################################

# Stateless, so a shared instance is safe
DEFAULT_DETECTOR = WxDensityDetector()

################################################################################################
