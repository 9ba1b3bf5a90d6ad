"""Shared fakes: rasters, windows and graphics contexts that need no display."""

from __future__ import annotations

import os
from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


class FakeBitmap:
    def __init__(self, width: int, height: int, name: str = "bmp") -> None:
        self.width = width
        self.height = height
        self.name = name

    def GetWidth(self) -> int:
        return self.width

    def GetHeight(self) -> int:
        return self.height

    def __repr__(self) -> str:
        return f"FakeBitmap({self.name}, {self.width}x{self.height})"


class FakeWindow:
    """A window reporting a fixed content scale factor."""

    def __init__(self, factor: float = 1.0) -> None:
        self.factor = factor

    def GetContentScaleFactor(self) -> float:
        return self.factor


def _record(name):
    def method(self, *args):
        self.calls.append((name, *args))
    return method


class FakeGC:
    """Records every drawing call made on it, in order."""

    def __init__(self, window=None) -> None:
        self.window = window
        self.calls = []

    def GetWindow(self):
        return self.window

    PushState = _record("PushState")
    PopState = _record("PopState")
    Clip = _record("Clip")
    ResetClip = _record("ResetClip")
    Translate = _record("Translate")
    Scale = _record("Scale")
    DrawBitmap = _record("DrawBitmap")

    def draws(self):
        return [c for c in self.calls if c[0] == "DrawBitmap"]


@pytest.fixture
def plain_bmp() -> FakeBitmap:
    return FakeBitmap(16, 12, "plain")


@pytest.fixture
def retina_bmp() -> FakeBitmap:
    return FakeBitmap(32, 24, "retina")


@pytest.fixture
def retina_gc() -> FakeGC:
    return FakeGC(FakeWindow(2.0))


@pytest.fixture
def standard_gc() -> FakeGC:
    return FakeGC(FakeWindow(1.0))


# ---------------------------------------------------------------------------
# real wx objects (need a wx.App, hence a display)
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def wx_app():
    wx = pytest.importorskip("wx")
    if sys.platform.startswith("linux") and not (
        os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
    ):
        pytest.skip("wx.App needs a display")
    app = wx.App.GetInstance() or wx.App(False)
    yield app


def solid_image(width: int, height: int, rgb):
    import wx

    img = wx.Image(width, height)
    img.SetRGB(wx.Rect(0, 0, width, height), *rgb)
    return img


def write_png(path: Path, width: int, height: int, rgb=(255, 0, 0)) -> Path:
    import wx

    assert solid_image(width, height, rgb).SaveFile(str(path), wx.BITMAP_TYPE_PNG)
    return path


def pixel(bmp, x: int, y: int):
    img = bmp.ConvertToImage()
    return img.GetRed(x, y), img.GetGreen(x, y), img.GetBlue(x, y)
