"""Decoding real image files through wx and the default bundle factory."""

from __future__ import annotations

from pathlib import Path

import pytest

wx = pytest.importorskip("wx")

import wxretina
from conftest import pixel, write_png
from wxretina.core.errors import LoadError
from wxretina.core.factory import PlainImageBundleFactory
from wxretina.ui.density import WxDensityDetector
from wxretina.ui.image_loader import read_bitmap, read_image

pytestmark = pytest.mark.usefixtures("wx_app")


def test_read_image_decodes_png(tmp_path: Path) -> None:
    path = write_png(tmp_path / "save.png", 16, 12)

    img = read_image(path)

    assert img.IsOk()
    assert (img.GetWidth(), img.GetHeight()) == (16, 12)


def test_read_bitmap_from_file_url(tmp_path: Path) -> None:
    path = write_png(tmp_path / "save.png", 8, 8)

    bmp = read_bitmap(path.as_uri())

    assert isinstance(bmp, wx.Bitmap)
    assert bmp.IsOk()
    assert (bmp.GetWidth(), bmp.GetHeight()) == (8, 8)


def test_wrong_extension_is_sniffed(tmp_path: Path) -> None:
    # PNG bytes behind a .jpg name: the JPEG hint fails, the retry with ANY works
    png = write_png(tmp_path / "real.png", 10, 6)
    mislabelled = tmp_path / "icon.jpg"
    mislabelled.write_bytes(png.read_bytes())

    img = read_image(mislabelled)

    assert (img.GetWidth(), img.GetHeight()) == (10, 6)


def test_garbage_raises_runtime_error(tmp_path: Path) -> None:
    junk = tmp_path / "junk.png"
    junk.write_bytes(b"this is not an image")

    with pytest.raises(RuntimeError):
        read_image(junk)


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_bitmap(tmp_path / "missing.png")


# ---------------------------------------------------------------------------
# default factory on real files
# ---------------------------------------------------------------------------

def test_default_factory_loads_retina_sibling(tmp_path: Path) -> None:
    write_png(tmp_path / "save.png", 16, 16)
    write_png(tmp_path / "save@2x.png", 32, 32)

    bundle = PlainImageBundleFactory().create(tmp_path / "save.png")

    assert (bundle.width, bundle.height) == (16, 16)
    assert bundle.retina is not None
    assert (bundle.retina.GetWidth(), bundle.retina.GetHeight()) == (32, 32)


def test_default_factory_without_retina_sibling(tmp_path: Path) -> None:
    write_png(tmp_path / "open.png", 20, 10)

    bundle = PlainImageBundleFactory().create(tmp_path / "open.png")

    assert bundle.plain.IsOk()
    assert bundle.retina is None
    assert (bundle.width, bundle.height) == (20, 10)


def test_default_factory_ignores_broken_retina(tmp_path: Path) -> None:
    write_png(tmp_path / "open.png", 20, 10)
    (tmp_path / "open@2x.png").write_bytes(b"truncated")

    assert PlainImageBundleFactory().create(tmp_path / "open.png").retina is None


def test_default_factory_garbage_plain_raises_load_error(tmp_path: Path) -> None:
    junk = tmp_path / "junk.png"
    junk.write_bytes(b"\x89PNG but not really")
    write_png(tmp_path / "junk@2x.png", 8, 8)

    with pytest.raises(LoadError) as info:
        PlainImageBundleFactory().create(junk)

    assert isinstance(info.value.__cause__, RuntimeError)


def test_default_factory_missing_plain_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError) as info:
        PlainImageBundleFactory().create(tmp_path / "missing.png")

    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_create_icon_paints_plain_onto_memory_dc(tmp_path: Path) -> None:
    write_png(tmp_path / "stop.png", 16, 16, (255, 0, 0))
    write_png(tmp_path / "stop@2x.png", 32, 32, (0, 0, 255))
    icon = wxretina.create_icon(tmp_path / "stop.png", detector=WxDensityDetector())

    target = wx.Bitmap(40, 40)
    dc = wx.MemoryDC(target)
    dc.SetBackground(wx.Brush(wx.Colour(255, 255, 255)))
    dc.Clear()
    # A memory DC has no window, so it is standard density
    icon.paint(dc, 4, 4)
    dc.SelectObject(wx.NullBitmap)

    assert pixel(target, 10, 10) == (255, 0, 0)
    assert pixel(target, 30, 30) == (255, 255, 255)
