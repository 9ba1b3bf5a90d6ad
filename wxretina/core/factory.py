# core/factory.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Any, Callable

from wxretina.core.bundle import ImageBundle
from wxretina.core.errors import LoadError
from wxretina.core.log import Log
from wxretina.ui.image_loader import read_bitmap
from wxretina.utils.locators import Locator, derive_retina_locator

__all__ = ["ImageBundleFactory", "PlainImageBundleFactory", "DEFAULT_FACTORY"]


class ImageBundleFactory:
    """
    Resolves a locator into an ImageBundle.

    Subclass this to add caching, lazy loading or a different naming
    convention. The only contract is that the returned bundle's
    width/height are the plain image's dimensions.
    """

    def create(self, locator: Locator) -> ImageBundle:
        raise NotImplementedError


class PlainImageBundleFactory(ImageBundleFactory):
    """
    Loads both variants eagerly on every call, no caching.

    `reader` decodes one locator into a raster; it defaults to
    ui.image_loader.read_bitmap and is swappable for alternate codecs.
    """

    def __init__(self, reader: Callable[[Locator], Any] | None = None) -> None:
        self._reader = reader or read_bitmap

    def create(self, locator: Locator) -> ImageBundle:
        try:
            plain = self._reader(locator)
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(locator, str(e)) from e
        if plain is None:
            raise LoadError(locator, "decoder returned no image")

        retina = self._load_retina(locator)

        Log.debug(
            f"create({str(locator)!r}): {plain.GetWidth()}x{plain.GetHeight()}, "
            f"retina={'yes' if retina is not None else 'no'}",
            2,
        )
        return ImageBundle(plain, retina, int(plain.GetWidth()), int(plain.GetHeight()))

    def _load_retina(self, locator: Locator):
        """Best effort: a missing or broken @2x variant just means plain-only."""
        try:
            retina_locator = derive_retina_locator(locator)
            return self._reader(retina_locator)
        except Exception as e:
            Log.debug(f"no retina variant for {str(locator)!r}: {e}", 3)
            return None


# Stateless, so one shared instance serves every caller
DEFAULT_FACTORY = PlainImageBundleFactory()
