'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

Load retina (@2x) aware icons and query the environment about high-density displays.
'''
from __future__ import annotations

from wxretina.core.bundle import ImageBundle
from wxretina.core.errors import LoadError, WxRetinaError
from wxretina.core.factory import DEFAULT_FACTORY, ImageBundleFactory, PlainImageBundleFactory
from wxretina.ui.density import (
    DEFAULT_DETECTOR,
    DensityDetector,
    IntrospectionDensityDetector,
    WxDensityDetector,
    make_detector,
)
from wxretina.ui.icons import RetinaIcon
from wxretina.utils.locators import Locator, derive_retina_locator

__version__ = "0.1.0"

__all__ = [
    "is_retina",
    "create_icon",
    "ImageBundle",
    "ImageBundleFactory",
    "PlainImageBundleFactory",
    "DEFAULT_FACTORY",
    "DensityDetector",
    "WxDensityDetector",
    "IntrospectionDensityDetector",
    "DEFAULT_DETECTOR",
    "make_detector",
    "RetinaIcon",
    "LoadError",
    "WxRetinaError",
    "derive_retina_locator",
]


def is_retina(target=None, detector: DensityDetector = DEFAULT_DETECTOR) -> bool:
    """
    True if `target` is high-density. With no target, true if any attached
    display is. `target` may be a window, a wx.Display or a render context.
    """
    return detector.is_high_density(target)


def create_icon(
    locator: Locator,
    factory: ImageBundleFactory = DEFAULT_FACTORY,
    detector: DensityDetector = DEFAULT_DETECTOR,
) -> RetinaIcon:
    """
    Load the plain image at `locator` (and its @2x sibling, if any) and wrap
    it in a RetinaIcon. Raises LoadError if the plain image cannot be loaded.
    Pass your own factory for caching or alternate naming.
    """
    return RetinaIcon(factory.create(locator), detector)
