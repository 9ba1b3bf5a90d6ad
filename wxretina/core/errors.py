'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

__all__ = ["WxRetinaError", "LoadError"]


class WxRetinaError(Exception):
    """Base class for errors raised by wxretina."""


class LoadError(WxRetinaError, OSError):
    """
    The plain image behind a locator could not be read or decoded.

    The underlying failure is chained as __cause__. A missing @2x variant
    never produces this error.
    """

    def __init__(self, locator, reason: str = "") -> None:
        self.locator = str(locator)
        msg = f"failed to load image: {self.locator}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
