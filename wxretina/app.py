# app.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import traceback
import wx

from wxretina.core.log import Log
from wxretina.ui.constants import MIN_WX_VERSION, DEFAULT_DENSITY_KIND
from wxretina.ui.density import make_detector, describe_screens

def on_exception(exc_type, exc_value, exc_traceback):
    """Record unhandled exceptions in the log and the status bar instead of dying silently."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    tb_text = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    error_message = f"!ERROR! Unhandled Exception:\n{tb_text}"
    Log.debug(error_message, 0)

    app = wx.GetApp()
    frame = app.GetTopWindow() if app else None
    if frame is not None and hasattr(frame, 'SetStatusText'):
        frame.SetStatusText(error_message.splitlines()[-1])
    else:
        print(error_message, file=sys.stderr)

def check_wx_version():
    if tuple(getattr(wx, 'VERSION', (0, 0, 0))[:3]) < MIN_WX_VERSION:
        need = ".".join(str(v) for v in MIN_WX_VERSION)
        raise RuntimeError(f"wxretina requires wxPython ≥ {need}; found {wx.__version__}")

def print_info(density: str = DEFAULT_DENSITY_KIND, out=None):
    """Print the density of every attached display. Needs a wx.App for wx.Display."""
    out = out or sys.stdout
    app = wx.App(False)
    detector = make_detector(density)
    lines = describe_screens(detector) or ["no displays found"]
    for line in lines:
        print(line, file=out)
    print(f"any high-density display: {'yes' if detector.is_high_density() else 'no'}", file=out)
    del app
    return 0

def main(locators=(), verbosity: int = 0, stdexp: bool = False,
         density: str = DEFAULT_DENSITY_KIND, info: bool = False):
    check_wx_version()
    Log.set_verbosity(verbosity)

    if info:
        return print_info(density)

    if not stdexp:
        sys.excepthook = on_exception

    from wxretina.ui.icon_panel import ViewerFrame

    app = wx.App(False)

    frame = ViewerFrame(list(locators), detector=make_detector(density))
    frame.Show()

    app.MainLoop()
    return 0
