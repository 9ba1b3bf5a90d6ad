'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Naming convention for the double-density variant: icon.png -> icon@2x.png
RETINA_SUFFIX = "@2x"
RETINA_SCALE = 2

# Private attribute read by the introspection density probe
SCALE_ATTRIBUTE = "scale"

# Density detector kinds accepted by make_detector() and the CLI
DENSITY_KINDS = ("wx", "introspect")
DEFAULT_DENSITY_KIND = "wx"

# Viewer layout
PADDING = 8
DEFAULT_BG_COLOR = wx.Colour(240, 240, 255)
MIN_WX_VERSION = (4, 2, 0)
