#!/usr/bin/env python3
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

import sys
import argparse

from wxretina.ui.constants import DENSITY_KINDS, DEFAULT_DENSITY_KIND

def build_parser():
    parser = argparse.ArgumentParser(
        prog="wxretina",
        description="Show retina-aware icons and report display density",
    )
    parser.add_argument(
        "icons",
        nargs="*",
        help="Plain image paths or URLs; an <name>@2x<ext> sibling is picked up automatically"
    )
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--stdexp",
        action="store_true",
        help="Use standard exception handling to stdout / stderr."
    )
    parser.add_argument(
        "--density",
        choices=DENSITY_KINDS, default=DEFAULT_DENSITY_KIND,
        help="How display density is probed (wx=public scale factor, introspect=private attribute)"
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="Print the density of each attached display and exit."
    )
    return parser

def run(argv=None):
    args = build_parser().parse_args(argv)

    from wxretina.app import main
    return main(
        locators=args.icons,
        verbosity=args.verbosity,
        stdexp=args.stdexp,
        density=args.density,
        info=args.info,
    )

if __name__ == "__main__":
    sys.exit(run())
