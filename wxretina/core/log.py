################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the in-process trace log used by the icon toolkit and the viewer.

'''

################################################################################################

import inspect
import os
from datetime import datetime

################################################################################################

_STAMP = "%m/%d/%Y %H:%M:%S"

class LogManager():
    __log = None

    def __init__(self, verbosity: int = 0):
        if LogManager.__log is None:
            LogManager.__log = [(datetime.now().strftime(_STAMP), "Begin wxretina Log")]
        self.verbosity = verbosity

    def add(self, text: str):
        LogManager.__log.append((datetime.now().strftime(_STAMP), text))

    def debug(self, text: str, level: int = 0):
        if self.verbosity < level:
            return
        # Tag entries with the calling module's file name
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        filename = os.path.basename(caller.f_code.co_filename) if caller else "unknown"
        self.add(f"[{filename}] {text}")

    def get(self, index: int = None):
        if index is not None:
            return LogManager.__log[index]
        return LogManager.__log.copy()

    def count(self):
        return len(LogManager.__log)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        """Drop every entry, leaving a single marker line."""
        LogManager.__log.clear()
        LogManager.__log.append((datetime.now().strftime(_STAMP), "Log cleared"))

    def write_to_file(self, filepath: str):
        """Dump the log as text; failures are recorded in the log itself."""
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                for timestamp, message in LogManager.__log:
                    f.write(f"[{timestamp}] {message}\n")
            self.add(f"Log written to file: {filepath}")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")

################################################################################################

Log = LogManager()

################################################################################################
