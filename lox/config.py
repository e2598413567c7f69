"""
Configuration constants for the Lox scanner and its command line.
"""

import os

# Log level: DEBUG, INFO, WARNING, ERROR
LOG_LEVEL = os.environ.get("LOX_LOG_LEVEL", "WARNING").upper()

# Name reported for sources that don't come from a file
DEFAULT_FILENAME = "<string>"
REPL_FILENAME = "<stdin>"

SOURCE_ENCODING = "utf-8"

REPL_PROMPT = "> "

# Exit codes (sysexits.h)
EXIT_OK = 0
EXIT_DATAERR = 65
