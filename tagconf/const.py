"""
Application constants and format metadata.
"""

# Application info
APP_NAME = "tagconf"
APP_VERSION = "0.1.0"

# Text format
ROOT_NAME = "root"
INDENT_WIDTH = 4
TAG_OPENERS = "[<"
TAG_CLOSERS = "]>"
CLOSE_MARKERS = "/!"
COMMENT_CHAR = "#"
QUOTE_CHAR = '"'
PATH_SEPARATOR = "."

# Boolean values that read as False; everything else reads as True
FALSE_VALUES = frozenset({"false", "no", "0"})

# Registry defaults
CONFIG_SUFFIX = ".conf"
CONFIG_ROOT_ENV = "TAGCONF_CONFIG_ROOT"
DEFAULT_CONFIG_ROOT = "/etc/tagconf"
