"""
Configuration parsing, path queries and serialization.
"""

from .configuration import Configuration
from .convert import convert, to_bool, to_text
from .errors import ConfigError, ConversionError, ParseError, PathNotFoundError
from .parser import ConfigParser, parse_config, parse_config_file
from .query import collect, collect_sections, split_path
from .registry import ConfigRegistry
from .serializer import serialize

__all__ = [
    "Configuration",
    "ConfigParser",
    "ConfigRegistry",
    "ConfigError",
    "ParseError",
    "PathNotFoundError",
    "ConversionError",
    "parse_config",
    "parse_config_file",
    "serialize",
    "collect",
    "collect_sections",
    "split_path",
    "convert",
    "to_bool",
    "to_text",
]
