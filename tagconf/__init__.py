"""
Tagged-section configuration files with path queries.
"""

from .config import (
    ConfigError,
    ConfigParser,
    ConfigRegistry,
    Configuration,
    ConversionError,
    ParseError,
    PathNotFoundError,
)
from .const import APP_VERSION
from .models import Comment, Leaf, NodeKind, Section

__version__ = APP_VERSION

__all__ = [
    "Configuration",
    "ConfigParser",
    "ConfigRegistry",
    "ConfigError",
    "ParseError",
    "PathNotFoundError",
    "ConversionError",
    "Section",
    "Leaf",
    "Comment",
    "NodeKind",
    "__version__",
]
