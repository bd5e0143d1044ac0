"""
Exception types raised while loading, querying and storing configuration.
"""

from __future__ import annotations

from typing import Any


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ParseError(ConfigError):
    """Exception raised when configuration text cannot be parsed."""

    def __init__(self, reason: str, filename: str, line: int, column: int):
        self.reason = reason
        self.filename = filename
        self.line = line
        self.column = column
        super().__init__(f"Parse error in {filename}, line {line} character {column}: {reason}")


class PathNotFoundError(ConfigError):
    """Exception raised when a query path matches no node."""

    def __init__(self, path: list[str], filename: str):
        self.path = list(path)
        self.filename = filename
        if self.path:
            message = f"Path '{'.'.join(self.path)}' not found in {filename}"
        else:
            message = f"Empty path not found in {filename}"
        super().__init__(message)


class ConversionError(ConfigError, ValueError):
    """Exception raised when a leaf value cannot be converted to the requested type."""

    def __init__(self, value: str, target: Any):
        self.value = value
        self.target = target
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Cannot convert {value!r} to {name}")
