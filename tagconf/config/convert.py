"""
Conversion between stored leaf text and typed values.
"""

from typing import Any, Callable, TypeVar

from ..const import FALSE_VALUES
from .errors import ConversionError

T = TypeVar("T")


def to_bool(value: str) -> bool:
    """
    Permissive boolean parsing.

    Only "false", "no" and "0" (any case) read as False. Every other string,
    including empty or nonsensical input, reads as True.
    """
    return value.lower() not in FALSE_VALUES


def convert(value: str, target: Callable[[str], T] | type[T]) -> T:
    """
    Convert a stored leaf value to ``target``.

    Args:
        value: Raw leaf text
        target: bool, str, int, float or any callable taking the text

    Returns:
        Converted value

    Raises:
        ConversionError: If the target rejects the text
    """
    if target is bool:
        return to_bool(value)  # type: ignore[return-value]
    if target is str:
        return value  # type: ignore[return-value]

    try:
        return target(value)  # type: ignore[call-arg]
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(value, target) from e


def to_text(value: Any) -> str:
    """String form stored in a leaf by set()."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
