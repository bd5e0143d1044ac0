"""
Serialization of a configuration tree back to text.

Output is canonical rather than a copy of the input: one element per line,
four spaces of indentation per nesting level and [!name] closing tags.
"""

from ..const import COMMENT_CHAR, INDENT_WIDTH, QUOTE_CHAR, TAG_OPENERS
from ..models import Leaf, Node, Section


def _needs_quotes(text: str) -> bool:
    return any(char in text for char in TAG_OPENERS) or text != text.strip()


def _quote_value(value: str) -> str:
    """Quote values that would not survive re-parsing as written."""
    if _needs_quotes(value):
        return f"{QUOTE_CHAR}{value}{QUOTE_CHAR}"
    return value


def _quote_key(key: str) -> str:
    """Keys additionally must not hold '=' or look like a comment."""
    if _needs_quotes(key) or "=" in key or key.startswith(COMMENT_CHAR):
        return f"{QUOTE_CHAR}{key}{QUOTE_CHAR}"
    return key


def _write(node: Node, level: int, lines: list[str]) -> None:
    indent = " " * (INDENT_WIDTH * level)

    if isinstance(node, Section):
        lines.append(f"{indent}[{node.name}]")
        for child in node.children:
            _write(child, level + 1, lines)
        lines.append(f"{indent}[!{node.name}]")
    elif isinstance(node, Leaf):
        lines.append(f"{indent}{_quote_key(node.name)} = {_quote_value(node.value)}".rstrip())
    else:
        lines.append(f"{indent}{COMMENT_CHAR} {node.name}".rstrip())


def serialize(root: Section) -> str:
    """
    Serialize the children of ``root``.

    The root section itself is implicit and not written.
    """
    lines: list[str] = []
    for child in root.children:
        _write(child, 0, lines)
    return "\n".join(lines) + "\n" if lines else ""
