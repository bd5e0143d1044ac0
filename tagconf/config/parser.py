"""
Line scanner for tagged-section configuration syntax.

Builds a tree of sections, leaves and comments from text such as:

    [mqtt]
        host = localhost
        port = 1883
        # credentials live elsewhere
    [!mqtt]

Sections open with [name] or <name> and close with [!name] or [/name]
(angle brackets work the same way). Several tags and assignments may share
a line. Indentation is ignored.
"""

from pathlib import Path

from ..const import (
    CLOSE_MARKERS,
    COMMENT_CHAR,
    QUOTE_CHAR,
    ROOT_NAME,
    TAG_CLOSERS,
    TAG_OPENERS,
)
from ..models import Section
from .errors import ParseError


class ConfigParser:
    """
    Single-pass parser keeping a cursor on the innermost open section.

    Grammar (per line):
        line       := (WS | comment | tag | assignment)*
        comment    := '#' TEXT
        tag        := ('[' | '<') ['/' | '!'] NAME (']' | '>')
        assignment := KEY ['=' VALUE]      -- ends at an unquoted '[' or '<'
    """

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename

        self.root = Section(ROOT_NAME)
        self.current = self.root

        self.text = ""
        self.line = 0
        self.pos = 0

    def _error(self, reason: str, pos: int | None = None) -> ParseError:
        """Build a ParseError pointing at a 0-based position of the current line."""
        column = (self.pos if pos is None else pos) + 1
        return ParseError(reason, self.filename, self.line, column)

    def parse(self) -> Section:
        """Parse the entire source and return the root section."""
        for number, text in enumerate(_split_lines(self.source), start=1):
            self.line = number
            self.text = text
            self.pos = 0
            self._parse_line()

        if self.current is not self.root:
            raise ParseError(
                f"no closing tag found for section '{self.current.name}'",
                self.filename,
                self.line,
                len(self.text) + 1,
            )

        return self.root

    def _parse_line(self) -> None:
        while self.pos < len(self.text):
            char = self.text[self.pos]

            if char.isspace():
                self.pos += 1
            elif char == COMMENT_CHAR:
                self._parse_comment()
            elif char in TAG_OPENERS:
                self._parse_tag()
            else:
                self._parse_assignment()

    def _parse_comment(self) -> None:
        """The rest of the line becomes a comment."""
        text = self.text[self.pos + 1 :].strip()
        self.current.create_comment(text, line=self.line)
        self.pos = len(self.text)

    def _parse_tag(self) -> None:
        start = self.pos

        end = -1
        for closer in TAG_CLOSERS:
            end = self.text.find(closer, start + 1)
            if end != -1:
                break

        if end == -1:
            raise self._error("malformed tag!", start)

        name = self.text[start + 1 : end]
        if not name:
            raise self._error("malformed tag, tag name empty!", start)

        if name[0] in CLOSE_MARKERS:
            self._close_section(name[1:], start)
        else:
            self.current = self.current.create_section(name, line=self.line)

        self.pos = end + 1

    def _close_section(self, name: str, start: int) -> None:
        parent = self.current.parent
        if parent is None:
            raise self._error("no opening tag found!", start)

        if name != self.current.name:
            raise self._error(
                f"closing tag '{name}' does not match opening tag '{self.current.name}'!",
                start,
            )

        self.current = parent

    def _parse_assignment(self) -> None:
        """
        Read 'key = value' up to an unquoted tag opener or the end of the line.

        Quote characters are dropped; text inside quotes is kept as written,
        including '=' and surrounding whitespace.
        """
        chars: list[tuple[str, bool]] = []
        in_string = False

        while self.pos < len(self.text):
            char = self.text[self.pos]
            if not in_string and char in TAG_OPENERS:
                break

            self.pos += 1

            if char == QUOTE_CHAR:
                in_string = not in_string
                continue

            chars.append((char, in_string))

        if all(char.isspace() and not quoted for char, quoted in chars):
            return

        for index, (char, quoted) in enumerate(chars):
            if char == "=" and not quoted:
                key, value = chars[:index], chars[index + 1 :]
                break
        else:
            key, value = chars, []

        self.current.create_leaf(_trim(key), _trim(value), line=self.line)


def _split_lines(source: str) -> list[str]:
    """Split on line feeds only; other control characters stay in the line."""
    lines = source.replace("\r\n", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _trim(chars: list[tuple[str, bool]]) -> str:
    """Join captured characters, stripping unquoted whitespace at both ends."""
    start, end = 0, len(chars)
    while start < end and chars[start][0].isspace() and not chars[start][1]:
        start += 1
    while end > start and chars[end - 1][0].isspace() and not chars[end - 1][1]:
        end -= 1
    return "".join(char for char, _ in chars[start:end])


def parse_config(source: str, filename: str = "<string>") -> Section:
    """
    Convenience function to parse a configuration string.

    Args:
        source: Configuration text
        filename: Filename for error messages

    Returns:
        Root section of the parsed tree
    """
    return ConfigParser(source, filename).parse()


def parse_config_file(path: str | Path) -> Section:
    """
    Parse a configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        Root section of the parsed tree
    """
    path = Path(path)
    source = path.read_text()
    return parse_config(source, str(path))
