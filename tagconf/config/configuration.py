"""
Configuration facade: file handling and typed path queries.

Usage:
    config = Configuration("/etc/app/app.conf")
    port = config.get("server", "port", as_type=int)
    hosts = config.get_all("cluster.node", "host")
    debug = config.try_get(False, "logging.debug")
    config.set(8080, "server.port")
    config.store()

Path arguments are dotted strings; several may be given and are joined in
order, so ``get("a.b", "c")`` and ``get("a", "b", "c")`` are the same query.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, TypeVar

from ..const import ROOT_NAME
from ..logging import get_logger
from ..models import Leaf, Node, NodeKind, Section
from .convert import convert, to_text
from .errors import ConfigError, PathNotFoundError
from .parser import parse_config
from .query import collect, collect_sections, format_path, merge_child_names, split_path
from .serializer import serialize

T = TypeVar("T")

logger = get_logger("config")


class Configuration:
    """
    A parsed configuration tree bound to a filename.

    Construction:
        Configuration()                    -> empty tree
        Configuration(filename)            -> loads the file
        Configuration(filename, content)   -> parses in-memory text
    """

    def __init__(self, filename: str | Path | None = None, content: str | None = None):
        self.filename = str(filename) if filename is not None else ""
        self.root = Section(ROOT_NAME)

        if content is not None:
            self.load_string(content, self.filename or None)
        elif filename is not None:
            self.load(filename)

    def __repr__(self) -> str:
        return f"Configuration({self.filename!r}, sections={len(self.root.children)})"

    # Loading and storing

    def load(self, path: str | Path) -> None:
        """
        (Re)populate the tree from a file.

        The previous tree is kept if the file cannot be read or parsed.

        Raises:
            ConfigError: If the file cannot be read
            ParseError: If the file content is malformed
        """
        path = Path(path)

        try:
            source = path.read_text()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration {path}: {e}") from e

        self.load_string(source, str(path))

    def load_string(self, content: str, filename: str | None = None) -> None:
        """(Re)populate the tree from text; ``filename`` is used for messages and store()."""
        root = parse_config(content, filename or "<string>")

        self.root = root
        self.filename = filename or ""
        logger.debug(f"Loaded {filename or '<string>'}: {sum(1 for _ in root.walk())} nodes")

    def serialize(self) -> str:
        """Return the tree as configuration text."""
        return serialize(self.root)

    def store(self, path: str | Path | None = None) -> None:
        """
        Write the serialized tree to ``path`` or to the file it was loaded from.

        Raises:
            ConfigError: If there is no target file or it cannot be written
        """
        target = str(path) if path is not None else self.filename
        if not target:
            raise ConfigError("No filename to store configuration to")

        try:
            Path(target).write_text(self.serialize())
        except OSError as e:
            raise ConfigError(f"Failed to write configuration {target}: {e}") from e

        logger.debug(f"Stored configuration to {target}")

    # Path queries

    def _leaves(self, path: tuple[Any, ...]) -> tuple[list[str], list[Leaf]]:
        segments = split_path(*path)
        nodes = collect(self.root, segments)
        return segments, [node for node in nodes if isinstance(node, Leaf)]

    def _not_found(self, segments: list[str]) -> PathNotFoundError:
        return PathNotFoundError(segments, self.filename or "<string>")

    def has(self, *path: str) -> bool:
        """Check whether any node matches the path."""
        return bool(collect(self.root, split_path(*path)))

    def get(self, *path: str, as_type: Callable[[str], T] = str) -> T:  # type: ignore[assignment]
        """
        Get the first leaf value matching the path.

        Raises:
            PathNotFoundError: If no leaf matches
            ConversionError: If the value cannot be converted
        """
        segments, leaves = self._leaves(path)
        if not leaves:
            raise self._not_found(segments)
        return convert(leaves[0].value, as_type)

    def get_all(self, *path: str, as_type: Callable[[str], T] = str) -> list[T]:  # type: ignore[assignment]
        """
        Get every leaf value matching the path, in tree order.

        Raises:
            PathNotFoundError: If no leaf matches
            ConversionError: If a value cannot be converted
        """
        segments, leaves = self._leaves(path)
        if not leaves:
            raise self._not_found(segments)
        return [convert(leaf.value, as_type) for leaf in leaves]

    def try_get(self, default: T, *path: str, as_type: Callable[[str], T] | None = None) -> T:
        """
        Like get(), returning ``default`` when no leaf matches.

        The target type defaults to the type of ``default``. Conversion
        errors are still raised.
        """
        _, leaves = self._leaves(path)
        if not leaves:
            return default
        return convert(leaves[0].value, as_type or _type_of(default))

    def try_get_all(
        self, default: T, *path: str, as_type: Callable[[str], T] | None = None
    ) -> list[T]:
        """Like get_all(), returning ``[default]`` when no leaf matches."""
        _, leaves = self._leaves(path)
        if not leaves:
            return [default]
        target = as_type or _type_of(default)
        return [convert(leaf.value, target) for leaf in leaves]

    def set(self, value: Any, *path: str) -> int:
        """
        Overwrite every leaf matching the path. Never creates nodes.

        Returns:
            Number of leaves updated
        """
        _, leaves = self._leaves(path)
        text = to_text(value)
        for leaf in leaves:
            leaf.value = text
        return len(leaves)

    def _child_names(self, path: tuple[Any, ...], kind: NodeKind, default: str | None) -> list[str]:
        segments = split_path(*path)
        children = collect_sections(self.root, segments)
        if not children:
            if default is None:
                raise self._not_found(segments)
            return [default]
        return merge_child_names(children, kind)

    def get_sections(self, *path: str) -> list[str]:
        """
        Names of the sections directly below the path.

        Raises:
            PathNotFoundError: If the path has no children
        """
        return self._child_names(path, NodeKind.SECTION, None)

    def get_names(self, *path: str) -> list[str]:
        """
        Names of the leaves directly below the path.

        Raises:
            PathNotFoundError: If the path has no children
        """
        return self._child_names(path, NodeKind.LEAF, None)

    def try_get_sections(self, default: str, *path: str) -> list[str]:
        return self._child_names(path, NodeKind.SECTION, default)

    def try_get_names(self, default: str, *path: str) -> list[str]:
        return self._child_names(path, NodeKind.LEAF, default)

    def line_of(self, *path: str) -> int:
        """
        Source line of the first node matching the path.

        Useful for pointing users at the offending entry when a value is
        out of range.
        """
        segments = split_path(*path)
        nodes = collect(self.root, segments)
        if not nodes:
            raise self._not_found(segments)
        return nodes[0].line

    def subconfig(self, *path: str) -> Configuration:
        """
        A configuration rooted at the first section matching the path.

        The nodes are shared: changes through either object are visible in both.
        """
        segments = split_path(*path)
        sections = [node for node in collect(self.root, segments) if isinstance(node, Section)]
        if not sections:
            raise self._not_found(segments)

        view = Configuration()
        view.root = sections[0]
        view.filename = f"{self.filename or '<string>'}-{format_path(segments)}"
        return view

    def nodes(self, *path: str) -> list[Node]:
        """Raw nodes matching the path."""
        return collect(self.root, split_path(*path))


def _type_of(default: Any) -> Callable[[str], Any]:
    return str if default is None else type(default)
