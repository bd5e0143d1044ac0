"""
Path queries over the configuration tree.

A path is an ordered list of segments matched against node names, one tree
level per segment. Sibling nodes may share a name, so a single path can fan
out and match many nodes:

    [server] port = 80 [!server]
    [server] port = 8080 [!server]

    collect(root, ["server", "port"]) -> [Leaf(port=80), Leaf(port=8080)]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..const import PATH_SEPARATOR
from ..models import Node, NodeKind, Section


def split_path(*parts: str | Iterable[str]) -> list[str]:
    """
    Flatten dotted path strings into a single segment list.

    Examples:
        split_path("a.b", "c")        -> ["a", "b", "c"]
        split_path(["a", "b.c"], "d") -> ["a", "b", "c", "d"]
    """
    segments: list[str] = []
    for part in parts:
        if isinstance(part, str):
            segments.extend(part.split(PATH_SEPARATOR))
        else:
            segments.extend(split_path(*part))
    return segments


def format_path(segments: list[str]) -> str:
    """Join segments back into a dotted path for messages."""
    return PATH_SEPARATOR.join(segments)


def _matches(node: Node, segments: list[str], offset: int) -> Iterator[Node]:
    """Yield the nodes reached by segments[offset:], depth first."""
    if offset == len(segments):
        yield node
        return

    if not isinstance(node, Section):
        return

    for child in node.find(segments[offset]):
        yield from _matches(child, segments, offset + 1)


def collect(node: Node, segments: list[str], offset: int = 0) -> list[Node]:
    """
    Collect every node matching the path below ``node``.

    Args:
        node: Node to start from
        segments: Path segments
        offset: Index of the first segment still to match

    Returns:
        Matching nodes in segment order, then child order
    """
    return list(_matches(node, segments, offset))


def collect_sections(node: Node, segments: list[str], offset: int = 0) -> list[Node]:
    """
    Collect the children of every node matching the path below ``node``.

    Children of one match are emitted together, in insertion order.
    """
    result: list[Node] = []
    for match in _matches(node, segments, offset):
        if isinstance(match, Section):
            result.extend(match.children)
    return result


def merge_child_names(children: list[Node], kind: NodeKind) -> list[str]:
    """
    Names of ``kind`` children, merged across fan-out matches.

    ``children`` is the output of collect_sections: runs of nodes sharing a
    parent. A name is listed as often as it occurs under any single parent,
    so identical sibling sections report their layout once.

    Example:
        parents [choi, choi] and [choi, choi] -> ["choi", "choi"]
        parents [a] and [a, b]                -> ["a", "b"]
    """
    names: list[str] = []
    totals: dict[str, int] = {}
    counts: dict[str, int] = {}
    parent: Section | None = None

    for child in children:
        if child.parent is not parent:
            parent = child.parent
            counts = {}

        if child.kind is not kind:
            continue

        counts[child.name] = counts.get(child.name, 0) + 1
        if counts[child.name] > totals.get(child.name, 0):
            totals[child.name] = counts[child.name]
            names.append(child.name)

    return names
