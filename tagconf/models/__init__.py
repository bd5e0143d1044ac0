"""
Tree model for parsed configuration.
"""

from .node import Comment, Leaf, Node, NodeKind, Section

__all__ = [
    "Node",
    "NodeKind",
    "Section",
    "Leaf",
    "Comment",
]
