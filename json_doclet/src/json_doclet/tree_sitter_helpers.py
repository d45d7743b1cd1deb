# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Iterator, Optional

from tree_sitter import Node

COMMENT_TYPES = ("block_comment", "line_comment", "comment")


def node_text(source_bytes: bytes, node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the original source.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node) -> tuple[int, int]:
    """Returns the (line, column) of a node's start in 0-based coordinates."""
    return (node.start_point[0], node.start_point[1])


def child_of_type(node: Node, *types: str) -> Optional[Node]:
    """First direct child whose type is one of `types`."""
    for child in node.children:
        if child.type in types:
            return child
    return None


def children_of_type(node: Node, *types: str) -> Iterator[Node]:
    for child in node.children:
        if child.type in types:
            yield child


def preceding_comment(source_bytes: bytes, node: Node) -> Optional[str]:
    """
    Raw text of the block comment right before `node`, skipping line comments.
    Doc comments are extras in the grammar, so they show up as siblings.
    """
    sibling = node.prev_sibling
    while sibling is not None and sibling.type in COMMENT_TYPES:
        text = node_text(source_bytes, sibling)
        if text.startswith("/*"):
            return text
        sibling = sibling.prev_sibling
    return None
