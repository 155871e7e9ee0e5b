"""
Route tree: nesting inference and full-path resolution.

The scanner has no notion of nesting; a token's parent is recovered from
offsets alone. A token belongs to the nearest preceding token whose children
array contains it:

    parent.children_start < token.start  and  token.end <= parent.end

Tokens arrive in document order, so we keep a stack of the containers seen so
far. A container whose closing paren comes before the current token's start
can never contain this or any later token and is popped; the first container
from the top of the stack that contains the token is its parent. Tokens with
no such container become roots, so the result is a forest.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

from routenav.types.token import RouteKind, RouteToken
from routenav.types.tree_node import TreeNode

_SLASHES = re.compile(r"/+")


def build_tree(tokens: Iterable[RouteToken]) -> List[TreeNode]:
    roots: List[TreeNode] = []
    containers: List[TreeNode] = []

    for token in sorted(tokens, key=lambda t: t.start):
        node = TreeNode(token)

        while containers and containers[-1].token.end < token.start:
            containers.pop()

        parent = next((c for c in reversed(containers) if c.token.contains(token)), None)
        if parent is None:
            roots.append(node)
        else:
            node.parent = parent
            parent.children.append(node)

        if token.has_children:
            containers.append(node)

    return roots


def iter_nodes(roots: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Depth-first, pre-order walk over a forest."""
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def resolve_full_path(node: TreeNode) -> str:
    """Join the segments from the root down to ``node`` into a URL path.

    Layouts never contribute a segment. Empty segments (index routes) are
    skipped, repeated slashes collapse, and the result always starts with '/'.
    """
    segments = [
        n.token.segment
        for n in node.ancestors()
        if n.kind is not RouteKind.LAYOUT and n.token.segment
    ]
    segments.reverse()
    joined = _SLASHES.sub("/", "/".join(segments))
    return "/" + joined.lstrip("/")
