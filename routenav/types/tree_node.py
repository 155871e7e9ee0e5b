from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from routenav.types.token import RouteKind, RouteToken


@dataclass(eq=False)
class TreeNode:
    token: RouteToken
    children: List[TreeNode] = field(default_factory=list)
    # Back-reference used only when walking up to compute the full path
    parent: Optional[TreeNode] = field(default=None, repr=False)

    @property
    def kind(self) -> RouteKind:
        return self.token.kind

    def ancestors(self) -> Iterator[TreeNode]:
        """Yield this node, then its parent, up to the root."""
        node: Optional[TreeNode] = self
        while node is not None:
            yield node
            node = node.parent

    def __repr__(self):
        return f"TreeNode({self.token.kind.value}, {self.token.segment!r}, children={len(self.children)})"
