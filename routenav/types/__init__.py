from routenav.types.token import RouteKind, RouteToken
from routenav.types.tree_node import TreeNode
from routenav.types.record import HighlightSpan, RouteRecord

__all__ = [
    "RouteKind",
    "RouteToken",
    "TreeNode",
    "HighlightSpan",
    "RouteRecord",
]
