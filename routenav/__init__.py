# Route-definition reader for React Router style route modules.
#
# The core is pure text processing: no AST, no evaluation. Given the text of a
# routes file it returns the route/index/layout constructs it declares, each
# with its fully resolved URL path and source position.
#
# Entry points:
# - parse_routes(text):  text -> list[RouteRecord]
# - scan_tokens(text):   text -> flat, document-ordered list[RouteToken]
# - build_tree(tokens):  tokens -> forest of TreeNode

from routenav.types import HighlightSpan, RouteKind, RouteRecord, RouteToken, TreeNode
from routenav.reader.scanner import scan_tokens
from routenav.tree import build_tree, iter_nodes, resolve_full_path
from routenav.routes import parse_routes, project_routes

__version__ = "0.3.0"

__all__ = [
    "HighlightSpan",
    "RouteKind",
    "RouteRecord",
    "RouteToken",
    "TreeNode",
    "scan_tokens",
    "build_tree",
    "iter_nodes",
    "resolve_full_path",
    "parse_routes",
    "project_routes",
]
