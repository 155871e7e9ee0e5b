from __future__ import annotations

from typing import Iterable, List, Tuple

from routenav.reader.scanner import scan_tokens
from routenav.tree import build_tree, iter_nodes, resolve_full_path
from routenav.types.record import HighlightSpan, RouteRecord
from routenav.types.token import RouteKind
from routenav.types.tree_node import TreeNode


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def project_routes(text: str, roots: Iterable[TreeNode]) -> List[RouteRecord]:
    """Flatten the route forest into records, in pre-order.

    Prefix nodes only shape the paths of their subtree and get no record.
    """
    records: List[RouteRecord] = []
    for node in iter_nodes(roots):
        if node.kind is RouteKind.PREFIX:
            continue
        line, col = position_from_offset(text, node.token.start)
        records.append(
            RouteRecord(
                kind=node.kind,
                segment=node.token.segment,
                full_path=resolve_full_path(node),
                line=line,
                column=col,
                highlight=HighlightSpan(line, col, col + len(node.kind.value)),
            )
        )
    return records


def parse_routes(text: str) -> List[RouteRecord]:
    """Scan ``text`` and return every route, index and layout with its full path."""
    return project_routes(text, build_tree(scan_tokens(text)))
