from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RouteKind(str, Enum):
    ROUTE = "route"
    INDEX = "index"
    LAYOUT = "layout"
    PREFIX = "prefix"

    @property
    def has_path(self) -> bool:
        # route('segment', ...) and prefix('segment', [...]) lead with a path
        return self in (RouteKind.ROUTE, RouteKind.PREFIX)

    @property
    def has_file(self) -> bool:
        return self is not RouteKind.PREFIX

    @property
    def may_have_children(self) -> bool:
        return self is not RouteKind.INDEX

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class RouteToken:
    """One route construct as found by the scanner.

    ``start`` is the offset of the keyword, ``end`` the offset of the matching
    closing parenthesis (inclusive). ``children_start`` is the offset of the
    ``[`` opening the children array when ``has_children`` is set.
    """
    kind: RouteKind
    segment: str
    start: int
    end: int
    has_children: bool = False
    children_start: Optional[int] = None

    def contains(self, other: RouteToken) -> bool:
        """True if ``other`` lies inside this token's children array."""
        if not self.has_children or self.children_start is None:
            return False
        return other.start > self.children_start and other.end <= self.end
