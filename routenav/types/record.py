from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from routenav.types.token import RouteKind


@dataclass(frozen=True)
class HighlightSpan:
    line: int
    col_start: int
    col_end: int


@dataclass(frozen=True)
class RouteRecord:
    kind: RouteKind
    segment: str
    full_path: str
    line: int
    column: int
    highlight: HighlightSpan

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data
