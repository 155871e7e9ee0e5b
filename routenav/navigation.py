"""
File navigation helpers used by the language server.

Route modules reference their page modules by relative path strings, e.g.
``route('about', './routes/about.tsx')``. To jump to such a file we:

- pick the quoted string under the cursor,
- keep it only if it ends with a known source extension,
- strip the leading ./ and ../ parts to get a search pattern,
- search the project the document belongs to (nearest ancestor holding a
  project marker, never above the workspace root), skipping excluded folders.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Sequence, Union

from routenav.config import RouteNavConfig
from routenav.errors import RouteNavSearchError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

ROUTES_FILE_SUFFIXES = ('routes.ts', 'routes.tsx', 'routes.js', 'routes.jsx')

# Matches empty strings too, so '' under the cursor is still recognised
QUOTED_RE = re.compile(r"(['\"])([^'\"]*)\1")
_LEADING_DOTS = re.compile(r"^[./]+")


@dataclass(frozen=True)
class PathAtPosition:
    start: int  # column of the opening quote
    end: int    # column just past the closing quote
    raw: str


def is_trigger_file(file_name: str, patterns: Iterable[str]) -> bool:
    lower = file_name.lower()
    return any(p.lower() in lower for p in patterns)


def is_routes_file(file_name: str) -> bool:
    return os.path.basename(file_name).lower().endswith(ROUTES_FILE_SUFFIXES)


def looks_like_path(raw: str, extensions: Iterable[str]) -> bool:
    return any(raw.endswith(ext) for ext in extensions)


def extract_path_at_position(line_text: str, character: int) -> Optional[PathAtPosition]:
    for m in QUOTED_RE.finditer(line_text):
        if m.start() <= character <= m.end():
            return PathAtPosition(start=m.start(), end=m.end(), raw=m.group(2))
        if m.start() > character:
            break
    return None


def search_pattern(raw: str) -> Optional[str]:
    """'./routes/home.tsx' -> 'routes/home.tsx'; None when too short to search for."""
    pattern = _LEADING_DOTS.sub('', raw)
    if len(pattern) < 2:
        return None
    return pattern


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def find_project_root(file_path: PathLike,
                      workspace_root: Optional[PathLike] = None,
                      markers: Sequence[str] = ('package.json', 'tsconfig.json', '.git')) -> Path:
    start = Path(file_path).absolute().parent
    ws = Path(workspace_root).absolute() if workspace_root is not None else None

    current = start
    while current != current.parent:
        # Don't go above the workspace root
        if ws is not None and not _is_within(current, ws):
            break
        for marker in markers:
            if (current / marker).exists():
                return current
        current = current.parent
    return start


def _walk_matches(root: Path, pattern: str, exclude: Sequence[str], limit: int) -> List[Path]:
    target = PurePosixPath(pattern).parts
    excluded = set(exclude)
    matches: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        rel_dir = Path(dirpath).relative_to(root).parts
        for name in sorted(filenames):
            parts = rel_dir + (name,)
            if len(parts) >= len(target) and parts[-len(target):] == target:
                matches.append(Path(dirpath) / name)
                if len(matches) >= limit:
                    return matches
    return matches


def search_files(pattern: str, root: PathLike, config: RouteNavConfig) -> List[Path]:
    """Files under ``root`` whose trailing path components equal ``pattern``.

    If nothing matches and the pattern carries no known extension, each
    configured extension is tried in turn with a smaller per-extension limit.
    """
    root = Path(root)
    if not root.is_dir():
        raise RouteNavSearchError(f"Search root is not a directory: {root}")

    files = _walk_matches(root, pattern, config.exclude_folders, config.max_search_results)
    logger.debug("search %r under %s: %d match(es)", pattern, root, len(files))

    if not files and not looks_like_path(pattern, config.file_extensions):
        per_ext = max(1, config.max_search_results // 2)
        for ext in config.file_extensions:
            files.extend(_walk_matches(root, pattern + ext, config.exclude_folders, per_ext))
    return files
