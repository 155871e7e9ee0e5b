"""Print the routes declared in a route-definition module.

    python -m routenav app/routes.ts
    python -m routenav app/routes.ts --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from routenav.routes import parse_routes


def _format_text(records) -> str:
    lines = []
    for r in records:
        # editors count lines and columns from 1
        lines.append(f"{r.line + 1}:{r.column + 1}\t{r.kind.value}\t{r.full_path}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="routenav", description=__doc__.splitlines()[0])
    parser.add_argument("file", help="routes file to read")
    parser.add_argument("--json", action="store_true", help="emit a JSON array instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="log dropped constructs")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"routenav: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    records = parse_routes(text)
    if args.json:
        print(json.dumps([r.to_dict() for r in records], indent=2))
    elif records:
        print(_format_text(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())
