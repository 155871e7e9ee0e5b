"""
  Route token scanner

One left-to-right pass over the document with a small token regex, in the
spirit of a lexer: string literals and comments are matched as whole tokens
(and ignored), and every ``route(``, ``index(``, ``layout(`` or ``prefix(``
call head is expanded into a RouteToken using the lexing primitives.

Because the pass is interleaved, tokens come out in ascending start offset,
which is the order the tree builder expects. Calls nested inside an outer
call's arguments are still found: the regex resumes right after each '('.

Malformed occurrences (no matching ')', missing path argument) are dropped.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional

from routenav.reader.lexer import (
    NOT_FOUND,
    extract_string_arg,
    find_children_array,
    find_matching_paren,
)
from routenav.types.token import RouteKind, RouteToken

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<line_comment>//[^\n]*)"
    r"|(?P<block_comment>/\*.*?(?:\*/|\Z))"
    # JS strings cannot span lines; an unterminated one ends at the newline
    r"|(?P<string>'(?:\\.|[^'\\\n])*'?|\"(?:\\.|[^\"\\\n])*\"?|`(?:\\.|[^`\\])*`?)"
    # not part of a longer identifier ($route) or a member access (obj.route);
    # a spread (...prefix) still counts
    r"|(?<![\w$])(?:(?<=\.\.\.)|(?<!\.))(?P<call>route|index|layout|prefix)\s*\(",
    re.DOTALL,
)


def _iter_call_heads(text: str) -> Iterator[tuple[RouteKind, int, int]]:
    """Yield (kind, keyword offset, '(' offset) for each call head outside strings/comments."""
    for m in TOKEN_RE.finditer(text):
        name = m.group("call")
        if name is None:
            continue
        yield RouteKind(name), m.start("call"), m.end() - 1


def read_call(text: str, kind: RouteKind, start: int, open_paren: int) -> Optional[RouteToken]:
    """Expand the call head at ``start`` into a RouteToken, or None if malformed."""
    close = find_matching_paren(text, open_paren)
    if close == NOT_FOUND:
        return None

    segment = ""
    cursor = open_paren + 1
    if kind.has_path:
        arg = extract_string_arg(text, cursor)
        if arg is None or arg.end > close:
            return None
        segment = arg.value
        cursor = arg.end

    if kind.has_file:
        # The file module only advances the cursor; navigation reads it from the text
        arg = extract_string_arg(text, cursor)
        if arg is not None and arg.end <= close:
            cursor = arg.end

    children_start = NOT_FOUND
    if kind.may_have_children:
        children_start = find_children_array(text, cursor, close)

    has_children = children_start != NOT_FOUND
    return RouteToken(
        kind=kind,
        segment=segment,
        start=start,
        end=close,
        has_children=has_children,
        children_start=children_start if has_children else None,
    )


def scan_tokens(text: str) -> List[RouteToken]:
    tokens: List[RouteToken] = []
    for kind, start, open_paren in _iter_call_heads(text):
        token = read_call(text, kind, start, open_paren)
        if token is None:
            logger.debug("Dropping malformed %s() call at offset %d", kind.value, start)
            continue
        tokens.append(token)
    return tokens
