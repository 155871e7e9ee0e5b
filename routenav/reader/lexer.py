"""
  Lexing primitives for route-definition modules

We never tokenize the whole JavaScript grammar. The scanner only needs to:

    - match the closing ')' of a call, without being fooled by parens in strings
    - read a quoted string argument ('...' or "..."), decoding backslash escapes
    - find the children array ('[' given as a positional argument) of a call

Every primitive is total: on truncated or malformed input it reports
"not found" (-1 or None) and never raises.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

QUOTES = ("'", '"')
# Delimiters skipped whole while matching spans; template literals included
STRING_DELIMITERS = QUOTES + ("`",)
SPREAD = "..."

NOT_FOUND = -1


class StringArg(NamedTuple):
    value: str
    end: int  # offset just past the closing quote


def skip_string(text: str, start: int) -> int:
    """Return the offset just past the string literal opening at ``start``, or -1."""
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return NOT_FOUND


def skip_comment(text: str, start: int) -> int:
    """If a // or /* */ comment starts at ``start`` return the offset past it.

    Returns ``start`` unchanged when there is no comment there.
    """
    if text.startswith("//", start):
        nl = text.find("\n", start)
        return len(text) if nl == -1 else nl
    if text.startswith("/*", start):
        close = text.find("*/", start + 2)
        return len(text) if close == -1 else close + 2
    return start


def skip_trivia(text: str, start: int, stop: Optional[int] = None) -> int:
    # whitespace and comments
    stop = len(text) if stop is None else min(stop, len(text))
    i = start
    while i < stop:
        if text[i].isspace():
            i += 1
            continue
        after = skip_comment(text, i)
        if after == i:
            break
        i = after
    return i


def _find_closing(text: str, open_index: int, opener: str, closer: str) -> int:
    depth = 1
    i = open_index + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i
        elif ch in STRING_DELIMITERS:
            i = skip_string(text, i)
            if i == NOT_FOUND:
                return NOT_FOUND
            continue
        elif ch == "/":
            after = skip_comment(text, i)
            if after != i:
                i = after
                continue
        i += 1
    return NOT_FOUND


def find_matching_paren(text: str, open_index: int) -> int:
    """Index of the ')' closing the '(' at ``open_index``, or -1.

    Quoted runs are consumed whole so a '(' or ')' inside a string literal
    does not disturb the depth count.
    """
    return _find_closing(text, open_index, "(", ")")


def find_matching_bracket(text: str, open_index: int) -> int:
    return _find_closing(text, open_index, "[", "]")


def extract_string_arg(text: str, start: int) -> Optional[StringArg]:
    """Read the quoted argument following ``start``.

    Leading whitespace, comments and comma separators are skipped. Returns
    None when the next character does not open a string, or when the string
    is never closed.
    """
    n = len(text)
    i = start
    while i < n:
        i = skip_trivia(text, i)
        if i < n and text[i] == ",":
            i += 1
            continue
        break
    if i >= n or text[i] not in QUOTES:
        return None

    quote = text[i]
    i += 1
    chunks: list[str] = []
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n:
            chunks.append(text[i + 1])
            i += 2
            continue
        if ch == quote:
            return StringArg("".join(chunks), i + 1)
        chunks.append(ch)
        i += 1
    return None


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$."


def _skip_spread_target(text: str, start: int, stop: int) -> int:
    # ...name, ...name(args), ...obj.prop, ...[a, b]
    i = skip_trivia(text, start, stop)
    while i < stop and _is_ident_char(text[i]):
        i += 1
    i = skip_trivia(text, i, stop)
    if i < stop and text[i] in "([":
        close = find_matching_paren(text, i) if text[i] == "(" else find_matching_bracket(text, i)
        if close == NOT_FOUND:
            return stop
        return close + 1
    return i


def find_children_array(text: str, start: int, stop: int) -> int:
    """Offset of the children array '[' within ``[start, stop)``, or -1.

    Only a '[' given as a positional argument qualifies: the last significant
    character before it must be a comma. A spread (``...target``) is skipped
    together with its target, and quoted strings and nested groups are
    skipped whole, so brackets inside them are never taken for the array.
    """
    stop = min(stop, len(text))
    i = start
    after_comma = False
    while i < stop:
        i = skip_trivia(text, i, stop)
        if i >= stop:
            break
        ch = text[i]
        if ch == ",":
            after_comma = True
            i += 1
            continue
        if ch == "[" and after_comma:
            return i
        after_comma = False

        if text.startswith(SPREAD, i):
            i = _skip_spread_target(text, i + len(SPREAD), stop)
        elif ch in STRING_DELIMITERS:
            i = skip_string(text, i)
            if i == NOT_FOUND:
                return NOT_FOUND
        elif ch in "([":
            close = find_matching_paren(text, i) if ch == "(" else find_matching_bracket(text, i)
            if close == NOT_FOUND or close >= stop:
                return NOT_FOUND
            i = close + 1
        else:
            i += 1
    return NOT_FOUND
