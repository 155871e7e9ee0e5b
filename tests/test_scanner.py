import pytest
from hypothesis import given, strategies as st

from routenav.reader.scanner import scan_tokens
from routenav.types import RouteKind, RouteToken


def test_single_index():
    text = "index('./home.tsx')"
    assert scan_tokens(text) == [
        RouteToken(kind=RouteKind.INDEX, segment="", start=0, end=len(text) - 1)
    ]


def test_route_segment_and_span():
    text = "  route('about', './about.tsx')"
    (token,) = scan_tokens(text)
    assert token.kind is RouteKind.ROUTE
    assert token.segment == "about"
    assert token.start == 2
    assert token.end == len(text) - 1
    assert not token.has_children
    assert token.children_start is None


def test_tokens_come_out_in_document_order():
    text = "prefix('p', [route('a', './a.tsx'), index('./i.tsx'), layout('./l.tsx', [])])"
    tokens = scan_tokens(text)
    assert [t.kind for t in tokens] == [RouteKind.PREFIX, RouteKind.ROUTE, RouteKind.INDEX, RouteKind.LAYOUT]
    assert [t.start for t in tokens] == sorted(t.start for t in tokens)
    assert tokens[0].has_children
    assert tokens[0].children_start == text.index("[")
    assert tokens[3].has_children


def test_layout_has_no_segment():
    text = "layout('./layout.tsx', [route('x', './x.tsx')])"
    layout, route = scan_tokens(text)
    assert layout.kind is RouteKind.LAYOUT
    assert layout.segment == ""
    assert layout.children_start == text.index("[")
    assert route.segment == "x"


def test_route_with_children_but_no_file():
    text = "route('a', [index('./i.tsx')])"
    route, index = scan_tokens(text)
    assert route.has_children
    assert route.children_start == text.index("[")


def test_index_never_has_children():
    (token,) = scan_tokens("index('./i.tsx', [oops])")
    assert not token.has_children


@pytest.mark.parametrize(
    "text",
    [
        "prefixed('x', [])",
        "myroute('x', './x.tsx')",
        "reindex('./x.tsx')",
        "Route('x', './x.tsx')",
        "$route('x', './x.tsx')",
        "router.route('x', './x.tsx')",
        "const s = `route('x', './x.tsx')`",
    ]
)
def test_word_boundary_and_case(text):
    assert scan_tokens(text) == []


def test_spread_call_is_still_a_construct():
    prefix, route = scan_tokens("[...prefix('p', [route('a', './a.tsx')])]")
    assert prefix.kind is RouteKind.PREFIX
    assert prefix.start == len("[...")
    assert route.segment == "a"


def test_whitespace_before_paren():
    (token,) = scan_tokens("route ('a', './a.tsx')")
    assert token.segment == "a"
    assert token.start == 0


@pytest.mark.parametrize(
    "text",
    [
        "route(dynamicPath, './a.tsx')",   # path is not a literal
        "prefix(base, [])",
        "route('a', './a.tsx'",             # truncated call
        "route('a, './a.tsx')",             # unbalanced quoting
        "route()",
    ]
)
def test_malformed_calls_are_dropped(text):
    assert scan_tokens(text) == []


def test_malformed_call_does_not_hide_later_calls():
    text = "route(path, './a.tsx'),\nroute('b', './b.tsx')"
    (token,) = scan_tokens(text)
    assert token.segment == "b"


def test_comments_and_strings_are_ignored():
    text = (
        "// route('old', './old.tsx'),\n"
        "/* index('./gone.tsx') */\n"
        "const s = \"route('x', './x.tsx')\";\n"
        "route('new', './new.tsx')"
    )
    (token,) = scan_tokens(text)
    assert token.segment == "new"


def test_escaped_quotes_in_segment():
    (token,) = scan_tokens("route('it\\'s', \"./a.tsx\")")
    assert token.segment == "it's"


def test_paren_inside_string_does_not_corrupt_spans():
    text = "route('a(b', './f.tsx'), route('c', './c.tsx')"
    first, second = scan_tokens(text)
    assert text[first.end] == ")"
    assert first.end == text.index("'./f.tsx'") + len("'./f.tsx'")
    assert second.segment == "c"
    assert second.end == len(text) - 1


fragments = st.sampled_from([
    "route(", "index(", "layout(", "prefix(", "...", "'a'", "'./a.tsx'",
    "'", '"', "(", ")", "[", "]", ",", " ", "\n", "\\", "//", "/*", "*/", "`",
])


@given(st.lists(fragments, max_size=40).map("".join))
def test_scanner_tokens_are_well_formed(text):
    for token in scan_tokens(text):
        assert token.start < token.end
        assert text[token.end] == ")"
        if token.has_children:
            assert token.start < token.children_start < token.end
            assert text[token.children_start] == "["
