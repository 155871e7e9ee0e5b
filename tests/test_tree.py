from routenav.reader.scanner import scan_tokens
from routenav.tree import build_tree, iter_nodes, resolve_full_path
from routenav.types import RouteKind, RouteToken


def _tree(text):
    return build_tree(scan_tokens(text))


def test_top_level_constructs_are_roots():
    roots = _tree("route('a', './a.tsx'),\nroute('b', './b.tsx')")
    assert [r.token.segment for r in roots] == ["a", "b"]
    assert all(r.parent is None and not r.children for r in roots)


def test_children_attach_to_their_container():
    (root,) = _tree("prefix('dashboard', [index('./d/home.tsx'), route('settings', './d/settings.tsx')])")
    assert root.kind is RouteKind.PREFIX
    assert [c.kind for c in root.children] == [RouteKind.INDEX, RouteKind.ROUTE]
    assert all(c.parent is root for c in root.children)


def test_nearest_container_wins():
    text = "layout('./l.tsx', [prefix('p', [route('a', './a.tsx', [index('./i.tsx')])])])"
    (layout,) = _tree(text)
    (prefix,) = layout.children
    (route,) = prefix.children
    (index,) = route.children
    assert index.parent is route
    assert [n.kind for n in index.ancestors()] == [
        RouteKind.INDEX, RouteKind.ROUTE, RouteKind.PREFIX, RouteKind.LAYOUT,
    ]


def test_sibling_after_closed_container_is_a_root():
    roots = _tree("prefix('p', [route('a', './a.tsx')]),\nroute('b', './b.tsx')")
    assert [r.kind for r in roots] == [RouteKind.PREFIX, RouteKind.ROUTE]
    assert roots[0].children[0].token.segment == "a"


def test_sibling_containers_do_not_adopt_each_other():
    text = "prefix('x', [route('a', './a.tsx')]), prefix('y', [route('b', './b.tsx')])"
    x, y = _tree(text)
    assert [c.token.segment for c in x.children] == ["a"]
    assert [c.token.segment for c in y.children] == ["b"]


def test_builder_sorts_tokens_by_start():
    parent = RouteToken(RouteKind.PREFIX, "p", start=0, end=50, has_children=True, children_start=10)
    child = RouteToken(RouteKind.ROUTE, "a", start=12, end=20)
    (root,) = build_tree([child, parent])
    assert root.token is parent
    assert root.children[0].token is child


def test_token_outside_children_array_is_not_adopted():
    # starts before the children array opens
    parent = RouteToken(RouteKind.ROUTE, "p", start=0, end=50, has_children=True, children_start=30)
    inner = RouteToken(RouteKind.ROUTE, "q", start=10, end=20)
    roots = build_tree([parent, inner])
    assert len(roots) == 2


def test_iter_nodes_is_preorder():
    text = "prefix('a', [route('b', './b.tsx', [index('./c.tsx')]), route('d', './d.tsx')]), route('e', './e.tsx')"
    order = [n.token.segment or n.kind.value for n in iter_nodes(_tree(text))]
    assert order == ["a", "b", "index", "d", "e"]


def test_full_path_skips_layouts_and_empty_segments():
    text = "layout('./l.tsx', [prefix('p', [layout('./m.tsx', [index('./i.tsx')])])])"
    index = list(iter_nodes(_tree(text)))[-1]
    assert index.kind is RouteKind.INDEX
    assert resolve_full_path(index) == "/p"


def test_full_path_collapses_slashes():
    text = "prefix('/api/', [route('/v1//', './v1.tsx', [route('users', './u.tsx')])])"
    nodes = list(iter_nodes(_tree(text)))
    assert [resolve_full_path(n) for n in nodes] == ["/api/", "/api/v1/", "/api/v1/users"]


def test_full_path_of_bare_index_is_root():
    (index,) = _tree("index('./home.tsx')")
    assert resolve_full_path(index) == "/"
