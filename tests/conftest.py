import pytest


ROUTES_TS = '''import { type RouteConfig, index, layout, prefix, route } from "@react-router/dev/routes";

export default [
  index("routes/home.tsx"),
  route("about", "routes/about.tsx"),

  layout("auth/layout.tsx", [
    route("login", "auth/login.tsx"),
    route("register", "auth/register.tsx"),
  ]),

  ...prefix("concerts", [
    index("concerts/home.tsx"),
    route(":city", "concerts/city.tsx"),
    route("trending", "concerts/trending.tsx"),
  ]),
] satisfies RouteConfig;
'''


@pytest.fixture
def routes_text():
    """A typical React Router v7 app/routes.ts."""
    return ROUTES_TS


@pytest.fixture
def project(tmp_path):
    """A small project tree: a marker file, an app folder and an excluded folder."""
    (tmp_path / "package.json").write_text("{}", encoding="utf-8")
    app = tmp_path / "app"
    (app / "routes").mkdir(parents=True)
    (app / "routes.ts").write_text(ROUTES_TS, encoding="utf-8")
    (app / "routes" / "home.tsx").write_text("export default function Home() {}\n", encoding="utf-8")
    (app / "routes" / "about.tsx").write_text("export default function About() {}\n", encoding="utf-8")
    vendored = tmp_path / "node_modules" / "pkg" / "routes"
    vendored.mkdir(parents=True)
    (vendored / "home.tsx").write_text("", encoding="utf-8")
    return tmp_path
