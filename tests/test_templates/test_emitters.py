"""Tests for the directory/template emitters."""

import pytest

from vitekit.config import RunConfig
from vitekit.templates import Template, emit_templates, ensure_dirs
from vitekit.templates.layouts import create_layouts, create_navbar
from vitekit.templates.pages import (
    create_not_found_page,
    create_pages_and_routing,
    write_app_file,
)
from vitekit.templates.readme import generate_readme
from vitekit.templates.structure import (
    FOLDER_READMES,
    create_constants_and_utils,
    create_folder_readmes,
    create_routes_folder,
)
from vitekit.templates.styles import create_styles_folder

ALL_EMITTERS = [
    create_folder_readmes,
    create_routes_folder,
    create_constants_and_utils,
    create_styles_folder,
    create_navbar,
    create_layouts,
    create_not_found_page,
    create_pages_and_routing,
    write_app_file,
    generate_readme,
]


def _component_files(project):
    """Every file that holds JSX."""
    return [
        p for p in (project / "src").rglob("*")
        if p.is_file() and p.suffix in (".jsx", ".tsx")
    ]


def _run_all(project, config):
    for emitter in ALL_EMITTERS:
        emitter(project, config)


class TestEmitTemplates:
    """Tests for the shared emit helpers."""

    def test_writes_nested_paths(self, tmp_path):
        written = emit_templates(tmp_path, [Template("a/b/c.txt", "hello")])
        assert written == [tmp_path / "a/b/c.txt"]
        assert (tmp_path / "a/b/c.txt").read_text() == "hello"

    def test_overwrites_existing_content(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("old content that is much longer than the new one")
        emit_templates(tmp_path, [Template("file.txt", "new")])
        assert target.read_text() == "new"

    def test_ensure_dirs_idempotent(self, tmp_path):
        ensure_dirs(tmp_path, "x/y")
        ensure_dirs(tmp_path, "x/y")
        assert (tmp_path / "x" / "y").is_dir()


class TestExtensions:
    """Component extension follows the language flag everywhere."""

    def test_javascript_uses_jsx(self, tmp_path):
        _run_all(tmp_path, RunConfig(project_name="demo"))
        files = _component_files(tmp_path)
        assert files
        assert all(p.suffix == ".jsx" for p in files)

    def test_typescript_uses_tsx(self, tmp_path):
        _run_all(tmp_path, RunConfig(project_name="shop", typescript=True))
        files = _component_files(tmp_path)
        assert files
        assert all(p.suffix == ".tsx" for p in files)

    def test_route_constants_extension(self, tmp_path):
        create_constants_and_utils(tmp_path, RunConfig(project_name="shop", typescript=True))
        assert (tmp_path / "src/constants/routes.ts").exists()
        assert not (tmp_path / "src/constants/routes.js").exists()


class TestIdempotence:
    """Running an emitter twice neither fails nor duplicates folders."""

    @pytest.mark.parametrize("emitter", ALL_EMITTERS, ids=lambda e: e.__name__)
    def test_twice_in_a_row(self, tmp_path, js_config, emitter):
        emitter(tmp_path, js_config)
        before = sorted(p.relative_to(tmp_path) for p in tmp_path.rglob("*"))
        emitter(tmp_path, js_config)
        after = sorted(p.relative_to(tmp_path) for p in tmp_path.rglob("*"))
        assert before == after

    def test_rerun_replaces_content(self, tmp_path, js_config):
        home = tmp_path / "src/pages/home/Home.jsx"
        create_pages_and_routing(tmp_path, js_config)
        home.write_text("// edited by hand\n")
        create_pages_and_routing(tmp_path, js_config)
        assert "edited by hand" not in home.read_text()
        assert 'Commencez "demo"' in home.read_text()


class TestStructure:
    """Tests for folder READMEs and constants."""

    def test_folder_readmes(self, tmp_path, js_config):
        create_folder_readmes(tmp_path, js_config)
        for folder in FOLDER_READMES:
            assert (tmp_path / "src" / folder / "README.md").exists()
        assert (tmp_path / "src/components/README.md").read_text().startswith("# 🧩 Components")

    def test_routes_readme(self, tmp_path, js_config):
        create_routes_folder(tmp_path, js_config)
        assert (tmp_path / "src/routes/README.md").exists()

    def test_route_constants(self, tmp_path, js_config):
        create_constants_and_utils(tmp_path, js_config)
        routes = (tmp_path / "src/constants/routes.js").read_text()
        assert "export const ROUTES" in routes
        assert "HOME: '/'" in routes
        assert "NOT_FOUND: '*'" in routes
        assert "ADMIN: '/admin'" in routes
        assert (tmp_path / "src/utils/README.md").exists()

    def test_route_constants_without_auth_guard(self, tmp_path):
        create_constants_and_utils(tmp_path, RunConfig(project_name="demo", auth_guard=False))
        assert "ADMIN" not in (tmp_path / "src/constants/routes.js").read_text()

    def test_route_constants_typescript(self, tmp_path, ts_config):
        create_constants_and_utils(tmp_path, ts_config)
        assert "} as const" in (tmp_path / "src/constants/routes.ts").read_text()


class TestStyles:
    """Tests for the SCSS architecture."""

    def test_partials(self, tmp_path, js_config):
        create_styles_folder(tmp_path, js_config)
        styles = tmp_path / "src/styles"
        for rel in [
            "base/_reset.scss",
            "variables/_colors.scss",
            "variables/_theme.scss",
            "mixins/_media.scss",
            "global.scss",
        ]:
            assert (styles / rel).is_file()

    def test_global_uses_partials(self, tmp_path, js_config):
        create_styles_folder(tmp_path, js_config)
        content = (tmp_path / "src/styles/global.scss").read_text()
        assert '@use "./variables/colors";' in content
        assert '@use "./mixins/media";' in content
        assert '@use "./base/reset";' in content


class TestLayouts:
    """Tests for layouts and navbar."""

    def test_default_layout_imports_navbar(self, tmp_path, js_config):
        create_layouts(tmp_path, js_config)
        layout = (tmp_path / "src/layouts/DefaultLayout.jsx").read_text()
        assert 'from "../components/Navbar/Navbar"' in layout
        assert "<Outlet />" in layout

    def test_admin_layout_follows_auth_guard(self, tmp_path):
        create_layouts(tmp_path, RunConfig(project_name="demo", auth_guard=False))
        assert not (tmp_path / "src/layouts/AdminLayout.jsx").exists()
        create_layouts(tmp_path, RunConfig(project_name="demo"))
        assert (tmp_path / "src/layouts/AdminLayout.jsx").exists()

    def test_navbar(self, tmp_path, ts_config):
        create_navbar(tmp_path, ts_config)
        navbar = (tmp_path / "src/components/Navbar/Navbar.tsx").read_text()
        assert 'import styles from "./navbar.module.scss"' in navbar
        assert (tmp_path / "src/components/Navbar/navbar.module.scss").exists()


class TestPagesAndRouting:
    """Tests for pages, routes and App."""

    def test_home_interpolates_project_name(self, tmp_path, ts_config):
        create_pages_and_routing(tmp_path, ts_config)
        home = (tmp_path / "src/pages/home/Home.tsx").read_text()
        assert 'Commencez "shop"' in home
        assert (tmp_path / "src/pages/home/home.module.scss").exists()

    def test_route_index_imports(self, tmp_path, js_config):
        create_pages_and_routing(tmp_path, js_config)
        index = (tmp_path / "src/routes/index.jsx").read_text()
        for path in [
            "../constants/routes",
            "../layouts/DefaultLayout",
            "../pages/home/Home",
            "../pages/notfound/NotFound",
        ]:
            assert f"'{path}'" in index
        assert "ROUTES.HOME" in index
        assert "ROUTES.NOT_FOUND" in index
        assert "export default AppRoutes" in index

    def test_auth_guard_files(self, tmp_path, js_config):
        create_pages_and_routing(tmp_path, js_config)
        index = (tmp_path / "src/routes/index.jsx").read_text()
        assert "import RequireAuth from './RequireAuth'" in index
        assert "ROUTES.ADMIN" in index
        assert (tmp_path / "src/routes/RequireAuth.jsx").exists()

    def test_without_auth_guard(self, tmp_path):
        create_pages_and_routing(tmp_path, RunConfig(project_name="demo", auth_guard=False))
        index = (tmp_path / "src/routes/index.jsx").read_text()
        assert "RequireAuth" not in index
        assert "AdminLayout" not in index
        assert not (tmp_path / "src/routes/RequireAuth.jsx").exists()

    def test_require_auth_typescript_props(self, tmp_path, ts_config):
        create_pages_and_routing(tmp_path, ts_config)
        guard = (tmp_path / "src/routes/RequireAuth.tsx").read_text()
        assert "RequireAuthProps" in guard

    def test_not_found_page(self, tmp_path, js_config):
        create_not_found_page(tmp_path, js_config)
        page = (tmp_path / "src/pages/notfound/NotFound.jsx").read_text()
        assert "404" in page
        assert (tmp_path / "src/pages/notfound/notfound.module.scss").exists()

    def test_app_imports_routes(self, tmp_path, js_config):
        write_app_file(tmp_path, js_config)
        app = (tmp_path / "src/App.jsx").read_text()
        assert 'import AppRoutes from "./routes"' in app


class TestReadme:
    """Tests for README generation."""

    def test_javascript_readme(self, tmp_path, js_config):
        generate_readme(tmp_path, js_config)
        readme = (tmp_path / "README.md").read_text()
        assert readme.startswith("# 🚀 demo")
        assert "TypeScript" not in readme
        assert (tmp_path / "README-advanced.md").read_text().startswith("# 🚀 demo (Avancé)")

    def test_typescript_label(self, tmp_path, ts_config):
        generate_readme(tmp_path, ts_config)
        assert "- React + TypeScript" in (tmp_path / "README.md").read_text()

    def test_tailwind_label(self, tmp_path):
        generate_readme(tmp_path, RunConfig(project_name="demo", tailwind=True))
        assert "Tailwind CSS" in (tmp_path / "README.md").read_text()
