"""
Tests for sync — temp directory materialization.
"""

from pathlib import Path

import pytest

from tnfgen.core.models.config import Config
from tnfgen.core.services.sync import render_route_tree, sync, tmp_dir


class TestRenderRouteTree:
    def test_no_pages(self):
        text = render_route_tree([])
        assert "export const routeTree = rootRoute.addChildren([\n]);" in text

    def test_pages_imported(self):
        text = render_route_tree(["about", "user-list"])
        assert "import { Route as AboutRoute } from '../pages/about';" in text
        assert "import { Route as UserListRoute } from '../pages/user-list';" in text
        assert "  AboutRoute,\n  UserListRoute,\n" in text


class TestSync:
    def test_writes_files(self, project_dir: Path):
        written = sync(config=Config(), cwd=project_dir, tmp_path=tmp_dir(project_dir), mode="development")

        tmp = project_dir / "src" / ".tnf"
        assert written == [tmp / "routeTree.gen.ts", tmp / "client.tsx"]
        client = (tmp / "client.tsx").read_text()
        assert "import { routeTree } from './routeTree.gen';" in client
        assert "<React.StrictMode>" in client
        assert "tailwind.css" not in client

    def test_production_mode(self, project_dir: Path):
        sync(config=Config(), cwd=project_dir, tmp_path=tmp_dir(project_dir), mode="production")
        client = (tmp_dir(project_dir) / "client.tsx").read_text()
        assert "StrictMode" not in client
        assert "<RouterProvider router={router} />" in client

    def test_optional_style_imports(self, project_dir: Path):
        (project_dir / "src").mkdir()
        (project_dir / "src" / "global.less").write_text("")
        sync(
            config=Config(tailwindcss=True),
            cwd=project_dir,
            tmp_path=tmp_dir(project_dir),
            mode="development",
        )
        client = (tmp_dir(project_dir) / "client.tsx").read_text()
        assert "import '../global.less';" in client
        assert "import '../tailwind.css';" in client

    def test_route_tree_lists_pages(self, project_dir: Path):
        pages = project_dir / "src" / "pages"
        pages.mkdir(parents=True)
        (pages / "index.tsx").write_text("")
        (pages / "index.module.less").write_text("")

        sync(config=Config(), cwd=project_dir, tmp_path=tmp_dir(project_dir), mode="development")

        tree = (tmp_dir(project_dir) / "routeTree.gen.ts").read_text()
        assert "from '../pages/index';" in tree
        assert "module" not in tree

    def test_unknown_mode(self, project_dir: Path):
        with pytest.raises(ValueError, match="Unknown mode 'test'"):
            sync(config=Config(), cwd=project_dir, tmp_path=tmp_dir(project_dir), mode="test")
        assert not tmp_dir(project_dir).exists()
