"""
Tests for ScaffoldEngine and the fixed template sets.
No filesystem side effects outside tmp_path.
"""
from __future__ import annotations

import logging

from react_starter.scaffold import ScaffoldEngine, entry, react_router, tailwind


# ─────────────────────────────────────────────────────────────────────────────
# ScaffoldEngine.write_files
# ─────────────────────────────────────────────────────────────────────────────

def test_write_files_returns_dict(tmp_path):
    """write_files() must return a dict mapping relative paths to file content strings."""
    result = ScaffoldEngine(tmp_path).write_files(react_router.FILES)
    assert result == react_router.FILES


def test_write_files_creates_directories(tmp_path):
    ScaffoldEngine(tmp_path).write_files(react_router.FILES)
    for sub in ("routes", "layouts", "pages"):
        assert (tmp_path / "src" / sub).is_dir()


def test_write_files_writes_content(tmp_path):
    result = ScaffoldEngine(tmp_path).write_files(react_router.FILES)
    for rel_path, content in result.items():
        assert (tmp_path / rel_path).read_text(encoding="utf-8") == content


def test_write_files_overwrites_existing_file(tmp_path):
    """App.jsx from the Vite skeleton must be replaced."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "App.jsx").write_text("// skeleton\n", encoding="utf-8")

    ScaffoldEngine(tmp_path).write_files(react_router.FILES)

    assert (tmp_path / "src" / "App.jsx").read_text(encoding="utf-8") == \
        react_router.FILES["src/App.jsx"]


# ─────────────────────────────────────────────────────────────────────────────
# ScaffoldEngine.replace_existing
# ─────────────────────────────────────────────────────────────────────────────

def test_replace_existing_overwrites_present_file(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "index.css").write_text(":root {}\n", encoding="utf-8")

    written, skipped = ScaffoldEngine(tmp_path).replace_existing(tailwind.FILES)

    assert list(written) == ["src/index.css"]
    assert skipped == []
    assert (tmp_path / "src" / "index.css").read_text(encoding="utf-8").startswith(
        '@import "tailwindcss";'
    )


def test_replace_existing_skips_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="react_starter.scaffold"):
        written, skipped = ScaffoldEngine(tmp_path).replace_existing(entry.FILES)

    assert written == {}
    assert skipped == ["src/main.jsx"]
    assert not (tmp_path / "src" / "main.jsx").exists()
    assert any("src/main.jsx" in r.getMessage() for r in caplog.records)


# ─────────────────────────────────────────────────────────────────────────────
# Template sets
# ─────────────────────────────────────────────────────────────────────────────

def test_router_template_file_set():
    assert set(react_router.FILES) == {
        "src/routes/AppRoutes.jsx",
        "src/layouts/MainLayout.jsx",
        "src/pages/Home.jsx",
        "src/pages/About.jsx",
        "src/pages/NotFound.jsx",
        "src/App.jsx",
    }


def test_routes_reference_every_page():
    routes = react_router.FILES["src/routes/AppRoutes.jsx"]
    for page in ("Home", "About", "NotFound"):
        assert f'import {page} from "../pages/{page}.jsx";' in routes
    assert '<Route path="*" element={<NotFound />} />' in routes


def test_layout_uses_js_template_literals():
    layout = react_router.FILES["src/layouts/MainLayout.jsx"]
    assert '`hover:text-teal-300 ${isActive ? "text-teal-400 font-semibold" : "text-slate-200"}`' in layout
    assert "<Outlet />" in layout


def test_entry_point_wraps_app_in_browser_router():
    main = entry.FILES["src/main.jsx"]
    assert 'import { BrowserRouter } from "react-router-dom";' in main
    assert "<BrowserRouter>\n      <App />\n    </BrowserRouter>" in main


def test_all_templates_end_with_newline():
    for files in (react_router.FILES, tailwind.FILES, entry.FILES):
        for rel_path, content in files.items():
            assert content.endswith("\n"), rel_path
