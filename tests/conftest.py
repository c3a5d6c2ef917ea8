"""Shared test fixtures for create-q-base-web tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_q_base_web.config import ScaffoldSettings

VUE_PACKAGE_JSON = {
    "name": "q-base-web",
    "private": True,
    "version": "0.0.0",
    "scripts": {"dev": "vite"},
}


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A templates directory holding a small ``template-vue``."""
    root = tmp_path / "templates"
    vue = root / "template-vue"
    (vue / "src" / "router").mkdir(parents=True)
    (vue / "package.json").write_text(json.dumps(VUE_PACKAGE_JSON, indent=4), encoding="utf-8")
    (vue / "_gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    (vue / "_env").write_text("VITE_APP_BASE_API=/api\n", encoding="utf-8")
    (vue / "index.html").write_text("<div id=\"app\"></div>\n", encoding="utf-8")
    (vue / "src" / "main.js").write_text("import App from './App.vue'\n", encoding="utf-8")
    (vue / "src" / "router" / "routes.js").write_text("export default []\n", encoding="utf-8")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Working directory the scaffolder runs in."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    return cwd


@pytest.fixture
def settings(workdir: Path, templates_root: Path) -> ScaffoldSettings:
    return ScaffoldSettings(cwd=workdir, templates_root=templates_root)
