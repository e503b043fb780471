"""Shared test fixtures for vitekit.

Provides:
- make_vite_project: write the files `npm create vite` would produce
- vite_project: a fake JavaScript Vite project in a temp directory
- js_config / ts_config: RunConfig values for both languages
- fake_npm: pytest-subprocess fixture pre-configured for a full run
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from vitekit.config import RunConfig

MAIN_ENTRY = """import { StrictMode } from 'react'
import { createRoot } from 'react-dom/client'
import './index.css'
import App from './App'

createRoot(document.getElementById('root')).render(
  <StrictMode>
    <App />
  </StrictMode>,
)
"""

VITE_CONFIG = """import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'

// https://vite.dev/config/
export default defineConfig({
  plugins: [react()],
})
"""

LINT_INSTALL = [
    "npm", "install", "-D",
    "eslint", "prettier", "eslint-config-prettier", "eslint-plugin-react",
]


def write_vite_project(project_dir: Path, typescript: bool = False) -> Path:
    """Write a minimal copy of the Vite react/react-ts template."""
    ext = "tsx" if typescript else "jsx"
    script_ext = "ts" if typescript else "js"

    (project_dir / "src" / "assets").mkdir(parents=True, exist_ok=True)
    (project_dir / "public").mkdir(parents=True, exist_ok=True)

    (project_dir / "package.json").write_text(json.dumps({
        "name": project_dir.name,
        "private": True,
        "type": "module",
        "scripts": {"dev": "vite", "build": "vite build"},
        "dependencies": {"react": "^19.0.0", "react-dom": "^19.0.0"},
    }, indent=2))
    (project_dir / "src" / f"main.{ext}").write_text(MAIN_ENTRY)
    (project_dir / "src" / f"App.{ext}").write_text("export default function App() { return null }\n")
    (project_dir / "src" / "App.css").write_text("#root {}\n")
    (project_dir / "src" / "index.css").write_text(":root {}\n")
    (project_dir / "src" / "assets" / "react.svg").write_text("<svg/>")
    (project_dir / "public" / "vite.svg").write_text("<svg/>")
    (project_dir / f"vite.config.{script_ext}").write_text(VITE_CONFIG)
    return project_dir


@pytest.fixture
def make_vite_project(tmp_path):
    """Factory creating fake Vite projects under tmp_path."""
    def _make(name: str = "demo", typescript: bool = False) -> Path:
        return write_vite_project(tmp_path / name, typescript)
    return _make


@pytest.fixture
def vite_project(make_vite_project):
    return make_vite_project("demo")


@pytest.fixture
def js_config():
    return RunConfig(project_name="demo", typescript=False)


@pytest.fixture
def ts_config():
    return RunConfig(project_name="shop", typescript=True)


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def fake_npm(fp, tmp_path):
    """Register every npm command of a run for one project.

    Returns a function ``register(name, typescript=False, tailwind=False)``.
    The create command materializes a fake Vite project in tmp_path.
    """
    def register(name: str, typescript: bool = False, tailwind: bool = False,
                 parent: Path = None):
        parent = parent or tmp_path
        template = "react-ts" if typescript else "react"

        def create_callback(process):
            write_vite_project(parent / name, typescript)

        fp.register(
            ["npm", "create", "vite@latest", name, "--", "--template", template],
            callback=create_callback,
        )
        fp.register(["npm", "install"])
        fp.register(["npm", "install", "sass"])
        fp.register(["npm", "install", "react-router-dom"])
        if tailwind:
            fp.register(["npm", "install", "tailwindcss", "@tailwindcss/vite"])
        fp.register(LINT_INSTALL)
        return fp

    return register
