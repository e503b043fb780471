"""Tooling templates: ESLint/Prettier, Tailwind CSS and .env."""

import json
import logging
import re
from pathlib import Path
from typing import Optional

from rich.console import Console

from vitekit.config import RunConfig, ToolConfig
from vitekit.manifest import add_dependencies, add_package_script
from vitekit.npm import npm_install
from vitekit.templates import Template, emit_templates, write_file

console = Console()
logger = logging.getLogger(__name__)

LINT_PACKAGES = (
    "eslint",
    "prettier",
    "eslint-config-prettier",
    "eslint-plugin-react",
)

ESLINT_CONFIG = """module.exports = {
  env: {
    browser: true,
    es2021: true,
  },
  extends: [
    'eslint:recommended',
    'plugin:react/recommended',
    'plugin:react/jsx-runtime',
    'prettier'
  ],
  parserOptions: {
    ecmaVersion: 'latest',
    sourceType: 'module',
  },
  plugins: ['react'],
  rules: {},
  settings: {
    react: {
      version: 'detect',
    },
  },
}
"""

PRETTIER_CONFIG = {"semi": False, "singleQuote": True, "trailingComma": "es5"}

IGNORE_CONTENT = """node_modules
dist
build
"""

ENV_CONTENT = "VITE_API_URL=http://api.exemple.com\n"

TAILWIND_CSS = '@import "tailwindcss";\n'

TAILWIND_IMPORT = "import tailwindcss from '@tailwindcss/vite'"

_REACT_PLUGIN_IMPORT = re.compile(r"^import react from ['\"]@vitejs/plugin-react[^'\"]*['\"];?[ \t]*$", re.M)
_REACT_PLUGIN_CALL = re.compile(r"react\(\)")


def setup_eslint_prettier(
    project_dir: Path,
    config: RunConfig,
    tools: Optional[ToolConfig] = None,
    install: bool = True,
) -> None:
    """Install lint tooling, write its config and add a ``lint`` script.

    With install=False the lint packages are only declared as
    devDependencies, for a later ``npm install``.
    """
    console.print("\n🧠 Setup ESLint + Prettier...")
    if install:
        tools = tools or ToolConfig.from_env()
        npm_install(*LINT_PACKAGES, cwd=project_dir, dev=True, npm=tools.npm)
    else:
        add_dependencies(project_dir, LINT_PACKAGES, dev=True)

    emit_templates(project_dir, [
        Template(".eslintrc.cjs", ESLINT_CONFIG),
        Template(".prettierrc", json.dumps(PRETTIER_CONFIG, indent=2) + "\n"),
        Template(".eslintignore", IGNORE_CONTENT),
        Template(".prettierignore", IGNORE_CONTENT),
    ])
    add_package_script(project_dir, "lint", "eslint .")


def patch_vite_config(code: str) -> str:
    """Register the Tailwind plugin in a vite.config source."""
    if TAILWIND_IMPORT in code:
        return code

    match = _REACT_PLUGIN_IMPORT.search(code)
    if match:
        code = code[:match.end()] + "\n" + TAILWIND_IMPORT + code[match.end():]
    else:
        code = TAILWIND_IMPORT + "\n" + code

    return _REACT_PLUGIN_CALL.sub("react(), tailwindcss()", code, count=1)


def setup_tailwind(project_dir: Path, config: RunConfig) -> None:
    """Wire Tailwind CSS into the Vite config and the entry file."""
    write_file(project_dir / "src" / "styles" / "tailwind.css", TAILWIND_CSS)

    vite_config = project_dir / f"vite.config.{config.script_ext}"
    if vite_config.exists():
        vite_config.write_text(
            patch_vite_config(vite_config.read_text(encoding="utf-8")),
            encoding="utf-8",
        )
    else:
        logger.warning("No %s found, add the Tailwind plugin manually", vite_config.name)

    main_path = project_dir / "src" / f"main.{config.ext}"
    if main_path.exists():
        code = main_path.read_text(encoding="utf-8")
        if "./styles/tailwind.css" not in code:
            main_path.write_text("import './styles/tailwind.css'\n" + code, encoding="utf-8")


def create_env_file(project_dir: Path, config: RunConfig) -> None:
    """Create the .env file with the API base URL."""
    emit_templates(project_dir, [Template(".env", ENV_CONTENT)])
