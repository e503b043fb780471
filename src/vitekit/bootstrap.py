"""Create the base Vite project and install extra dependencies."""

from pathlib import Path

from rich.console import Console

from vitekit.config import RunConfig, ToolConfig
from vitekit.manifest import add_dependencies
from vitekit.npm import npm_install, run_npm

console = Console()

SASS_PACKAGES = ("sass",)
ROUTER_PACKAGES = ("react-router-dom",)
TAILWIND_PACKAGES = ("tailwindcss", "@tailwindcss/vite")


def create_vite_project(config: RunConfig, parent: Path, tools: ToolConfig) -> Path:
    """Run ``npm create vite`` for the project and return its directory."""
    args = [
        "create", tools.vite_spec, config.project_name,
        "--", "--template", config.vite_template,
    ]
    console.print(f"\n🚀 Création du projet avec : [cyan]{tools.npm} {' '.join(args)}[/]")
    run_npm(*args, cwd=parent, npm=tools.npm)
    return parent / config.project_name


def install_dependencies(config: RunConfig, project_dir: Path, tools: ToolConfig) -> None:
    """Install declared dependencies, then each extra package group in order."""
    console.print("\n📦 Installation des dépendances...")
    npm_install(cwd=project_dir, npm=tools.npm)

    console.print("\n🎨 Installation de SCSS...")
    npm_install(*SASS_PACKAGES, cwd=project_dir, npm=tools.npm)

    console.print("\n📦 Installation de React Router...")
    npm_install(*ROUTER_PACKAGES, cwd=project_dir, npm=tools.npm)

    if config.tailwind:
        console.print("\n🌬️  Installation de Tailwind CSS...")
        npm_install(*TAILWIND_PACKAGES, cwd=project_dir, npm=tools.npm)


def declare_dependencies(config: RunConfig, project_dir: Path) -> None:
    """Record the extra package groups in package.json without installing."""
    packages = SASS_PACKAGES + ROUTER_PACKAGES
    if config.tailwind:
        packages += TAILWIND_PACKAGES
    add_dependencies(project_dir, packages)
