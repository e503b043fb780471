"""vitekit new - Create a React + Vite project."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from vitekit.config import ToolConfig, VitekitError
from vitekit.generator import generate_project
from vitekit.prompts import collect_run_config

console = Console()


@click.command()
@click.argument("name", required=False)
@click.option(
    "--typescript/--javascript",
    "typescript",
    default=None,
    help="Use the react-ts template (asked when omitted)",
)
@click.option(
    "--tailwind/--no-tailwind",
    default=None,
    help="Add Tailwind CSS (asked when omitted)",
)
@click.option(
    "--auth-guard/--no-auth-guard",
    default=True,
    help="Generate RequireAuth and an admin layout (default: yes)",
)
@click.option(
    "--skip-install",
    is_flag=True,
    help="Skip npm installs after creating the base project",
)
def new_cmd(
    name: Optional[str],
    typescript: Optional[bool],
    tailwind: Optional[bool],
    auth_guard: bool,
    skip_install: bool,
):
    """Create a React + Vite project with a ready-made structure.

    NAME is the project directory name (asked when omitted).

    \b
    Generated:
      src/components, hooks, pages, routes, layouts, styles, ...
      SCSS architecture, React Router, ESLint + Prettier
    """
    try:
        config = collect_run_config(
            project_name=name,
            typescript=typescript,
            tailwind=tailwind,
            auth_guard=auth_guard,
        )

        console.print(Panel.fit(
            f"[bold blue]vitekit new[/] - Creating [cyan]{config.project_name}[/] "
            f"({'TypeScript' if config.typescript else 'JavaScript'})",
            border_style="blue"
        ))

        project_dir = generate_project(
            config,
            parent=Path.cwd(),
            tools=ToolConfig.from_env(),
            install=not skip_install,
        )
    except VitekitError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    console.print(f"\n[green]✓[/] Project created at [cyan]{project_dir}[/]")
    _print_next_steps(config.project_name, skip_install)


def _print_next_steps(name: str, skip_install: bool):
    """Print next steps after creation."""
    console.print("\n[bold]Next steps:[/]")
    console.print(f"  cd {name}")
    if skip_install:
        console.print("  npm install")
    console.print("  npm run dev")
    console.print("  npm run lint")
