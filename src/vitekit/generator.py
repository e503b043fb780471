"""Project generation: bootstrap, install, clean, then emit templates.

The run is strictly linear. Emitters are called in EMIT_STEPS order,
which must respect STEP_DEPENDENCIES: a file that imports another by
relative path is emitted after the emitter that writes its target.
"""

import logging
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from rich.console import Console

from vitekit.bootstrap import create_vite_project, declare_dependencies, install_dependencies
from vitekit.cleaner import clean_boilerplate
from vitekit.config import RunConfig, ToolConfig, ensure_target_free, validate_project_name
from vitekit.templates.layouts import create_layouts, create_navbar
from vitekit.templates.pages import (
    create_not_found_page,
    create_pages_and_routing,
    write_app_file,
)
from vitekit.templates.readme import generate_readme
from vitekit.templates.structure import (
    create_constants_and_utils,
    create_folder_readmes,
    create_routes_folder,
)
from vitekit.templates.styles import create_styles_folder
from vitekit.templates.tooling import create_env_file, setup_eslint_prettier, setup_tailwind

console = Console()
logger = logging.getLogger(__name__)

Emitter = Callable[[Path, RunConfig], None]

EMIT_STEPS = (
    "create_folder_readmes",
    "create_routes_folder",
    "create_constants_and_utils",
    "create_styles_folder",
    "create_navbar",
    "create_layouts",
    "create_not_found_page",
    "create_pages_and_routing",
    "setup_tailwind",
    "setup_eslint_prettier",
    "create_env_file",
    "write_app_file",
    "generate_readme",
)

# step -> steps whose output it imports or writes into
STEP_DEPENDENCIES = {
    "create_navbar": ("create_constants_and_utils",),
    "create_layouts": ("create_navbar",),
    "create_pages_and_routing": (
        "create_routes_folder",
        "create_constants_and_utils",
        "create_layouts",
        "create_navbar",
        "create_not_found_page",
    ),
    "setup_tailwind": ("create_styles_folder",),
    "write_app_file": ("create_pages_and_routing", "create_not_found_page"),
}

# Only run when the matching RunConfig flag is set
OPTIONAL_STEPS = {
    "setup_tailwind": "tailwind",
}

STEP_MESSAGES = {
    "create_folder_readmes": "\n📁 Création des dossiers avec README...",
    "setup_tailwind": "\n🌬️  Configuration de Tailwind CSS...",
    "write_app_file": "\n📄 Création d'un App minimal...",
    "generate_readme": "\n📄 Génération du README...",
}


def build_emitters(
    tools: Optional[ToolConfig] = None,
    install: bool = True,
) -> List[Tuple[str, Emitter]]:
    """Return (name, emitter) pairs in EMIT_STEPS order."""
    registry = {
        "create_folder_readmes": create_folder_readmes,
        "create_routes_folder": create_routes_folder,
        "create_constants_and_utils": create_constants_and_utils,
        "create_styles_folder": create_styles_folder,
        "create_navbar": create_navbar,
        "create_layouts": create_layouts,
        "create_not_found_page": create_not_found_page,
        "create_pages_and_routing": create_pages_and_routing,
        "setup_tailwind": setup_tailwind,
        "setup_eslint_prettier": partial(setup_eslint_prettier, tools=tools, install=install),
        "create_env_file": create_env_file,
        "write_app_file": write_app_file,
        "generate_readme": generate_readme,
    }
    return [(name, registry[name]) for name in EMIT_STEPS]


def emit_project(
    project_dir: Path,
    config: RunConfig,
    tools: Optional[ToolConfig] = None,
    install: bool = True,
) -> List[str]:
    """Run every emitter in order and return the names that ran."""
    ran = []
    for name, emitter in build_emitters(tools, install):
        flag = OPTIONAL_STEPS.get(name)
        if flag and not getattr(config, flag):
            continue
        if name in STEP_MESSAGES:
            console.print(STEP_MESSAGES[name])
        logger.debug("Emitting %s", name)
        emitter(project_dir, config)
        ran.append(name)
    return ran


def generate_project(
    config: RunConfig,
    parent: Optional[Path] = None,
    tools: Optional[ToolConfig] = None,
    install: bool = True,
) -> Path:
    """Create a complete project under parent and return its directory.

    Args:
        config: Answers for this run
        parent: Directory to create the project in (defaults to cwd)
        tools: npm settings (defaults to VITEKIT_* environment variables)
        install: Run the dependency installs (bootstrap always runs);
            when False the packages are only declared in package.json

    Raises:
        InvalidProjectNameError: If the project name is unusable
        ProjectExistsError: If the target directory exists
        NpmError: If any npm command fails
    """
    parent = parent or Path.cwd()
    tools = tools or ToolConfig.from_env()

    validate_project_name(config.project_name)
    ensure_target_free(parent, config.project_name)

    project_dir = create_vite_project(config, parent, tools)

    if install:
        install_dependencies(config, project_dir, tools)
    else:
        console.print("\n[dim]Installation des dépendances ignorée (--skip-install)[/]")
        declare_dependencies(config, project_dir)

    console.print("\n🧼 Nettoyage du boilerplate...")
    clean_boilerplate(project_dir, config)

    emit_project(project_dir, config, tools, install)

    console.print("\n[green]✅ Projet React prêt ![/]")
    return project_dir
