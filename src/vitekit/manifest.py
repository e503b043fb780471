"""Edits to the generated project's package.json."""

import json
import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

# Version range recorded for packages that were not installed
UNINSTALLED_VERSION = "latest"


def _load(project_dir: Path) -> dict:
    return json.loads((project_dir / "package.json").read_text(encoding="utf-8"))


def _save(project_dir: Path, pkg: dict) -> None:
    (project_dir / "package.json").write_text(json.dumps(pkg, indent=2) + "\n", encoding="utf-8")


def add_package_script(project_dir: Path, name: str, command: str) -> None:
    """Add (or replace) an npm script in package.json."""
    pkg = _load(project_dir)
    pkg.setdefault("scripts", {})[name] = command
    _save(project_dir, pkg)


def add_dependencies(project_dir: Path, packages: Iterable[str], dev: bool = False) -> None:
    """Declare packages in package.json without installing them.

    Packages already declared keep their version.
    """
    pkg = _load(project_dir)
    section = pkg.setdefault("devDependencies" if dev else "dependencies", {})
    for name in packages:
        section.setdefault(name, UNINSTALLED_VERSION)
    _save(project_dir, pkg)
    logger.debug("Declared %s", ", ".join(packages))
