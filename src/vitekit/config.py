"""Run and tool configuration for vitekit.

Two kinds of configuration exist:
- RunConfig: the operator's answers for one run (immutable)
- ToolConfig: tunables read from the environment (npm binary, create package)

Nothing is persisted between runs.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

# npm refuses package names longer than this
MAX_PROJECT_NAME_LENGTH = 214

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


# =============================================================================
# Exceptions
# =============================================================================

class VitekitError(Exception):
    """Base exception for vitekit."""
    pass


class InvalidProjectNameError(VitekitError):
    """Project name cannot be used as a directory and package name."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class ProjectExistsError(VitekitError):
    """Target directory already exists."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


# =============================================================================
# Run Configuration
# =============================================================================

@dataclass(frozen=True)
class RunConfig:
    """Answers collected for one run.

    Created once before bootstrapping and passed explicitly to every step.
    """
    project_name: str
    typescript: bool = False
    tailwind: bool = False
    auth_guard: bool = True

    @property
    def ext(self) -> str:
        """Extension for component, page, layout and route files."""
        return "tsx" if self.typescript else "jsx"

    @property
    def script_ext(self) -> str:
        """Extension for plain modules without JSX."""
        return "ts" if self.typescript else "js"

    @property
    def vite_template(self) -> str:
        return "react-ts" if self.typescript else "react"


def validate_project_name(name: str) -> str:
    """Check that a project name is safe as a path segment and npm name.

    Args:
        name: Raw project name

    Returns:
        The name, stripped of surrounding whitespace

    Raises:
        InvalidProjectNameError: If the name is empty or contains
            characters outside ``[A-Za-z0-9._-]``
    """
    name = (name or "").strip()
    if not name:
        raise InvalidProjectNameError("Project name cannot be empty", name=name)
    if len(name) > MAX_PROJECT_NAME_LENGTH:
        raise InvalidProjectNameError(
            f"Project name is longer than {MAX_PROJECT_NAME_LENGTH} characters",
            name=name,
        )
    if not PROJECT_NAME_PATTERN.match(name):
        raise InvalidProjectNameError(
            f"Invalid project name '{name}': use letters, digits, '.', '_' or '-' "
            "and start with a letter or digit",
            name=name,
        )
    return name


def ensure_target_free(parent: Path, name: str) -> Path:
    """Return the project path under parent, refusing existing directories."""
    target = parent / name
    if target.exists():
        raise ProjectExistsError(f"Directory '{name}' already exists", path=target)
    return target


# =============================================================================
# Tool Configuration
# =============================================================================

@dataclass
class ToolConfig:
    """Tunables for the external tooling (read from VITEKIT_* variables)."""
    npm: str = "npm"
    vite_spec: str = "vite@latest"

    @classmethod
    def from_dict(cls, data: dict) -> "ToolConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ToolConfig":
        env = os.environ if environ is None else environ
        data = {}
        if env.get("VITEKIT_NPM"):
            data["npm"] = env["VITEKIT_NPM"]
        if env.get("VITEKIT_VITE_SPEC"):
            data["vite_spec"] = env["VITEKIT_VITE_SPEC"]
        return cls.from_dict(data)
