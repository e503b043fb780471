"""Templates module for vitekit scaffolding.

Each emitter builds a list of Template values and hands them to
emit_templates, which ensures the parent folders exist and overwrites
whatever is already on disk.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Template:
    """A file to write, relative to the project directory."""
    path: str
    content: str


def ensure_dirs(base: Path, *dirs: str) -> None:
    """Create folders under base (no-op when they already exist)."""
    for d in dirs:
        (base / d).mkdir(parents=True, exist_ok=True)


def write_file(path: Path, content: str) -> None:
    """Write file, replacing any previous content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", path)


def emit_templates(base: Path, templates: Iterable[Template]) -> List[Path]:
    """Write every template under base and return the written paths."""
    written = []
    for template in templates:
        target = base / template.path
        write_file(target, template.content)
        written.append(target)
    return written
