"""Remove Vite boilerplate and point the entry file at the SCSS root."""

import logging
import shutil
from pathlib import Path

from vitekit.config import RunConfig

logger = logging.getLogger(__name__)

# Relative to the project directory. Not every Vite template version ships all of them.
BOILERPLATE_PATHS = (
    "src/App.css",
    "src/assets/react.svg",
    "src/assets",
    "src/logo.svg",
    "src/index.css",
    "public/vite.svg",
)

INDEX_SCSS = '@use "./styles/global";'


def remove_path(path: Path) -> bool:
    """Remove a file or directory tree.

    Missing paths and permission failures are skipped; other OS errors
    propagate.

    Returns:
        True if something was removed
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
        return True
    except (FileNotFoundError, PermissionError) as e:
        logger.debug("Skipped %s: %s", path, e)
        return False


def clean_boilerplate(project_dir: Path, config: RunConfig) -> None:
    """Delete default Vite files and switch the entry import to index.scss."""
    for rel in BOILERPLATE_PATHS:
        if remove_path(project_dir / rel):
            logger.debug("Removed %s", rel)

    src = project_dir / "src"
    src.mkdir(parents=True, exist_ok=True)
    (src / "index.scss").write_text(INDEX_SCSS, encoding="utf-8")

    main_path = src / f"main.{config.ext}"
    if main_path.exists():
        code = main_path.read_text(encoding="utf-8")
        main_path.write_text(code.replace("./index.css", "./index.scss", 1), encoding="utf-8")
    else:
        logger.debug("No entry file at %s", main_path)
