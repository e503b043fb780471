"""npm invocation for vitekit.

Every command runs in the foreground with the terminal inherited, so the
operator sees npm's own progress output. There is no timeout: a stalled
install blocks the run.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from vitekit.config import VitekitError

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class NpmError(VitekitError):
    """Base exception for npm operations."""
    pass


class NpmNotInstalledError(NpmError):
    """npm is not installed or not in PATH."""
    pass


class NpmCommandError(NpmError):
    """npm command exited with non-zero status."""

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


# =============================================================================
# Core Functions
# =============================================================================

def run_npm(
    *args,
    cwd: Optional[Path] = None,
    npm: str = "npm",
) -> subprocess.CompletedProcess:
    """Run an npm command and wait for it to exit.

    Args:
        *args: npm arguments
        cwd: Working directory (defaults to cwd)
        npm: npm executable

    Returns:
        CompletedProcess result

    Raises:
        NpmNotInstalledError: If the npm executable cannot be found
        NpmCommandError: If npm exits non-zero
    """
    cmd = [npm] + list(args)
    cmd_str = " ".join(cmd)
    logger.debug("Running %s (cwd=%s)", cmd_str, cwd)

    try:
        result = subprocess.run(cmd, cwd=cwd or Path.cwd())
    except FileNotFoundError:
        raise NpmNotInstalledError(
            f"'{npm}' is not installed or not in PATH. "
            "Please install Node.js: https://nodejs.org/"
        )

    if result.returncode != 0:
        raise NpmCommandError(
            f"npm command failed ({result.returncode}): {cmd_str}",
            returncode=result.returncode,
        )
    return result


def npm_install(
    *packages: str,
    cwd: Path,
    dev: bool = False,
    npm: str = "npm",
) -> subprocess.CompletedProcess:
    """Install packages (or the declared dependencies when none given)."""
    args = ["install"]
    if dev:
        args.append("-D")
    args.extend(packages)
    return run_npm(*args, cwd=cwd, npm=npm)
