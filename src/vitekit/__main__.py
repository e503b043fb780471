"""Allow running as ``python -m vitekit``."""

from vitekit.cli import main

if __name__ == "__main__":
    main()
