"""vitekit - scaffold React + Vite projects with a ready-made structure."""

__version__ = "0.1.0"
