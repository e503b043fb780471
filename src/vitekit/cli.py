"""Main CLI entry point for vitekit."""

import logging

import click
from rich.logging import RichHandler

from vitekit import __version__
from vitekit.commands.new import new_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="vitekit")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """vitekit - Scaffold React + Vite projects.

    \b
    Quick Start:
      vitekit new my-app                 Ask questions, then create
      vitekit new my-app --typescript    React + TypeScript
      vitekit new my-app --tailwind      Add Tailwind CSS
    """
    _configure_logging(verbose)


main.add_command(new_cmd, name="new")


if __name__ == "__main__":
    main()
