"""Interactive questions asked before generating a project."""

from typing import Optional

import click

from vitekit.config import RunConfig, validate_project_name

AFFIRMATIVE = "o"


def is_affirmative(answer: str) -> bool:
    """Return True for the affirmative token (case-insensitive)."""
    return answer.strip().lower() == AFFIRMATIVE


def ask(question: str, default: Optional[str] = None) -> str:
    """Ask one question and return the trimmed answer."""
    answer = click.prompt(
        question,
        default=default,
        show_default=False,
        prompt_suffix=" : ",
    )
    return answer.strip()


def ask_yes_no(question: str) -> bool:
    return is_affirmative(ask(f"{question} (o/n)", default="n"))


def collect_run_config(
    project_name: Optional[str] = None,
    typescript: Optional[bool] = None,
    tailwind: Optional[bool] = None,
    auth_guard: bool = True,
) -> RunConfig:
    """Build the RunConfig, prompting for every answer not already given.

    Raises:
        InvalidProjectNameError: If the project name is unusable
    """
    if project_name is None:
        project_name = ask("Nom du projet")
    project_name = validate_project_name(project_name)

    if typescript is None:
        typescript = ask_yes_no("Utiliser TypeScript ?")

    if tailwind is None:
        tailwind = ask_yes_no("Ajouter Tailwind CSS ?")

    return RunConfig(
        project_name=project_name,
        typescript=typescript,
        tailwind=tailwind,
        auth_guard=auth_guard,
    )
