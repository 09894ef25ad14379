"""Operator confirmation prompts.

A Confirmer turns a question into a yes/no answer. The interactive one
asks on the terminal; always() answers without asking, for --yes runs
and tests.
"""

from collections.abc import Callable

import typer

Confirmer = Callable[[str], bool]

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def is_affirmative(answer: str) -> bool:
    """Check if a typed answer means yes (case-insensitive 'y' or 'yes')."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def prompt_confirmer(question: str) -> bool:
    """Ask the operator a yes/no question on the terminal.

    Anything other than 'y' or 'yes' counts as no, including an empty line.

    Args:
        question: Question to display.

    Returns:
        True if the operator answered yes.
    """
    answer = typer.prompt(f"{question} [y/N]", default="", show_default=False)
    return is_affirmative(answer)


def always(answer: bool) -> Confirmer:
    """Build a Confirmer that never prompts.

    Args:
        answer: Answer returned for every question.

    Returns:
        Confirmer returning `answer`.
    """

    def _confirm(question: str) -> bool:
        return answer

    return _confirm
