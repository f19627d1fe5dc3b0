"""Interactive yes/no prompts on stdin."""

from typing import Callable


def is_affirmative(answer: str) -> bool:
    """True if the answer starts with y or Y (y, Y, yes, Yes...)."""
    return answer.strip()[:1] in ("y", "Y")


def ask_yes_no(
    question: str,
    input_func: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> bool:
    """Ask a [y/N] question; default (empty answer or closed stdin) is no."""
    try:
        answer = input_func(f"{question} [y/N]: ")
    except EOFError:
        answer = ""
    echo("")
    return is_affirmative(answer)
