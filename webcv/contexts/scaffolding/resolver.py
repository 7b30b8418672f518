"""
Interactive confirmation for scaffold updates.

The reconciler never talks to the terminal itself; it receives a `Confirm`
callable. `confirm` is the console implementation, `ScriptedConfirm` answers
from a fixed script (`webcv init --yes/--no`, tests).
"""

from typing import Callable, Iterable, List

Confirm = Callable[[str], bool]

AFFIRMATIVE_ANSWERS = ("y", "yes")


def is_affirmative(answer: str) -> bool:
    """True only for 'y' or 'yes' (case-insensitive, surrounding whitespace ignored)."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def confirm(prompt: str) -> bool:
    """
    Ask the operator a yes/no question on the console.

    Blocks until a line is entered. Empty input, any unrecognized token and
    end-of-input all count as "no"; the question is never repeated.

    Args:
        prompt: Question to show (written to stdout)

    Returns:
        True if the operator answered yes
    """
    try:
        answer = input(f"{prompt} [y/N]: ")
    except EOFError:
        print()
        return False
    return is_affirmative(answer)


class ScriptedConfirm:
    """
    Confirm capability that replays canned answers.

    Each call consumes the next answer; once answers run out every further call
    returns `default`. Prompts are recorded in `prompts` so callers can report
    or assert on them.

    Example:
        answers = ScriptedConfirm(["yes", ""])
        sync_scaffold(project_dir, confirm=answers)
        assert len(answers.prompts) == 2

        sync_scaffold(project_dir, confirm=ScriptedConfirm(default=True))  # --yes
    """

    def __init__(self, answers: Iterable[str] = (), default: bool = False):
        self._answers = list(answers)
        self.default = default
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if len(self.prompts) > len(self._answers):
            return self.default
        return is_affirmative(self._answers[len(self.prompts) - 1])

    @property
    def call_count(self) -> int:
        return len(self.prompts)
