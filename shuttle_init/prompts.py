"""
Operator prompts.

The resolver only talks to the Prompter interface, so a run can be driven
by a terminal (QuestionaryPrompter) or by canned answers in tests.
"""

from abc import ABC, abstractmethod
from typing import List

import questionary

from shuttle_init.errors import InteractionError

EMPTY_ANSWER_MESSAGE = "A value is required"


def require_text(text: str):
    """questionary validator: True for non-blank text, else the error shown."""
    return bool(text.strip()) or EMPTY_ANSWER_MESSAGE


class Prompter(ABC):
    """Interface for asking the operator questions."""

    @abstractmethod
    def password(self, message: str) -> str:
        """Ask for a secret with masked input."""
        ...

    @abstractmethod
    def text(self, message: str, default: str = "") -> str:
        """Ask for free text.

        Args:
            message: Prompt label
            default: Pre-filled, editable initial text

        Returns:
            The text as the operator left it, never blank
        """
        ...

    @abstractmethod
    def select(self, message: str, choices: List[str], default_index: int = 0) -> str:
        """Ask the operator to pick one of the choices.

        Args:
            message: Prompt label
            choices: Labels in display order
            default_index: Index the cursor starts on

        Returns:
            The chosen label
        """
        ...

    @abstractmethod
    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question."""
        ...


class QuestionaryPrompter(Prompter):
    """Terminal prompts backed by questionary.

    Ctrl-C, Ctrl-D and broken input streams become InteractionError.
    """

    def _ask(self, message: str, question: "questionary.Question"):
        try:
            answer = question.unsafe_ask()
        except KeyboardInterrupt:
            raise InteractionError(message, "interrupted")
        except EOFError:
            raise InteractionError(message, "input closed")
        except OSError as e:
            raise InteractionError(message, str(e))
        if answer is None:
            raise InteractionError(message, "no answer")
        return answer

    def password(self, message: str) -> str:
        return self._ask(message, questionary.password(message))

    def text(self, message: str, default: str = "") -> str:
        question = questionary.text(message, default=default, validate=require_text)
        return self._ask(message, question)

    def select(self, message: str, choices: List[str], default_index: int = 0) -> str:
        question = questionary.select(
            message,
            choices=choices,
            default=choices[default_index],
            use_search_filter=True,
            use_jk_keys=False,
        )
        return self._ask(message, question)

    def confirm(self, message: str, default: bool = True) -> bool:
        return self._ask(message, questionary.confirm(message, default=default))
