"""
Shared fakes for driving the wizard without a terminal.

FakePrompter replays canned answers per prompt kind and records every
prompt it was shown. RecordingCollaborators records every external call.
"""

from typing import Iterable, List, Optional

import pytest

from shuttle_init.collaborators import Collaborators
from shuttle_init.errors import CollaboratorError
from shuttle_init.prompts import Prompter, require_text
from shuttle_init.ux import set_colors


class FakePrompter(Prompter):
    """Prompter that answers from queues.

    An answer that is an exception instance is raised instead of returned.
    Blank text answers are rejected and the next one is taken, as the
    terminal prompt does.
    """

    def __init__(
        self,
        passwords: Iterable = (),
        texts: Iterable = (),
        selects: Iterable = (),
        confirms: Iterable = (),
    ):
        self.answers = {
            "password": list(passwords),
            "text": list(texts),
            "select": list(selects),
            "confirm": list(confirms),
        }
        self.shown: List[tuple] = []
        self.rejected: List[str] = []

    def _next(self, kind: str):
        queue = self.answers[kind]
        if not queue:
            raise AssertionError(f"unexpected {kind} prompt")
        answer = queue.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def kinds(self) -> List[str]:
        return [entry[0] for entry in self.shown]

    def password(self, message: str) -> str:
        self.shown.append(("password", message))
        return self._next("password")

    def text(self, message: str, default: str = "") -> str:
        self.shown.append(("text", message, default))
        while True:
            answer = self._next("text")
            # None means "accept the pre-filled text"
            if answer is None:
                answer = default
            if require_text(answer) is True:
                return answer
            self.rejected.append(answer)

    def select(self, message: str, choices: List[str], default_index: int = 0) -> str:
        self.shown.append(("select", message, list(choices), default_index))
        index = self._next("select")
        return choices[default_index if index is None else index]

    def confirm(self, message: str, default: bool = True) -> bool:
        self.shown.append(("confirm", message, default))
        answer = self._next("confirm")
        return default if answer is None else answer


class RecordingCollaborators(Collaborators):
    """Collaborators that record calls in order."""

    def __init__(
        self,
        availability: Optional[Iterable[bool]] = None,
        fail_on: Optional[str] = None,
    ):
        self.availability = list(availability) if availability is not None else None
        self.fail_on = fail_on
        self.calls: List[tuple] = []

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def authenticate(self, credential: str) -> None:
        self.calls.append(("authenticate", credential))
        if self.fail_on == "authenticate":
            raise CollaboratorError("login", "invalid API key")

    def check_name_available(self, name: str) -> bool:
        self.calls.append(("check_name_available", name))
        if self.availability is None:
            return True
        return self.availability.pop(0)

    def initialize_locally(self, project_name, directory, framework) -> None:
        self.calls.append(("initialize_locally", project_name, directory, framework))
        if self.fail_on == "initialize_locally":
            raise CollaboratorError("init", "directory not writable")

    def provision_environment(self, project_name: str) -> None:
        self.calls.append(("provision_environment", project_name))


@pytest.fixture
def make_prompter():
    return FakePrompter


@pytest.fixture
def make_collaborators():
    return RecordingCollaborators


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at an empty temp location."""
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("SHUTTLE_INIT_CONFIG", str(path))
    set_colors(False)
    yield path
    set_colors(False)
