"""
External steps the wizard drives.

The resolver decides what to do; these do it. ConsoleCollaborators is the
stand-in used by the CLI: every call prints a trace line and nothing
leaves the machine.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from shuttle_init.errors import CollaboratorError
from shuttle_init.models import Framework
from shuttle_init.ux import print_step

logger = logging.getLogger(__name__)


class Collaborators(ABC):
    """Interface for the side-effecting steps of a run."""

    @abstractmethod
    def authenticate(self, credential: str) -> None:
        """Log in with a credential.

        Raises:
            CollaboratorError: If the login is rejected
        """
        ...

    @abstractmethod
    def check_name_available(self, name: str) -> bool:
        """Return True if no existing project claims the name."""
        ...

    @abstractmethod
    def initialize_locally(self, project_name: str, directory: str, framework: Framework) -> None:
        """Create the on-disk project skeleton.

        Raises:
            CollaboratorError: If initialization fails
        """
        ...

    @abstractmethod
    def provision_environment(self, project_name: str) -> None:
        """Create the remote hosting environment for a project."""
        ...


class ConsoleCollaborators(Collaborators):
    """Trace-only collaborators.

    Args:
        taken_names: Names the availability check reports as claimed
    """

    def __init__(self, taken_names: Optional[Iterable[str]] = None):
        self.taken_names = frozenset(taken_names if taken_names is not None else ("p",))

    def authenticate(self, credential: str) -> None:
        if not credential:
            raise CollaboratorError("login", "empty API key")
        logger.debug("Authenticating with a %d character key", len(credential))
        print_step("Logging in with API key")

    def check_name_available(self, name: str) -> bool:
        print_step(f"Checking if {name} is available")
        available = name not in self.taken_names
        logger.debug("Name %r available: %s", name, available)
        return available

    def initialize_locally(self, project_name: str, directory: str, framework: Framework) -> None:
        logger.debug("Initializing %s in %s (%s)", project_name, directory, framework.value)
        print_step(f"Cargo init with project name {project_name} in dir {directory}")
        print_step(f"Generating code for {framework.value}")

    def provision_environment(self, project_name: str) -> None:
        logger.debug("Provisioning environment for %s", project_name)
        print_step(f"Setting environment for project {project_name}")
