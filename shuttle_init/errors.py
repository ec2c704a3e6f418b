"""
Error types for the onboarding wizard.

Three kinds of failure end a run:
- ConfigurationError: the invocation itself is malformed (conflicting flags)
- InteractionError: a prompt failed or the operator cancelled it
- CollaboratorError: an external step (login, local init) reported failure

A taken project name is not an error; the wizard just asks again.
"""

from typing import List, Optional


class WizardError(Exception):
    """Base class for wizard failures."""


class ConfigurationError(WizardError):
    """Raised when the invocation arguments are inconsistent."""
    def __init__(self, message: str, flags: Optional[List[str]] = None):
        self.message = message
        self.flags = flags or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.flags:
            flags = ", ".join(f"--{f}" for f in self.flags)
            return f"{self.message} ({flags})"
        return self.message


class InteractionError(WizardError):
    """Raised when an operator prompt fails or is cancelled."""
    def __init__(self, prompt: str, reason: str = "cancelled"):
        self.prompt = prompt
        self.reason = reason
        super().__init__(f"{prompt}: {reason}")


class CollaboratorError(WizardError):
    """Raised when an external step reports failure."""
    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")
