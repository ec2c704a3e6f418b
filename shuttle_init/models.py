"""
Data model for a wizard run.

- Framework: the web frameworks a project can be generated for
- InvocationArgs: what the operator passed on the command line
- ResolvedPlan: the final answers, handed to the local/remote steps
- Session: login state carried through a run
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from shuttle_init.errors import ConfigurationError


class Framework(Enum):
    """Supported web frameworks."""
    AXUM = "axum"
    ROCKET = "rocket"
    TIDE = "tide"

    @classmethod
    def choices(cls) -> List[str]:
        """Labels in menu order."""
        return [f.value for f in cls]


@dataclass(frozen=True)
class InvocationArgs:
    """Command-line input, captured once at startup."""
    name: Optional[str] = None
    framework: Optional[Framework] = None
    new: bool = False
    api_key: Optional[str] = None
    path: str = "."

    @classmethod
    def from_flags(
        cls,
        name: Optional[str] = None,
        axum: bool = False,
        rocket: bool = False,
        tide: bool = False,
        new: bool = False,
        api_key: Optional[str] = None,
        path: str = ".",
    ) -> "InvocationArgs":
        """Build args from one boolean flag per framework.

        Raises:
            ConfigurationError: If more than one framework flag is set
        """
        selected = [
            framework
            for framework, flag in (
                (Framework.AXUM, axum),
                (Framework.ROCKET, rocket),
                (Framework.TIDE, tide),
            )
            if flag
        ]
        if len(selected) > 1:
            raise ConfigurationError(
                "Only one framework can be selected",
                flags=[f.value for f in selected],
            )

        return cls(
            name=name,
            framework=selected[0] if selected else None,
            new=new,
            api_key=api_key,
            path=path,
        )

    @property
    def interactive(self) -> bool:
        """Whether missing inputs have to be asked for.

        True when the name or framework is missing, or when provisioning
        is requested without an API key.
        """
        return (
            self.name is None
            or self.framework is None
            or (self.new and self.api_key is None)
        )


@dataclass(frozen=True)
class ResolvedPlan:
    """Final answers for one run."""
    project_name: str
    directory: str
    framework: Framework
    provision_environment: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_name": self.project_name,
            "directory": self.directory,
            "framework": self.framework.value,
            "provision_environment": self.provision_environment,
        }


@dataclass
class Session:
    """Login state for a run."""
    logged_in: bool = False
