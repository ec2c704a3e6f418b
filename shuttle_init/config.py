"""
User configuration for the wizard.

Stored as JSON in ~/.shuttle-init/config.json. The location can be
overridden with the SHUTTLE_INIT_CONFIG environment variable or the
--config option.

Settings:
- domain: hosting domain shown in the project name hint
- colors: ANSI colors in console output
- verbose: debug logging on stderr
- taken_names: names the stub availability check reports as claimed
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SHUTTLE_INIT_CONFIG"
DEFAULT_DOMAIN = "shuttleapp.rs"


@dataclass
class WizardConfig:
    """Wizard settings."""
    domain: str = DEFAULT_DOMAIN
    colors: bool = True
    verbose: bool = False
    taken_names: List[str] = field(default_factory=lambda: ["p"])

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "colors": self.colors,
            "verbose": self.verbose,
            "taken_names": list(self.taken_names),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WizardConfig":
        defaults = cls()
        taken_names = data.get("taken_names", defaults.taken_names)
        if isinstance(taken_names, str):
            taken_names = [taken_names]
        return cls(
            domain=data.get("domain", defaults.domain),
            colors=data.get("colors", defaults.colors),
            verbose=data.get("verbose", defaults.verbose),
            taken_names=list(taken_names),
        )


def get_config_path(override: Optional[str] = None) -> Path:
    """Get the config file path.

    An explicit override wins, then the environment variable,
    then ~/.shuttle-init/config.json.
    """
    if override:
        return Path(override).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".shuttle-init" / "config.json"


def load_config(path: Optional[str] = None) -> WizardConfig:
    """Load configuration. Returns defaults if missing or unreadable."""
    config_file = get_config_path(path)

    if not config_file.exists():
        return WizardConfig()

    try:
        with open(config_file) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("top-level value must be an object")
        return WizardConfig.from_dict(data)
    except OSError as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return WizardConfig()
    except (json.JSONDecodeError, ValueError, TypeError) as e:
        logger.warning("Ignoring malformed config %s: %s", config_file, e)
        return WizardConfig()

