"""Options dataclass for the provisioner, read from the environment."""

import os
from dataclasses import dataclass

PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")

_TRUTHY = ("1", "true", "yes", "on")


def _flag(environ, name):
    return environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ProvisionOpts:
    """All settings for provisioning a project."""

    package_manager: str = "npm"
    skip_install: bool = False
    assume_yes: bool = False

    def __post_init__(self):
        if self.package_manager not in PACKAGE_MANAGERS:
            raise ValueError(
                f"Unsupported package manager: {self.package_manager} "
                f"(expected one of: {', '.join(PACKAGE_MANAGERS)})"
            )

    @classmethod
    def from_environ(cls, environ=None):
        """Build options from JSINIT_* environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            package_manager=environ.get("JSINIT_PACKAGE_MANAGER", "").strip() or "npm",
            skip_install=_flag(environ, "JSINIT_SKIP_INSTALL"),
            assume_yes=_flag(environ, "JSINIT_ASSUME_YES"),
        )
