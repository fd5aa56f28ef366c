"""Feature toggles and the resolved selection record."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class FeatureToggle(Enum):
    ESLINT = "eslint"
    PRETTIER = "prettier"
    JEST = "jest"
    HUSKY = "husky"
    LINT_STAGED = "lint-staged"


@dataclass(frozen=True)
class ToggleState:
    """Resolved state of one toggle.

    config_path is an existing config to reuse; None means generate a default.
    """

    enabled: bool
    config_path: str | None = None

    def __post_init__(self):
        if not self.enabled and self.config_path:
            raise ValueError("A disabled toggle cannot carry a config path")


@dataclass(frozen=True)
class SelectionRecord:
    """Target path plus the state of every feature toggle."""

    target_path: str
    toggles: Mapping[FeatureToggle, ToggleState]

    def __post_init__(self):
        if not self.target_path:
            raise ValueError("target_path must not be empty")
        missing = [t.value for t in FeatureToggle if t not in self.toggles]
        if missing:
            raise ValueError(f"Missing toggle states: {', '.join(missing)}")
        object.__setattr__(self, "toggles", MappingProxyType(dict(self.toggles)))

    def is_enabled(self, toggle: FeatureToggle) -> bool:
        return self.toggles[toggle].enabled

    def config_path(self, toggle: FeatureToggle) -> str | None:
        return self.toggles[toggle].config_path

    def enabled_toggles(self) -> list[FeatureToggle]:
        """Enabled toggles in declaration order."""
        return [t for t in FeatureToggle if self.toggles[t].enabled]
