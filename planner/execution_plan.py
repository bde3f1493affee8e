"""Scenario plans replayed against the in-memory desktop environment."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from world_model.desktop_state import DesktopInfo

StepAction = Literal["switch", "previous", "toggle", "wait", "add_desktop", "remove_desktop"]


class ScenarioStep(BaseModel):
    """One user or host action."""

    action: StepAction
    target: str | None = None
    slot: int | None = None
    ms: float = 0.0
    desktop: DesktopInfo | None = None

    @model_validator(mode="after")
    def _check_arguments(self) -> ScenarioStep:
        if self.action in ("switch", "remove_desktop") and not self.target:
            raise ValueError(f"'{self.action}' step requires 'target'")
        if self.action == "toggle" and (self.slot is None or self.slot < 1):
            raise ValueError("'toggle' step requires a positive 'slot'")
        if self.action == "add_desktop" and self.desktop is None:
            raise ValueError("'add_desktop' step requires 'desktop'")
        if self.action == "wait" and self.ms < 0:
            raise ValueError("'wait' step requires a non-negative 'ms'")
        return self


class ExecutionPlan(BaseModel):
    """Initial desktop layout plus an ordered list of steps."""

    desktops: list[DesktopInfo] = Field(default_factory=list)
    active: str | None = None
    steps: list[ScenarioStep] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path) -> ExecutionPlan:
        """Load a scenario file; malformed content raises ``ValueError``."""
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Scenario file must contain a mapping: {path}")
        return cls(**data)
