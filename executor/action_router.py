"""Routes scenario steps to a simulated desktop environment."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from core.control_loop import PREVIOUS_SHORTCUT_NAME, toggle_shortcut_name
from core.orchestrator import Orchestrator, RuntimeBundle
from os_controller.memory_controller import InMemoryDesktopController
from planner.execution_plan import ExecutionPlan, ScenarioStep

logger = logging.getLogger("lud.action_router")


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now_ms = start_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    def __call__(self) -> float:
        return self.now_ms


class ActionRouter:
    """Replays an execution plan and records the outcome of each step."""

    def __init__(self, config_dir: Path | None = None, debug: bool = False) -> None:
        self.orchestrator = Orchestrator(config_dir=config_dir)
        self.clock = ManualClock()
        self.debug = debug

    def run(self, plan: ExecutionPlan) -> list[dict[str, Any]]:
        controller = InMemoryDesktopController(desktops=plan.desktops, active=plan.active)
        bundle = self.orchestrator.build(controller=controller, clock=self.clock, debug=self.debug)

        results = []
        for index, step in enumerate(plan.steps, start=1):
            detail = self._execute_step(bundle, controller, step)
            results.append(
                {
                    "index": index,
                    "action": step.action,
                    "detail": detail,
                    "active": controller.get_active_desktop(),
                    "history": bundle.engine.history.as_list(),
                }
            )
        return results

    def _execute_step(
        self,
        bundle: RuntimeBundle,
        controller: InMemoryDesktopController,
        step: ScenarioStep,
    ) -> str:
        if step.action == "switch":
            ok = controller.user_switch(step.target)
            return f"switch to {step.target}" + ("" if ok else " (unknown desktop)")
        if step.action == "previous":
            controller.trigger_shortcut(PREVIOUS_SHORTCUT_NAME)
            return "previous desktop"
        if step.action == "toggle":
            ok = controller.trigger_shortcut(toggle_shortcut_name(step.slot))
            return f"toggle desktop {step.slot}" + ("" if ok else " (no shortcut)")
        if step.action == "wait":
            self.clock.advance(step.ms)
            return f"wait {step.ms:g} ms"
        if step.action == "add_desktop":
            controller.add_desktop(step.desktop)
            return f"add {step.desktop.identifier}"
        if step.action == "remove_desktop":
            ok = controller.remove_desktop(step.target)
            return f"remove {step.target}" + ("" if ok else " (unknown desktop)")
        logger.warning("Unsupported step action: %s", step.action)
        return "unsupported"
