"""Top-level application orchestrator."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.control_loop import DesktopControlLoop
from core.navigation_engine import NavigationEngine
from core.policy_runtime import (
    NavigationSettings,
    configure_logging,
    load_effective_config,
    navigation_settings,
)
from os_controller.base_controller import BaseDesktopController
from world_model.desktop_index import DesktopIndex


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    settings: NavigationSettings
    controller: BaseDesktopController
    desktop_index: DesktopIndex
    engine: NavigationEngine
    control_loop: DesktopControlLoop


class Orchestrator:
    """Creates and wires runtime components around a host controller."""

    def __init__(self, root: Path | None = None, config_dir: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.config_dir = (config_dir or self.root / "config").resolve()

    def load_settings(self) -> tuple[dict[str, Any], NavigationSettings]:
        config = load_effective_config(self.config_dir)
        return config, navigation_settings(config)

    def build(
        self,
        controller: BaseDesktopController,
        clock: Callable[[], float] | None = None,
        debug: bool = False,
    ) -> RuntimeBundle:
        config, settings = self.load_settings()
        configure_logging(settings.debug_enabled or debug)

        desktop_index = DesktopIndex()
        engine = NavigationEngine(
            desktop_index=desktop_index,
            switch_desktop=controller.request_switch,
            continuation_delay_ms=settings.continuation_delay_ms,
            clock=clock,
        )
        control_loop = DesktopControlLoop(
            controller=controller,
            engine=engine,
            desktop_index=desktop_index,
            toggle_shortcut_floor=settings.toggle_shortcut_floor,
            reregister_shortcuts=settings.reregister_shortcuts,
            previous_shortcut_keys=settings.previous_shortcut_keys,
        )
        control_loop.start()

        return RuntimeBundle(
            config=config,
            settings=settings,
            controller=controller,
            desktop_index=desktop_index,
            engine=engine,
            control_loop=control_loop,
        )
