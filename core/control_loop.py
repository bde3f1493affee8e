"""Host glue: connects desktop events and global shortcuts to the navigation engine."""

from __future__ import annotations

import logging
from typing import Any

from core.navigation_engine import NavigationEngine
from os_controller.base_controller import (
    CURRENT_DESKTOP_CHANGED,
    DESKTOPS_CHANGED,
    BaseDesktopController,
)
from world_model.desktop_index import DesktopIndex

logger = logging.getLogger("lud.control_loop")

PREVIOUS_SHORTCUT_NAME = "Last Used Virtual Desktops"
PREVIOUS_SHORTCUT_DESCRIPTION = "Navigate to previously used virtual desktop"
DEFAULT_TOGGLE_SHORTCUT_FLOOR = 20


def toggle_shortcut_name(slot: int) -> str:
    return f"Go to Desktop {slot}"


class DesktopControlLoop:
    """Keeps the desktop index, history and shortcut bindings in sync with the host."""

    def __init__(
        self,
        controller: BaseDesktopController,
        engine: NavigationEngine,
        desktop_index: DesktopIndex,
        toggle_shortcut_floor: int = DEFAULT_TOGGLE_SHORTCUT_FLOOR,
        reregister_shortcuts: bool = True,
        previous_shortcut_keys: str = "Meta+Tab",
    ) -> None:
        self.controller = controller
        self.engine = engine
        self.desktop_index = desktop_index
        self.toggle_shortcut_floor = toggle_shortcut_floor
        self.reregister_shortcuts = reregister_shortcuts
        self.previous_shortcut_keys = previous_shortcut_keys
        self.registered_toggle_slots: set[int] = set()
        self._started = False

    def start(self) -> None:
        """Build initial state, connect host events and register shortcuts."""
        if self._started:
            return
        self._init_desktops()
        self.controller.events.subscribe(DESKTOPS_CHANGED, self.handle_desktops_changed)
        self.controller.events.subscribe(CURRENT_DESKTOP_CHANGED, self.handle_current_desktop_changed)
        self.controller.register_shortcut(
            PREVIOUS_SHORTCUT_NAME,
            PREVIOUS_SHORTCUT_DESCRIPTION,
            self.previous_shortcut_keys,
            self.handle_previous_shortcut,
        )
        self._register_toggle_shortcuts()
        self._started = True

    def handle_desktops_changed(self, payload: dict[str, Any]) -> None:
        _ = payload
        logger.debug("Event: desktops changed")
        try:
            self._init_desktops()
            if self.reregister_shortcuts:
                self._register_toggle_shortcuts()
        except Exception:
            logger.exception("Rebuilding desktop state failed")

    def handle_current_desktop_changed(self, payload: dict[str, Any]) -> None:
        current = payload.get("current")
        logger.debug(
            "Event: current desktop changed from %s to %s",
            self.desktop_index.describe(payload.get("previous")),
            self.desktop_index.describe(current),
        )
        if current is None:
            return
        try:
            self.engine.record_visit(current)
        except Exception:
            logger.exception("Recording visit to %s failed", current)

    def handle_previous_shortcut(self) -> None:
        logger.debug("Hotkey: history navigation")
        try:
            self.engine.on_previous_desktop_shortcut()
        except Exception:
            logger.exception("History navigation failed")

    def handle_toggle_shortcut(self, slot: int) -> None:
        logger.debug("Hotkey: direct navigation to %s", slot)
        try:
            self.engine.on_toggle_desktop_shortcut(slot, self.controller.get_active_desktop())
        except Exception:
            logger.exception("Direct navigation to desktop %s failed", slot)

    def _init_desktops(self) -> None:
        self.desktop_index.rebuild(self.controller.list_desktops())
        self.engine.reset(self.controller.get_active_desktop())

    def _register_toggle_shortcuts(self) -> None:
        wanted = max(self.toggle_shortcut_floor, len(self.controller.list_desktops()))
        logger.debug("Registering toggle shortcuts for %d desktops", wanted)
        for slot in range(1, wanted + 1):
            if slot in self.registered_toggle_slots:
                continue
            self.controller.register_shortcut(
                toggle_shortcut_name(slot),
                f"Navigate to virtual desktop {slot} with toggle",
                "",
                lambda slot=slot: self.handle_toggle_shortcut(slot),
            )
            self.registered_toggle_slots.add(slot)
