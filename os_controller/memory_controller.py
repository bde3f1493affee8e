"""Deterministic in-process desktop environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.event_bus import EventBus
from os_controller.base_controller import (
    CURRENT_DESKTOP_CHANGED,
    DESKTOPS_CHANGED,
    BaseDesktopController,
    ShortcutHandler,
)
from world_model.desktop_state import DesktopInfo

logger = logging.getLogger("lud.memory_controller")


@dataclass
class RegisteredShortcut:
    """Metadata for a bound shortcut."""

    name: str
    description: str
    default_keys: str
    handler: ShortcutHandler


class InMemoryDesktopController(BaseDesktopController):
    """Simulated host used by tests and scenario replay.

    Events are delivered synchronously, in the order the host would send them.
    """

    def __init__(
        self,
        desktops: list[DesktopInfo],
        active: str | None = None,
        events: EventBus | None = None,
    ) -> None:
        super().__init__(events)
        self._desktops = list(desktops)
        if active is None and self._desktops:
            active = self._desktops[0].identifier
        self._active = active
        self.shortcuts: dict[str, RegisteredShortcut] = {}
        self.switch_requests: list[str] = []

    def list_desktops(self) -> list[DesktopInfo]:
        return list(self._desktops)

    def get_active_desktop(self) -> str | None:
        return self._active

    def request_switch(self, identifier: str) -> None:
        self.switch_requests.append(identifier)
        if not self._exists(identifier):
            logger.debug("Navigating to %s failed: desktop not found", identifier)
            return
        self._activate(identifier)

    def register_shortcut(
        self,
        name: str,
        description: str,
        default_keys: str,
        handler: ShortcutHandler,
    ) -> None:
        self.shortcuts[name] = RegisteredShortcut(
            name=name,
            description=description,
            default_keys=default_keys,
            handler=handler,
        )

    def trigger_shortcut(self, name: str) -> bool:
        """Simulate the user pressing a registered shortcut."""
        shortcut = self.shortcuts.get(name)
        if shortcut is None:
            logger.warning("Shortcut %r is not registered", name)
            return False
        shortcut.handler()
        return True

    def user_switch(self, identifier: str) -> bool:
        """Switch desktops by means other than the navigation shortcuts."""
        if not self._exists(identifier):
            logger.warning("Cannot switch to unknown desktop %s", identifier)
            return False
        self._activate(identifier)
        return True

    def add_desktop(self, desktop: DesktopInfo) -> None:
        self._desktops.append(desktop)
        if self._active is None:
            self._active = desktop.identifier
        self.events.emit(DESKTOPS_CHANGED, {})

    def remove_desktop(self, identifier: str) -> bool:
        remaining = [d for d in self._desktops if d.identifier != identifier]
        if len(remaining) == len(self._desktops):
            logger.warning("Cannot remove unknown desktop %s", identifier)
            return False
        self._desktops = remaining
        if self._active == identifier:
            self._active = remaining[0].identifier if remaining else None
        self.events.emit(DESKTOPS_CHANGED, {})
        return True

    def _exists(self, identifier: str) -> bool:
        return any(d.identifier == identifier for d in self._desktops)

    def _activate(self, identifier: str) -> None:
        previous = self._active
        if previous == identifier:
            return
        self._active = identifier
        self.events.emit(CURRENT_DESKTOP_CHANGED, {"previous": previous, "current": identifier})
