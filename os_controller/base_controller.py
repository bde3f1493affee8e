"""Base interface for desktop environment controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from core.event_bus import EventBus
from world_model.desktop_state import DesktopInfo

ShortcutHandler = Callable[[], None]

# Host notifications published on BaseDesktopController.events.
DESKTOPS_CHANGED = "desktops_changed"
CURRENT_DESKTOP_CHANGED = "current_desktop_changed"


class BaseDesktopController(ABC):
    """Abstract host adapter.

    Implementations publish ``desktops_changed`` and ``current_desktop_changed``
    on :attr:`events` and execute switch requests coming from the navigation
    engine.
    """

    def __init__(self, events: EventBus | None = None) -> None:
        self.events = events or EventBus()

    @abstractmethod
    def list_desktops(self) -> list[DesktopInfo]:
        """Return the current desktops in host order."""
        pass

    @abstractmethod
    def get_active_desktop(self) -> str | None:
        """Return the identifier of the active desktop."""
        pass

    @abstractmethod
    def request_switch(self, identifier: str) -> None:
        """Make ``identifier`` the active desktop if it still exists."""
        pass

    @abstractmethod
    def register_shortcut(
        self,
        name: str,
        description: str,
        default_keys: str,
        handler: ShortcutHandler,
    ) -> None:
        """Bind a global shortcut to ``handler``."""
        pass
