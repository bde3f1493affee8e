"""Desktop history navigation: walk-back on repeated presses and direct toggle.

The engine keeps the visit history and a single in-progress "walk". A fresh
press of the previous-desktop shortcut previews the entry just before the
current one; quick repeated presses keep stepping back. While a walk is open,
the desktop-changed notification caused by the engine's own switch is not
recorded, so previewed entries keep their relative order until the walk is
finalized.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from core.state_manager import DesktopHistory, NavigationState
from world_model.desktop_index import DesktopIndex

logger = logging.getLogger("lud.engine")

DEFAULT_CONTINUATION_DELAY_MS = 500


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class NavigationEngine:
    """Owns the desktop history and the walk/continuation state machine."""

    def __init__(
        self,
        desktop_index: DesktopIndex,
        switch_desktop: Callable[[str], None],
        continuation_delay_ms: int = DEFAULT_CONTINUATION_DELAY_MS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.desktop_index = desktop_index
        self.continuation_delay_ms = continuation_delay_ms
        self.clock = clock or monotonic_ms
        self.history = DesktopHistory()
        self.state = NavigationState()
        self._switch_desktop = switch_desktop

    @property
    def candidate_index(self) -> int | None:
        return self.state.candidate_index

    def reset(self, current: str | None) -> None:
        """Forget all history; used when the set of desktops changes."""
        self.history.reset(current)
        self.state.clear()
        logger.debug("Reset history to [%s]", self.desktop_index.describe(current))

    def record_visit(self, identifier: str) -> None:
        """Handle the host reporting ``identifier`` as the new active desktop."""
        state = self.state
        if state.walk_in_progress and self.history[state.candidate_index] == identifier:
            logger.debug(
                "record_visit: skipping %s (walk in progress)",
                self.desktop_index.describe(identifier),
            )
            return
        self.finalize_walk()
        self.history.record(identifier)
        logger.debug(
            "record_visit: added %s (size=%d)",
            self.desktop_index.describe(identifier),
            len(self.history),
        )

    def finalize_walk(self) -> None:
        """Commit the previewed desktop as most recent and close the walk."""
        index = self.state.candidate_index
        if index is None:
            return
        identifier = self.history[index]
        self.history.record(identifier)
        self.state.candidate_index = None
        logger.debug("finalize_walk: committed %s", self.desktop_index.describe(identifier))

    def on_previous_desktop_shortcut(self, now: float | None = None) -> None:
        """Go to the previously used desktop, or further back on a quick repeat."""
        if now is None:
            now = self.clock()
        last = self.state.last_trigger_ms
        is_continuing = last is not None and (now - last) < self.continuation_delay_ms
        self.state.last_trigger_ms = now
        logger.debug("on_previous_desktop_shortcut: continuing=%s", is_continuing)
        self._walk(is_continuing)

    def on_toggle_desktop_shortcut(self, slot: int, current: str | None) -> None:
        """Go to the desktop in ``slot``; when already there, go back to the previous one."""
        target = self.desktop_index.identifier_for_slot(slot)
        if target is None:
            logger.debug("on_toggle_desktop_shortcut: desktop %s not found", slot)
            return

        self.finalize_walk()
        if target != current:
            self._navigate(target)
            return

        logger.debug("on_toggle_desktop_shortcut: already on desktop %s, switching to previous", slot)
        self._walk(False)
        self.finalize_walk()
        self.state.last_trigger_ms = None

    def _walk(self, is_continuing: bool) -> None:
        if not self.history:
            logger.debug("walk: history is empty, nothing to navigate to")
            return
        if is_continuing and self.state.walk_in_progress:
            index = self.state.candidate_index - 1
        else:
            self.finalize_walk()
            index = len(self.history) - 2
        self.state.candidate_index = max(index, 0)
        self._navigate(self.history[self.state.candidate_index])

    def _navigate(self, identifier: str) -> None:
        logger.debug("Navigating to %s", self.desktop_index.describe(identifier))
        self._switch_desktop(identifier)
