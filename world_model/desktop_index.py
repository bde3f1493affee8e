"""Registry mapping desktop slot numbers to host desktop identifiers."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from world_model.desktop_state import DesktopInfo

logger = logging.getLogger("lud.desktop_index")


class DesktopIndex:
    """Bidirectional slot <-> identifier lookup, rebuilt on every desktop-set change."""

    def __init__(self) -> None:
        self._by_slot: dict[int, str] = {}
        self._by_identifier: dict[str, int] = {}

    def rebuild(self, desktops: Iterable[DesktopInfo]) -> None:
        """Replace both mappings from a snapshot of the host desktop list.

        Desktops without a slot hint get their 1-based list position. When two
        desktops claim the same slot the later one wins the slot lookup.
        """
        self._by_slot = {}
        self._by_identifier = {}
        for position, desktop in enumerate(desktops):
            slot = desktop.slot_hint or position + 1
            self._by_slot[slot] = desktop.identifier
            self._by_identifier[desktop.identifier] = slot
            logger.debug("Added desktop %s %s", slot, desktop.identifier)
        logger.debug("Built desktop map for %d desktops", len(self._by_identifier))

    def identifier_for_slot(self, slot: int) -> str | None:
        return self._by_slot.get(slot)

    def slot_for_identifier(self, identifier: str) -> int | None:
        return self._by_identifier.get(identifier)

    def describe(self, identifier: str | None) -> str:
        """Human-readable label used in diagnostics."""
        slot = self._by_identifier.get(identifier) if identifier is not None else None
        if slot:
            return f"desktop {slot}"
        return f"desktop {identifier}"

    def slots(self) -> list[int]:
        return sorted(self._by_slot)

    def __len__(self) -> int:
        return len(self._by_slot)
