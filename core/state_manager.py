"""Desktop visit history and transient walk state."""

from __future__ import annotations

from dataclasses import dataclass


class DesktopHistory:
    """Visited desktop identifiers, least recently used first, without duplicates."""

    def __init__(self, initial: str | None = None) -> None:
        self._entries: list[str] = []
        self.reset(initial)

    def reset(self, current: str | None) -> None:
        """Start over with only the current desktop (or nothing when unknown)."""
        self._entries = [current] if current is not None else []

    def record(self, identifier: str) -> None:
        """Move ``identifier`` to the most recent position."""
        if identifier in self._entries:
            self._entries.remove(identifier)
        self._entries.append(identifier)

    @property
    def most_recent(self) -> str | None:
        return self._entries[-1] if self._entries else None

    def as_list(self) -> list[str]:
        return list(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries


@dataclass
class NavigationState:
    """Walk-back progress for the previous-desktop shortcut."""

    candidate_index: int | None = None
    last_trigger_ms: float | None = None

    @property
    def walk_in_progress(self) -> bool:
        return self.candidate_index is not None

    def clear(self) -> None:
        self.candidate_index = None
        self.last_trigger_ms = None
