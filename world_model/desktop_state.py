"""Desktop snapshot schema."""

from __future__ import annotations

from pydantic import BaseModel


class DesktopInfo(BaseModel):
    """One virtual desktop as reported by the host."""

    identifier: str
    slot_hint: int | None = None
    display_name: str | None = None
