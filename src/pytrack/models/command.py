"""CLI command enum."""

from __future__ import annotations

import enum


class Command(enum.StrEnum):
    START = "start"
    STOP = "stop"
    NOTE = "note"
    SHOW = "show"

    @property
    def persists(self) -> bool:
        """Whether the store is written back after this command runs."""
        return self is not Command.SHOW
