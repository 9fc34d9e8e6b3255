"""Time entry model: one start/stop interval plus its notes."""

from __future__ import annotations

from pydantic import Field, model_validator

from pytrack.models._base import TrackBaseModel


class TrackEntry(TrackBaseModel):
    """A single tracked interval for a tag.

    Empty strings mean "not set"; they are persisted as ``""`` rather
    than omitted so older files stay readable.
    """

    start: str = ""
    stop: str = ""
    notes: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _stop_requires_start(self) -> TrackEntry:
        if self.stop and not self.start:
            raise ValueError("entry has a stop time but no start time")
        return self

    @property
    def is_open(self) -> bool:
        """Timer running: started and not yet stopped."""
        return bool(self.start) and not self.stop

    @property
    def is_stopped(self) -> bool:
        return bool(self.stop)


TrackDB = dict[str, list[TrackEntry]]
"""Tag name -> entries, oldest first. The last entry is the current one."""
