"""Typed models for pytrack."""

from pytrack.models.command import Command
from pytrack.models.entry import TrackDB, TrackEntry

__all__ = [
    "Command",
    "TrackDB",
    "TrackEntry",
]
