"""Custom exception hierarchy for pytrack."""

from __future__ import annotations

from pathlib import Path


class TrackError(Exception):
    """Base exception for all pytrack errors.

    Every subclass is fatal: the CLI prints the message and exits with
    status 1.
    """


class TrackArgumentError(TrackError):
    """Command line could not be mapped to a command."""


class TrackConfigError(TrackError):
    """Invalid configuration or unresolvable home directory."""


class TrackStoreError(TrackError):
    """Reading, decoding or writing the backing file failed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
    ) -> None:
        self.path = path
        super().__init__(message)
