"""pytrack - per-project start/stop time tracking from the command line."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytrack")
except PackageNotFoundError:
    __version__ = "0+local"
from pytrack.cli import main, parse_args
from pytrack.commands import dispatch, do_note, do_show, do_start, do_stop
from pytrack.config import TrackConfig
from pytrack.exceptions import (
    TrackArgumentError,
    TrackConfigError,
    TrackError,
    TrackStoreError,
)
from pytrack.models import Command, TrackDB, TrackEntry
from pytrack.store import read_db, write_db

__all__ = [
    "__version__",
    "Command",
    "TrackArgumentError",
    "TrackConfig",
    "TrackConfigError",
    "TrackDB",
    "TrackEntry",
    "TrackError",
    "TrackStoreError",
    "dispatch",
    "do_note",
    "do_show",
    "do_start",
    "do_stop",
    "main",
    "parse_args",
    "read_db",
    "write_db",
]
