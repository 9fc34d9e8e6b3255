"""Runtime configuration for pytrack."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pytrack._constants import DB_FILENAME
from pytrack.exceptions import TrackConfigError


_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch such as ``TRACK_DEBUG=1``; unrecognised values keep *default*."""
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def default_db_path() -> Path:
    """Return ``~/.track.toml`` for the current user.

    Raises
    ------
    TrackConfigError
        If the home directory cannot be resolved.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise TrackConfigError(f"Cannot resolve home directory: {exc}") from exc
    return home / DB_FILENAME


@dataclasses.dataclass(frozen=True)
class TrackConfig:
    """CLI configuration.

    Parameters
    ----------
    db_path : Path
        Location of the TOML file holding every tag and its entries.
    debug : bool
        Emit debug logging on stderr.
    """

    db_path: Path
    debug: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> TrackConfig:
        """Create configuration from environment variables.

        Reads ``TRACK_DB`` (path of the data file) and ``TRACK_DEBUG``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        if "db_path" not in overrides:
            db_env = env.get("TRACK_DB")
            if db_env:
                config_kwargs["db_path"] = Path(db_env).expanduser()
            else:
                config_kwargs["db_path"] = default_db_path()

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_flag("TRACK_DEBUG")

        config_kwargs.update(overrides)
        config_kwargs["db_path"] = Path(config_kwargs["db_path"])

        return cls(**config_kwargs)
