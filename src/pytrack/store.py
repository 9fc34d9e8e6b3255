"""Load and persist the track file.

The file is a TOML document mapping each tag to an array of tables::

    [[project]]
    Start = "2024-03-01 09:00:00"
    Stop = "2024-03-01 11:30:00"
    Notes = ["reviewed PR"]

The whole document is rewritten on every save.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import TypeAdapter, ValidationError

from pytrack.exceptions import TrackStoreError
from pytrack.models.entry import TrackDB, TrackEntry

_logger = logging.getLogger(__name__)

_DB_ADAPTER: TypeAdapter[TrackDB] = TypeAdapter(dict[str, list[TrackEntry]])


def loads_db(text: str) -> TrackDB:
    """Decode a TOML document into a :data:`TrackDB`.

    Raises
    ------
    tomllib.TOMLDecodeError
        Malformed TOML.
    pydantic.ValidationError
        Well-formed TOML that does not describe tags and entries.
    """
    document = tomllib.loads(text)
    return _DB_ADAPTER.validate_python(document)


def dumps_db(db: TrackDB) -> str:
    """Encode *db* as a TOML document using the persisted field names."""
    document: dict[str, Any] = {tag: [entry.to_document() for entry in entries] for tag, entries in db.items()}
    return tomli_w.dumps(document)


def read_db(path: Path) -> TrackDB:
    """Load the store from *path*.

    A missing file is created empty and yields an empty store.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _logger.debug("No track file at %s, creating an empty one", path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        except OSError as exc:
            raise TrackStoreError(f"Cannot create {path}: {exc}", path=path) from exc
        return {}
    except UnicodeDecodeError as exc:
        raise TrackStoreError(f"Cannot decode {path}: {exc}", path=path) from exc
    except OSError as exc:
        raise TrackStoreError(f"Cannot read {path}: {exc}", path=path) from exc

    try:
        db = loads_db(text)
    except tomllib.TOMLDecodeError as exc:
        raise TrackStoreError(f"Cannot decode {path}: {exc}", path=path) from exc
    except ValidationError as exc:
        raise TrackStoreError(f"Invalid track data in {path}: {exc}", path=path) from exc

    _logger.debug("Loaded %d tag(s) from %s", len(db), path)
    return db


def write_db(path: Path, db: TrackDB) -> None:
    """Overwrite *path* with the full serialized store.

    The document is encoded before the file is opened, so text that is not
    valid UTF-8 (e.g. a tag given as undecodable command line bytes) leaves
    the existing file untouched.
    """
    payload = dumps_db(db)
    try:
        data = payload.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise TrackStoreError(f"Cannot encode track data for {path}: {exc}", path=path) from exc
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise TrackStoreError(f"Cannot write {path}: {exc}", path=path) from exc
    _logger.debug("Saved %d tag(s) to %s", len(db), path)
