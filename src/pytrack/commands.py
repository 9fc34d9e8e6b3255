"""Command handlers operating on an in-memory :data:`TrackDB`.

Handlers mutate *db* in place (the tail entry of a tag is replaced by an
updated copy) and report expected conditions such as an unknown tag on
standard output. None of them raise for those conditions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from pytrack._constants import (
    MSG_ALREADY_STARTED,
    MSG_ALREADY_STOPPED,
    MSG_NOT_TRACKING,
    MSG_UNKNOWN_TAG,
    SHOW_ALL_TAG,
    TIMESTAMP_FORMAT,
)
from pytrack.models import Command, TrackDB, TrackEntry

_logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def now_stamp(clock: Clock = datetime.now) -> str:
    """Format the current local time for storage."""
    return clock().strftime(TIMESTAMP_FORMAT)


def do_start(tag: str, db: TrackDB, *, clock: Clock = datetime.now) -> None:
    entries = db.get(tag, [])
    if entries and entries[-1].is_open:
        print(MSG_ALREADY_STARTED.format(entries[-1].start))
        return
    db[tag] = [*entries, TrackEntry(start=now_stamp(clock))]
    _logger.debug("Started %r (%d entries)", tag, len(db[tag]))


def do_stop(tag: str, db: TrackDB, *, clock: Clock = datetime.now) -> None:
    entries = db.get(tag)
    if not entries:
        print(MSG_UNKNOWN_TAG.format(tag))
        return
    last = entries[-1]
    if last.is_stopped:
        print(MSG_ALREADY_STOPPED.format(last.stop))
        return
    # A blank entry (no start) must never gain a stop time.
    if not last.is_open:
        print(MSG_NOT_TRACKING)
        return
    entries[-1] = last.model_copy(update={"stop": now_stamp(clock)})
    _logger.debug("Stopped %r", tag)


def do_note(tag: str, note: str, db: TrackDB) -> None:
    entries = db.get(tag)
    if not entries:
        print(MSG_UNKNOWN_TAG.format(tag))
        return
    last = entries[-1]
    # Notes only attach to the running entry, never to a finished one.
    if last.is_stopped:
        print(MSG_NOT_TRACKING)
        return
    entries[-1] = last.model_copy(update={"notes": [*last.notes, note]})


def do_show(tag: str, db: TrackDB) -> None:
    """Print *tag* and its entries, or every tag when *tag* is ``all``."""
    if tag == SHOW_ALL_TAG:
        for known in list(db):
            do_show(known, db)
        return

    print(tag)
    for entry in db.get(tag, []):
        print(f"\t{entry.start} - {entry.stop}")
        for note in entry.notes:
            print(f"\t\t{note}")


def dispatch(
    command: Command,
    tag: str,
    note: str,
    db: TrackDB,
    *,
    clock: Clock = datetime.now,
) -> None:
    """Run the handler for *command* against *db*."""
    _logger.debug("Dispatching %s for tag %r", command, tag)
    if command is Command.START:
        do_start(tag, db, clock=clock)
    elif command is Command.STOP:
        do_stop(tag, db, clock=clock)
    elif command is Command.NOTE:
        do_note(tag, note, db)
    elif command is Command.SHOW:
        do_show(tag, db)
