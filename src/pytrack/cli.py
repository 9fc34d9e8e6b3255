"""Command line entry point.

Usage::

    track [start|stop|note|show] [tag] [note words...]

With no arguments this is ``track show all``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from typing import NamedTuple

from pytrack._constants import ERR_INVALID_COMMAND, ERR_MISSING_NOTE, ERR_MISSING_TAG, SHOW_ALL_TAG
from pytrack.commands import Clock, dispatch
from pytrack.config import TrackConfig
from pytrack.exceptions import TrackArgumentError, TrackError
from pytrack.models import Command
from pytrack.store import read_db, write_db

_logger = logging.getLogger(__name__)


class ParsedArgs(NamedTuple):
    command: Command
    tag: str
    note: str = ""


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Map ``argv`` (program name first) to a command, tag and note.

    Raises
    ------
    TrackArgumentError
        Unknown command, or a required tag/note is missing.
    """
    if len(argv) <= 1:
        return ParsedArgs(Command.SHOW, SHOW_ALL_TAG)

    try:
        command = Command(argv[1])
    except ValueError:
        raise TrackArgumentError(ERR_INVALID_COMMAND) from None

    if len(argv) < 3:
        if command is Command.SHOW:
            return ParsedArgs(command, SHOW_ALL_TAG)
        raise TrackArgumentError(ERR_MISSING_TAG)

    tag = argv[2]
    note = ""
    if command is Command.NOTE:
        if len(argv) < 4:
            raise TrackArgumentError(ERR_MISSING_NOTE)
        note = " ".join(argv[3:])
    return ParsedArgs(command, tag, note)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)


def main(
    argv: Sequence[str] | None = None,
    *,
    config: TrackConfig | None = None,
    clock: Clock = datetime.now,
) -> int:
    """Run one command and return the process exit status."""
    if argv is None:
        argv = sys.argv
    try:
        args = parse_args(argv)
        if config is None:
            config = TrackConfig.from_env()
        _configure_logging(config.debug)

        db = read_db(config.db_path)
        dispatch(args.command, args.tag, args.note, db, clock=clock)
        if args.command.persists:
            write_db(config.db_path, db)
    except TrackError as exc:
        _logger.debug("Fatal error", exc_info=True)
        print(exc)
        return 1
    return 0


def run() -> None:
    sys.exit(main())
