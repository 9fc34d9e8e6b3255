"""Shared constants for pytrack."""

from __future__ import annotations

DB_FILENAME = ".track.toml"

# Local wall-clock time, second resolution. Lexical order == chronological order.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

SHOW_ALL_TAG = "all"

# ------------------------------------------------------------------
# User-facing messages
# ------------------------------------------------------------------

MSG_ALREADY_STARTED = "Already started at {}"
MSG_ALREADY_STOPPED = "Already stopped at {}"
MSG_UNKNOWN_TAG = 'Unknown tag "{}"'
MSG_NOT_TRACKING = "Not currently tracking anything"

ERR_MISSING_NOTE = "Error: Missing note"
ERR_MISSING_TAG = "Error: Missing tag"
ERR_INVALID_COMMAND = 'Error: Invalid command (expected one of "start", "stop", "show", "note")'
