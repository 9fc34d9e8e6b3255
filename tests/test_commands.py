"""Tests for the start/stop/note/show handlers."""

from __future__ import annotations

import pytest

from pytrack.commands import Clock, dispatch, do_note, do_show, do_start, do_stop, now_stamp
from pytrack.models import Command, TrackDB, TrackEntry


def _open_db() -> TrackDB:
    return {"foo": [TrackEntry(start="2026-01-01 08:00:00", notes=["earlier"])]}


def _stopped_db() -> TrackDB:
    return {"foo": [TrackEntry(start="2026-01-01 08:00:00", stop="2026-01-01 08:30:00")]}


def test_now_stamp_format(clock: Clock) -> None:
    assert now_stamp(clock) == "2026-01-01 09:00:00"


class TestStart:
    def test_new_tag_gets_one_open_entry(self, clock: Clock) -> None:
        db: TrackDB = {}
        do_start("foo", db, clock=clock)
        assert db == {"foo": [TrackEntry(start="2026-01-01 09:00:00")]}

    def test_already_started_is_noop(self, clock: Clock, capsys: pytest.CaptureFixture[str]) -> None:
        db = _open_db()
        do_start("foo", db, clock=clock)
        assert db == _open_db()
        assert capsys.readouterr().out == "Already started at 2026-01-01 08:00:00\n"

    def test_after_stop_appends_entry(self, clock: Clock) -> None:
        db = _stopped_db()
        do_start("foo", db, clock=clock)
        assert len(db["foo"]) == 2
        assert db["foo"][0] == _stopped_db()["foo"][0]
        assert db["foo"][1].is_open

    def test_other_tags_untouched(self, clock: Clock) -> None:
        db = _open_db()
        do_start("bar", db, clock=clock)
        assert db["foo"] == _open_db()["foo"]
        assert list(db) == ["foo", "bar"]


class TestStop:
    def test_unknown_tag(self, clock: Clock, capsys: pytest.CaptureFixture[str]) -> None:
        db: TrackDB = {}
        do_stop("foo", db, clock=clock)
        assert db == {}
        assert capsys.readouterr().out == 'Unknown tag "foo"\n'

    def test_stop_sets_stop_time_and_keeps_notes(self, clock: Clock) -> None:
        db = _open_db()
        do_stop("foo", db, clock=clock)
        entry = db["foo"][-1]
        assert entry.stop == "2026-01-01 09:00:00"
        assert entry.notes == ["earlier"]

    def test_second_stop_is_noop(self, clock: Clock, capsys: pytest.CaptureFixture[str]) -> None:
        db = _open_db()
        do_stop("foo", db, clock=clock)
        capsys.readouterr()
        do_stop("foo", db, clock=clock)
        assert db["foo"][-1].stop == "2026-01-01 09:00:00"
        assert capsys.readouterr().out == "Already stopped at 2026-01-01 09:00:00\n"


class TestNote:
    def test_unknown_tag_creates_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        db: TrackDB = {}
        do_note("foo", "hello world", db)
        assert db == {}
        assert capsys.readouterr().out == 'Unknown tag "foo"\n'

    def test_notes_append_in_call_order(self) -> None:
        db = _open_db()
        do_note("foo", "one", db)
        do_note("foo", "two", db)
        assert db["foo"][-1].notes == ["earlier", "one", "two"]

    def test_stopped_entry_rejects_note(self, capsys: pytest.CaptureFixture[str]) -> None:
        db = _stopped_db()
        do_note("foo", "late", db)
        assert db == _stopped_db()
        assert capsys.readouterr().out == "Not currently tracking anything\n"


class TestShow:
    def test_single_tag(self, capsys: pytest.CaptureFixture[str]) -> None:
        db = {
            "foo": [
                TrackEntry(start="2026-01-01 08:00:00", stop="2026-01-01 08:30:00", notes=["a", "b"]),
                TrackEntry(start="2026-01-01 09:00:00"),
            ]
        }
        do_show("foo", db)
        assert capsys.readouterr().out == (
            "foo\n"
            "\t2026-01-01 08:00:00 - 2026-01-01 08:30:00\n"
            "\t\ta\n"
            "\t\tb\n"
            "\t2026-01-01 09:00:00 - \n"
        )

    def test_unknown_tag_prints_only_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        do_show("nope", {})
        assert capsys.readouterr().out == "nope\n"

    def test_all_prints_one_block_per_tag(self, capsys: pytest.CaptureFixture[str]) -> None:
        db = {"foo": _open_db()["foo"], "bar": _stopped_db()["foo"]}
        do_show("all", db)
        lines = capsys.readouterr().out.splitlines()
        headers = [line for line in lines if not line.startswith("\t")]
        assert sorted(headers) == ["bar", "foo"]

    def test_all_on_empty_store_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        do_show("all", {})
        assert capsys.readouterr().out == ""


def test_dispatch_routes_commands(clock: Clock) -> None:
    db: TrackDB = {}
    dispatch(Command.START, "foo", "", db, clock=clock)
    dispatch(Command.NOTE, "foo", "hi", db, clock=clock)
    dispatch(Command.STOP, "foo", "", db, clock=clock)
    assert db["foo"] == [TrackEntry(start="2026-01-01 09:00:00", stop="2026-01-01 09:01:00", notes=["hi"])]


def test_stop_on_blank_entry_sets_nothing(clock: Clock, capsys: pytest.CaptureFixture[str]) -> None:
    db: TrackDB = {"foo": [TrackEntry()]}
    do_stop("foo", db, clock=clock)
    assert db == {"foo": [TrackEntry()]}
    assert capsys.readouterr().out == "Not currently tracking anything\n"
