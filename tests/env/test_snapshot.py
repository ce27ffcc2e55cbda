"""Tests for environment snapshots and NAME=VALUE assignments."""

import os

import pytest

from saferenv.env import (
    EnvironmentSnapshot,
    is_assignment,
    parse_assignment,
    split_assignments,
)
from saferenv.exceptions import UsageError


@pytest.mark.unit
class TestAssignments:
    @pytest.mark.parametrize(
        "arg,expected",
        [("A=1", True), ("A=", True), ("A=b=c", True), ("=x", False), ("ls", False)],
    )
    def test_is_assignment(self, arg, expected):
        assert is_assignment(arg) is expected

    def test_parse_keeps_later_equals_in_value(self):
        assert parse_assignment("URL=a=b") == ("URL", "a=b")

    def test_parse_rejects_non_assignment(self):
        with pytest.raises(UsageError):
            parse_assignment("ls")

    def test_split_leading_assignments(self):
        assignments, command = split_assignments(["A=1", "B=2", "make", "X=3"])
        assert assignments == [("A", "1"), ("B", "2")]
        assert command == ["make", "X=3"]

    def test_split_no_command(self):
        assert split_assignments(["A=1"]) == ([("A", "1")], [])

    def test_split_empty(self):
        assert split_assignments([]) == ([], [])


@pytest.mark.unit
class TestEnvironmentSnapshot:
    def test_capture_copies_mapping(self):
        source = {"A": "1"}
        snap = EnvironmentSnapshot.capture(source)
        source["B"] = "2"
        assert dict(snap) == {"A": "1"}

    def test_capture_process_environment(self):
        snap = EnvironmentSnapshot.capture()
        assert set(snap) == set(os.environ)

    def test_empty(self):
        assert len(EnvironmentSnapshot.empty()) == 0

    def test_read_only(self):
        snap = EnvironmentSnapshot({"A": "1"})
        with pytest.raises(TypeError):
            snap["A"] = "2"  # type: ignore[index]

    def test_with_assignments_returns_new_snapshot(self):
        snap = EnvironmentSnapshot({"A": "1"})
        updated = snap.with_assignments([("A", "2"), ("B", "3")])
        assert dict(snap) == {"A": "1"}
        assert dict(updated) == {"A": "2", "B": "3"}

    def test_preserves_order(self):
        snap = EnvironmentSnapshot({"Z": "1", "A": "2", "M": "3"})
        assert list(snap) == ["Z", "A", "M"]

    def test_repr_hides_values(self, secret_value):
        snap = EnvironmentSnapshot({"API_KEY": secret_value})
        assert secret_value not in repr(snap)
        assert "API_KEY" in repr(snap)
