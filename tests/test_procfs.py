"""Tests for procfs helpers."""

from pathlib import Path

import pytest

from lininspect.errors import SourceUnavailable
from lininspect.procfs import list_proc_entries, stat_path


def test_stat_path():
    """Test the stat file lives directly under the procfs root."""
    assert stat_path("/proc") == Path("/proc/stat")
    assert stat_path("/host/proc") == Path("/host/proc/stat")


def test_list_proc_entries(tmp_path):
    """Test all entries are returned, pids first in numeric order."""
    for pid in ("10", "2"):
        (tmp_path / pid).mkdir()
    for name in ("stat", "meminfo", "self"):
        (tmp_path / name).touch()

    assert list_proc_entries(str(tmp_path)) == ["2", "10", "meminfo", "self", "stat"]


def test_list_proc_entries_returns_new_list(tmp_path):
    """Test each call returns its own list."""
    (tmp_path / "1").mkdir()

    first = list_proc_entries(str(tmp_path))
    first.append("extra")

    assert list_proc_entries(str(tmp_path)) == ["1"]


def test_list_proc_entries_empty(tmp_path):
    """Test an empty directory yields an empty list."""
    assert list_proc_entries(str(tmp_path)) == []


def test_list_proc_entries_missing(tmp_path):
    """Test a missing directory raises SourceUnavailable."""
    with pytest.raises(SourceUnavailable):
        list_proc_entries(str(tmp_path / "nonexistent"))
