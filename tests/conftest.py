"""Shared fixtures for lininspect tests."""

import pytest

SAMPLE_STAT = """\
cpu  10 20 30 40 50 60 70 0 0 0
cpu0 5 10 15 20 25 30 35 0 0 0
cpu1 5 10 15 20 25 30 35 0 0 0
intr 114930548 113199788 3 0 5 263 0 4 0 0
ctxt 123456
btime 1700000000
processes 42
procs_running 3
procs_blocked 0
softirq 2354 0 1046 0 0 0 0 0 0 0 1308
"""


@pytest.fixture
def make_proc(tmp_path):
    """Return a factory that writes a fake procfs root with the given stat text."""

    def _make(stat_text: str = SAMPLE_STAT) -> str:
        root = tmp_path / "proc"
        root.mkdir(exist_ok=True)
        (root / "stat").write_text(stat_text, encoding="ascii")
        return str(root)

    return _make
