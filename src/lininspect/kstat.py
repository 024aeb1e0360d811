"""
Parser for the kernel's cumulative counter file (``/proc/stat``).

The first line is the aggregate ``cpu`` line::

    cpu  user nice system idle iowait irq softirq [steal guest guest_nice]

and further down the file single-value lines such as ``ctxt 123456`` and
``processes 4242``. Lines are matched by their first token only, so
``procs_running`` never satisfies a ``processes`` lookup.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import psutil

from lininspect.errors import CounterNotFound, MalformedRecord, SourceUnavailable
from lininspect.models import CpuTimes, KernelCounters
from lininspect.procfs import stat_path

logger = logging.getLogger(__name__)

CPU_LABEL = "cpu"
CTXT_LABEL = "ctxt"
PROCESSES_LABEL = "processes"
CPU_FIELD_COUNT = 7


def _parse_count(token: str, line: str, source: str | None) -> int:
    """Parse an unsigned decimal counter."""
    if not (token.isascii() and token.isdigit()):
        raise MalformedRecord(f"Invalid counter value {token!r}", source, line)
    return int(token)


def parse_cpu_line(line: str, source: str | None = None) -> CpuTimes:
    """
    Parse the aggregate cpu line into CpuTimes.

    Fields past the seventh (steal, guest, guest_nice) are ignored.

    Raises:
        MalformedRecord: If the label is not ``cpu`` or fewer than seven
            numeric fields follow it.
    """
    tokens = line.split()
    if not tokens or tokens[0] != CPU_LABEL:
        raise MalformedRecord("First line is not the aggregate cpu line", source, line)

    fields = tokens[1 : CPU_FIELD_COUNT + 1]
    if len(fields) < CPU_FIELD_COUNT:
        raise MalformedRecord(
            f"Expected {CPU_FIELD_COUNT} cpu fields, found {len(fields)}", source, line
        )
    return CpuTimes(*(_parse_count(field, line, source) for field in fields))


def find_counter(lines: Iterable[str], label: str, source: str | None = None) -> int:
    """
    Return the value of the first line whose label token is exactly ``label``.

    Raises:
        CounterNotFound: If no line carries the label.
        MalformedRecord: If the matching line has no valid value.
    """
    for line in lines:
        tokens = line.split()
        if not tokens or tokens[0] != label:
            continue
        if len(tokens) < 2:
            raise MalformedRecord(f"'{label}' line has no value", source, line)
        return _parse_count(tokens[1], line, source)
    raise CounterNotFound(label, source)


def _read_stat(path: Path, first_line_only: bool = False) -> list[str]:
    """Read the stat file, turning open and read errors into SourceUnavailable."""
    try:
        with open(path, encoding="ascii", errors="replace") as f:
            return [f.readline()] if first_line_only else f.readlines()
    except OSError as e:
        raise SourceUnavailable(f"Unable to read {path}: {e}", str(path)) from e


def read_cpu_times(proc_root: str = psutil.PROCFS_PATH) -> CpuTimes:
    """Read the aggregate CPU times from the first line of the stat file."""
    path = stat_path(proc_root)
    lines = _read_stat(path, first_line_only=True)
    cpu = parse_cpu_line(lines[0], str(path))
    logger.debug("CPU times: %s", cpu)
    return cpu


def _read_counter(proc_root: str, label: str) -> int:
    path = stat_path(proc_root)
    value = find_counter(_read_stat(path), label, str(path))
    logger.debug("%s: %d", label, value)
    return value


def read_context_switches(proc_root: str = psutil.PROCFS_PATH) -> int:
    """Read the number of context switches since boot."""
    return _read_counter(proc_root, CTXT_LABEL)


def read_processes_created(proc_root: str = psutil.PROCFS_PATH) -> int:
    """Read the number of processes created since boot."""
    return _read_counter(proc_root, PROCESSES_LABEL)


def read_kernel_counters(proc_root: str = psutil.PROCFS_PATH) -> KernelCounters:
    """Read both scheduler counters in a single pass over the stat file."""
    path = stat_path(proc_root)
    wanted = (CTXT_LABEL, PROCESSES_LABEL)
    found: dict[str, int] = {}

    for line in _read_stat(path):
        tokens = line.split()
        if not tokens or tokens[0] not in wanted or tokens[0] in found:
            continue
        found[tokens[0]] = find_counter([line], tokens[0], str(path))
        if len(found) == len(wanted):
            break

    for label in wanted:
        if label not in found:
            raise CounterNotFound(label, str(path))

    counters = KernelCounters(
        context_switches=found[CTXT_LABEL],
        processes_created=found[PROCESSES_LABEL],
    )
    logger.debug("Kernel counters: %s", counters)
    return counters
