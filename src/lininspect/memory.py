"""Memory statistics for lininspect."""

import logging

import psutil

from lininspect.errors import SourceUnavailable
from lininspect.models import MemoryStats

logger = logging.getLogger(__name__)

# psutil scales sysinfo and meminfo figures to bytes before returning them.
PSUTIL_UNIT = 1


def read_memory_stats() -> MemoryStats:
    """
    Query the system memory record.

    psutil already reports sizes in bytes, so the record carries
    ``PSUTIL_UNIT``.

    Raises:
        SourceUnavailable: If the memory query fails.
    """
    try:
        mem = psutil.virtual_memory()
        swap = psutil.swap_memory()
    except (OSError, RuntimeError) as e:
        raise SourceUnavailable(f"Could not query memory statistics: {e}", "sysinfo") from e

    return MemoryStats(
        total_ram=mem.total,
        free_ram=mem.free,
        total_swap=swap.total,
        free_swap=swap.free,
        unit=PSUTIL_UNIT,
    )


def used_memory(stats: MemoryStats, include_swap: bool = False) -> int:
    """Return memory in use, in bytes, optionally counting used swap."""
    used = stats.total_ram - stats.free_ram
    if include_swap:
        used += stats.total_swap - stats.free_swap
    logger.debug("Used : %d", used)
    logger.debug("Mem Unit : %d", stats.unit)
    return used * stats.unit


def total_memory(stats: MemoryStats, include_swap: bool = False) -> int:
    """
    Return total memory, optionally including swap.

    The result is in the record's native units and is not multiplied by
    ``stats.unit``.
    """
    if include_swap:
        return stats.total_ram + stats.total_swap
    return stats.total_ram
