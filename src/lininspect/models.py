"""Data models for lininspect."""

from dataclasses import astuple, dataclass

import psutil


@dataclass(slots=True, frozen=True)
class CpuTimes:
    """Cumulative CPU ticks since boot from the aggregate cpu line."""

    user: int
    nice: int
    system: int
    idle: int
    iowait: int
    irq: int
    softirq: int

    def as_tuple(self) -> tuple[int, ...]:
        """Return the seven counters in kernel field order."""
        return astuple(self)


@dataclass(slots=True, frozen=True)
class KernelCounters:
    """Cumulative scheduler counters since boot."""

    context_switches: int
    processes_created: int


@dataclass(slots=True, frozen=True)
class MemoryStats:
    """Raw memory record; sizes are in multiples of ``unit`` bytes."""

    total_ram: int
    free_ram: int
    total_swap: int
    free_swap: int
    unit: int


@dataclass(slots=True, frozen=True)
class InspectOptions:
    """Options for a single lininspect run."""

    verbose: bool = False
    include_swap: bool = False
    proc_root: str = psutil.PROCFS_PATH
