"""lininspect - Kernel and memory telemetry report."""

import logging
from collections.abc import Callable
from typing import TypeVar

import click
import psutil
from rich.columns import Columns
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lininspect.errors import InspectError
from lininspect.kstat import read_context_switches, read_cpu_times, read_processes_created
from lininspect.memory import read_memory_stats, total_memory, used_memory
from lininspect.models import CpuTimes, InspectOptions
from lininspect.procfs import list_proc_entries
from lininspect.version import read_kernel_release

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
logger = logging.getLogger(__name__)

T = TypeVar("T")

UNAVAILABLE = "[red]unavailable[/red]"


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


class Report:
    """
    Sequences the telemetry readers and prints their results.

    Each item is read independently. A failed item is logged and printed as
    unavailable, the remaining items still print, and the run's exit code
    becomes 1.
    """

    def __init__(self, options: InspectOptions, out: Console | None = None) -> None:
        """
        Initialize the Report.

        Args:
            options: Flags for this run.
            out: Console to print to. Defaults to stdout.
        """
        self._options = options
        self._out = out or console
        self._failed = False

    @property
    def failed(self) -> bool:
        """Whether any telemetry item could not be read."""
        return self._failed

    def _fetch(self, what: str, reader: Callable[..., T], *args) -> T | None:
        """Call a reader, logging and recording an InspectError as a failure."""
        try:
            return reader(*args)
        except InspectError as e:
            logger.error("Could not read %s: %s", what, e)
            self._failed = True
            return None

    def print_version(self) -> None:
        """Print the kernel release line."""
        release = self._fetch("kernel release", read_kernel_release)
        value = UNAVAILABLE if release is None else escape(release)
        self._out.print(f"[cyan]Linux Version: {value}[/cyan]")

    def print_cpu_times(self) -> None:
        """Print the CPU time block; all seven fields when verbose."""
        cpu = self._fetch("cpu times", read_cpu_times, self._options.proc_root)
        self._out.print("CPU Times ================")
        if cpu is None:
            self._out.print(f"    {UNAVAILABLE}")
            return
        for label, value in self._cpu_rows(cpu):
            self._out.print(f"    {label + ':':<8}{value}")

    def _cpu_rows(self, cpu: CpuTimes) -> list[tuple[str, int]]:
        """Return the (label, value) rows to print for the CPU block."""
        if not self._options.verbose:
            return [("User", cpu.user), ("Kernel", cpu.system), ("Idle", cpu.idle)]
        return [
            ("User", cpu.user),
            ("Nice", cpu.nice),
            ("Kernel", cpu.system),
            ("Idle", cpu.idle),
            ("IOWait", cpu.iowait),
            ("IRQ", cpu.irq),
            ("SoftIRQ", cpu.softirq),
        ]

    def print_counters(self) -> None:
        """Print the context switch and process creation counters."""
        proc_root = self._options.proc_root
        ctxt = self._fetch("context switches", read_context_switches, proc_root)
        self._out.print(f"Context Switches: {UNAVAILABLE if ctxt is None else ctxt}")
        procs = self._fetch("process count", read_processes_created, proc_root)
        self._out.print(f"Processes Since Boot: {UNAVAILABLE if procs is None else procs}")

    def print_memory(self) -> None:
        """Print memory in use out of the total, honouring swap mode."""
        stats = self._fetch("memory statistics", read_memory_stats)
        if stats is None:
            self._out.print(f"Memory used: {UNAVAILABLE}")
            return

        include_swap = self._options.include_swap
        used = used_memory(stats, include_swap)
        total = total_memory(stats, include_swap)
        suffix = " (including swap space)" if include_swap else ""
        self._out.print(f"Memory used: {used} bytes out of {total}{suffix}")

    def print_proc_listing(self) -> None:
        """Print the entries of the procfs root in columns."""
        names = self._fetch("procfs listing", list_proc_entries, self._options.proc_root)
        self._out.print("Proc Entries ================")
        if names is None:
            self._out.print(f"    {UNAVAILABLE}")
            return
        self._out.print(Columns([escape(name) for name in names], padding=(0, 2)))

    def run(self, list_proc: bool = False) -> int:
        """Print every telemetry item and return the process exit code."""
        self.print_version()
        self.print_cpu_times()
        self.print_counters()
        self.print_memory()
        if list_proc:
            self.print_proc_listing()
        return 1 if self._failed else 0


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enables printing of debug information.")
@click.option(
    "-s",
    "--swap",
    "include_swap",
    is_flag=True,
    help="Includes any available swap space in showing the memory information.",
)
@click.option(
    "-l", "--list-proc", is_flag=True, help="Also lists the entries of the procfs root."
)
@click.option(
    "--proc-root",
    default=psutil.PROCFS_PATH,
    show_default=True,
    envvar="LININSPECT_PROC_ROOT",
    help="Mount point of procfs.",
)
def cli(verbose: bool, include_swap: bool, list_proc: bool, proc_root: str) -> None:
    """Show kernel version, CPU times, scheduler counters and memory use."""
    configure_logging(verbose)

    if not psutil.LINUX:
        err_console.print(
            "[red]Platform not supported. Please use a linux based OS to run this.[/red]"
        )
        raise SystemExit(1)

    options = InspectOptions(verbose=verbose, include_swap=include_swap, proc_root=proc_root)
    logger.debug("Options: %s", options)
    raise SystemExit(Report(options).run(list_proc=list_proc))


def main() -> None:
    """Entry point for the lininspect command."""
    cli()


if __name__ == "__main__":
    main()
