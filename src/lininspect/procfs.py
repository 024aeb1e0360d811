"""procfs locations and directory listing."""

import logging
import os
from pathlib import Path

import psutil

from lininspect.errors import SourceUnavailable

logger = logging.getLogger(__name__)


def stat_path(proc_root: str = psutil.PROCFS_PATH) -> Path:
    """Return the path of the kernel counter source under ``proc_root``."""
    return Path(proc_root) / "stat"


def list_proc_entries(proc_root: str = psutil.PROCFS_PATH) -> list[str]:
    """
    List the entries of the procfs root.

    Args:
        proc_root: Mount point of procfs. Default ``/proc``.

    Returns:
        Entry names, sorted with numeric (pid) entries first in pid order.

    Raises:
        SourceUnavailable: If the directory cannot be listed.
    """
    try:
        with os.scandir(proc_root) as it:
            names = [entry.name for entry in it]
    except OSError as e:
        raise SourceUnavailable(f"Unable to open '{proc_root}' directory: {e}", proc_root) from e

    names.sort(key=lambda name: (not name.isdigit(), int(name) if name.isdigit() else 0, name))
    for name in names:
        logger.debug("Received %s", name)
    return names
