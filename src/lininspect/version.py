"""Kernel version lookup."""

import logging
import os

from lininspect.errors import QueryFailed

logger = logging.getLogger(__name__)


def read_kernel_release() -> str:
    """
    Return the running kernel's release string, e.g. ``6.8.0-45-generic``.

    Raises:
        QueryFailed: If uname fails or reports an empty release.
    """
    try:
        release = os.uname().release
    except OSError as e:
        raise QueryFailed(f"Could not perform uname: {e}", "uname") from e

    if not release:
        raise QueryFailed("uname returned an empty release", "uname")
    logger.debug("Kernel release: %s", release)
    return release
