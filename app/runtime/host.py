"""Runtime info service backed by the local host and current process."""

from __future__ import annotations

import logging
import os
import platform
import socket
import sys
from pathlib import Path

from .interfaces import RuntimeInfoPort

try:
    import resource
except ImportError:  # Windows
    resource = None

logger = logging.getLogger(__name__)

_PROC_STATM_PATH = Path("/proc/self/statm")


class HostRuntimeInfoService(RuntimeInfoPort):
    """Runtime info service reading the local host and process statistics."""

    def __init__(self, statm_path: Path = _PROC_STATM_PATH):
        """Initialize runtime info service.

        Args:
            statm_path: procfs memory status file for the current process.
        """

        self._statm_path = statm_path

    def runtime_machine_name(self) -> str:
        """Return the host network name.

        Returns:
            str: Host name from the socket layer, or the platform node name.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return socket.gethostname() or platform.node()

    def runtime_os_version(self) -> str:
        """Return the operating system descriptor.

        Returns:
            str: Platform string with system name and release.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return platform.platform()

    def runtime_processor_count(self) -> int:
        """Return the logical processor count.

        Returns:
            int: Logical core count, at least 1 when the host reports none.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return os.cpu_count() or 1

    def runtime_working_set_bytes(self) -> int:
        """Return resident set size of the current process.

        Reads the second field of procfs `statm` (resident pages) when the file
        exists. Otherwise falls back to the peak resident size reported by
        `getrusage`, which is the closest portable approximation.

        Returns:
            int: Resident memory in bytes, or 0 when no source is available.
        """

        try:
            statm_fields = self._statm_path.read_text(encoding="ascii").split()
            return int(statm_fields[1]) * os.sysconf("SC_PAGE_SIZE")
        except (OSError, IndexError, ValueError) as error:
            logger.debug("procfs working set unavailable: %s", error)

        if resource is None:
            return 0
        peak_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # ru_maxrss is kilobytes on Linux and bytes on macOS.
        if sys.platform == "darwin":
            return int(peak_rss)
        return int(peak_rss) * 1024
