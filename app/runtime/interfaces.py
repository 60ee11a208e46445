"""Typed interfaces for host and process runtime inspection.

All access to machine, operating system and process statistics must remain in
the runtime package and its submodules.
"""

from typing import Protocol


class RuntimeInfoPort(Protocol):
    """Port definition for reading host and process runtime metadata."""

    def runtime_machine_name(self) -> str:
        """Return the host machine name.

        Returns:
            str: Network name of the host.
        """

    def runtime_os_version(self) -> str:
        """Return a descriptor of the running operating system.

        Returns:
            str: Operating system name and release.
        """

    def runtime_processor_count(self) -> int:
        """Return the logical processor count of the host.

        Returns:
            int: Positive logical core count.
        """

    def runtime_working_set_bytes(self) -> int:
        """Return resident memory currently used by the process.

        Returns:
            int: Resident set size in bytes.
        """
