"""Runtime layer package for host and process inspection boundaries."""

from .host import HostRuntimeInfoService
from .interfaces import RuntimeInfoPort

__all__ = ["HostRuntimeInfoService", "RuntimeInfoPort"]
