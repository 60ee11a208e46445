"""Observability package for logging setup and request logging."""

from .log_config import JSONFormatter, observability_configure_logging
from .middleware import observability_log_request

__all__ = ["JSONFormatter", "observability_configure_logging", "observability_log_request"]
