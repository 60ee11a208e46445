"""Domain models used across application layer boundaries."""

from .catalog import domain_build_product_catalog
from .models import (
    HEALTHY_STATUS,
    ApplicationInfo,
    HealthStatus,
    ProductCatalog,
    ProductRecord,
    WelcomeMessage,
)

__all__ = [
    "HEALTHY_STATUS",
    "ApplicationInfo",
    "HealthStatus",
    "ProductCatalog",
    "ProductRecord",
    "WelcomeMessage",
    "domain_build_product_catalog",
]
