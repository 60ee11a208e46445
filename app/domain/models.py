"""Typed domain models returned by endpoint handlers.

Every model is a frozen value object built per request; nothing here is
persisted or shared between requests.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

HEALTHY_STATUS = "healthy"


@dataclass(frozen=True)
class WelcomeMessage:
    """Root endpoint payload.

    Attributes:
        message: Static welcome text.
        timestamp: UTC instant the response was built.
        environment: Runtime environment label.
    """

    message: str
    timestamp: datetime
    environment: str


@dataclass(frozen=True)
class HealthStatus:
    """Liveness contract used by the health-check surface.

    Attributes:
        status: Always `healthy` while the process can answer.
        timestamp: UTC instant the response was built.
        version: Application version, or None when not injected at build time.
        environment: Runtime environment label.
    """

    status: str
    timestamp: datetime
    version: str | None
    environment: str


@dataclass(frozen=True)
class ProductRecord:
    """One catalog entry.

    Attributes:
        product_id: Stable product identifier.
        name: Display name.
        price: Unit price, strictly positive.
        category: Catalog category label.
    """

    product_id: int
    name: str
    price: Decimal
    category: str

    def __post_init__(self) -> None:
        """Validate the record after construction.

        Raises:
            ValueError: Raised when price is zero or negative.
        """

        if self.price <= 0:
            raise ValueError(f"price must be positive for product_id={self.product_id}")


@dataclass(frozen=True)
class ProductCatalog:
    """Product list envelope.

    Attributes:
        data: Ordered product records.
        timestamp: UTC instant the response was built.
    """

    data: tuple[ProductRecord, ...]
    timestamp: datetime

    @property
    def count(self) -> int:
        """Return the number of records in the envelope.

        Returns:
            int: Length of `data`, never stored separately.
        """

        return len(self.data)


@dataclass(frozen=True)
class ApplicationInfo:
    """Process and host metadata snapshot.

    Attributes:
        application_name: Human-readable application name.
        version: Application version, or None.
        environment: Runtime environment label.
        machine_name: Host name.
        os_version: Operating system descriptor.
        processor_count: Logical processor count.
        working_set: Resident memory of the process in bytes.
        timestamp: UTC instant the snapshot was taken.
    """

    application_name: str
    version: str | None
    environment: str
    machine_name: str
    os_version: str
    processor_count: int
    working_set: int
    timestamp: datetime
