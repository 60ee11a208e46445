"""Fixed product catalog construction."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from .models import ProductCatalog, ProductRecord


def domain_build_product_catalog(timestamp: datetime) -> ProductCatalog:
    """Build the fixed three-item product catalog.

    Records are constructed fresh on every call so no instance is shared
    between requests.

    Args:
        timestamp: UTC instant stamped on the envelope.

    Returns:
        ProductCatalog: Envelope holding the three catalog records.
    """

    return ProductCatalog(
        data=(
            ProductRecord(product_id=1, name="Laptop", price=Decimal("999.99"), category="Electronics"),
            ProductRecord(product_id=2, name="Book", price=Decimal("19.99"), category="Education"),
            ProductRecord(product_id=3, name="Coffee Mug", price=Decimal("12.50"), category="Kitchen"),
        ),
        timestamp=timestamp,
    )
