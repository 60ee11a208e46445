"""Regression tests for domain value objects and the fixed product catalog."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from app.domain import ProductRecord, domain_build_product_catalog

_FIXED_NOW = datetime(2026, 2, 14, tzinfo=timezone.utc)


def test_domain_build_product_catalog_returns_three_fixed_records() -> None:
    """Build the three catalog records in id order.

    Returns:
        None: Assertions validate catalog contents.

    Raises:
        AssertionError: Raised when catalog records differ.
    """

    catalog = domain_build_product_catalog(timestamp=_FIXED_NOW)

    assert catalog.count == 3
    assert catalog.timestamp == _FIXED_NOW
    assert catalog.data == (
        ProductRecord(product_id=1, name="Laptop", price=Decimal("999.99"), category="Electronics"),
        ProductRecord(product_id=2, name="Book", price=Decimal("19.99"), category="Education"),
        ProductRecord(product_id=3, name="Coffee Mug", price=Decimal("12.50"), category="Kitchen"),
    )


def test_domain_build_product_catalog_builds_fresh_envelopes() -> None:
    """Return a new envelope per call without sharing instances."""

    first_catalog = domain_build_product_catalog(timestamp=_FIXED_NOW)
    second_catalog = domain_build_product_catalog(timestamp=_FIXED_NOW)

    assert first_catalog == second_catalog
    assert first_catalog is not second_catalog


def test_domain_product_record_rejects_non_positive_price() -> None:
    """Reject zero and negative prices at construction."""

    with pytest.raises(ValueError, match="price must be positive"):
        ProductRecord(product_id=9, name="Free", price=Decimal("0"), category="Promo")
    with pytest.raises(ValueError, match="price must be positive"):
        ProductRecord(product_id=9, name="Refund", price=Decimal("-1.00"), category="Promo")
