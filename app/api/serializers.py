"""JSON payload builders for domain response models."""

from __future__ import annotations

from app.domain import ApplicationInfo, HealthStatus, ProductCatalog, ProductRecord, WelcomeMessage


def api_serialize_welcome(model: WelcomeMessage) -> dict[str, object]:
    """Serialize the root welcome payload.

    Args:
        model: Welcome message model.

    Returns:
        dict[str, object]: Payload with message, ISO timestamp and environment.

    Raises:
        RuntimeError: This serializer does not raise runtime errors.
    """

    return {
        "message": model.message,
        "timestamp": model.timestamp.isoformat(),
        "environment": model.environment,
    }


def api_serialize_health(model: HealthStatus) -> dict[str, object]:
    """Serialize the liveness payload.

    Args:
        model: Health status model.

    Returns:
        dict[str, object]: Payload with status, ISO timestamp, version and environment.

    Raises:
        RuntimeError: This serializer does not raise runtime errors.
    """

    return {
        "status": model.status,
        "timestamp": model.timestamp.isoformat(),
        "version": model.version,
        "environment": model.environment,
    }


def api_serialize_product(record: ProductRecord) -> dict[str, object]:
    """Serialize one product record.

    Prices are emitted as JSON numbers, not strings.

    Args:
        record: Product record.

    Returns:
        dict[str, object]: Product payload.

    Raises:
        RuntimeError: This serializer does not raise runtime errors.
    """

    return {
        "id": record.product_id,
        "name": record.name,
        "price": float(record.price),
        "category": record.category,
    }


def api_serialize_catalog(model: ProductCatalog) -> dict[str, object]:
    """Serialize the product list envelope.

    Args:
        model: Product catalog envelope.

    Returns:
        dict[str, object]: Payload with product list, count and ISO timestamp.

    Raises:
        RuntimeError: This serializer does not raise runtime errors.
    """

    return {
        "data": [api_serialize_product(record) for record in model.data],
        "count": model.count,
        "timestamp": model.timestamp.isoformat(),
    }


def api_serialize_info(model: ApplicationInfo) -> dict[str, object]:
    """Serialize the application info snapshot with camelCase keys.

    Args:
        model: Application info snapshot.

    Returns:
        dict[str, object]: Payload with application, host and process metadata.

    Raises:
        RuntimeError: This serializer does not raise runtime errors.
    """

    return {
        "applicationName": model.application_name,
        "version": model.version,
        "environment": model.environment,
        "machineName": model.machine_name,
        "osVersion": model.os_version,
        "processorCount": model.processor_count,
        "workingSet": model.working_set,
        "timestamp": model.timestamp.isoformat(),
    }
