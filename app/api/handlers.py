"""Endpoint handlers as pure functions of an injected request context.

Handlers never read process globals: the current instant, settings and runtime
statistics all arrive through `HandlerContext`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.config import AppSettings
from app.domain import (
    HEALTHY_STATUS,
    ApplicationInfo,
    HealthStatus,
    ProductCatalog,
    WelcomeMessage,
    domain_build_product_catalog,
)
from app.runtime import RuntimeInfoPort

WELCOME_MESSAGE = "Welcome to CI/CD POC Application"


@dataclass(frozen=True)
class HandlerContext:
    """Collaborators available to one handler invocation.

    Attributes:
        settings: Validated application settings.
        runtime_info: Host and process runtime provider.
        now: UTC instant read once for the request.
    """

    settings: AppSettings
    runtime_info: RuntimeInfoPort
    now: datetime


def api_handle_root(context: HandlerContext) -> WelcomeMessage:
    """Build the welcome payload.

    Args:
        context: Request context.

    Returns:
        WelcomeMessage: Static welcome text stamped with time and environment.
    """

    return WelcomeMessage(
        message=WELCOME_MESSAGE,
        timestamp=context.now,
        environment=context.settings.environment_name,
    )


def api_handle_health(context: HandlerContext) -> HealthStatus:
    """Build the liveness payload.

    Args:
        context: Request context.

    Returns:
        HealthStatus: Payload whose status is always `healthy`.
    """

    return HealthStatus(
        status=HEALTHY_STATUS,
        timestamp=context.now,
        version=context.settings.application_version,
        environment=context.settings.environment_name,
    )


def api_handle_products(context: HandlerContext) -> ProductCatalog:
    """Build the fixed product catalog envelope.

    Args:
        context: Request context.

    Returns:
        ProductCatalog: Three fixed records stamped with the request instant.
    """

    return domain_build_product_catalog(timestamp=context.now)


def api_handle_info(context: HandlerContext) -> ApplicationInfo:
    """Build the process and host metadata snapshot.

    Args:
        context: Request context carrying the runtime info provider.

    Returns:
        ApplicationInfo: Snapshot of application, host and process metadata.
    """

    runtime_info = context.runtime_info
    return ApplicationInfo(
        application_name=context.settings.application_name,
        version=context.settings.application_version,
        environment=context.settings.environment_name,
        machine_name=runtime_info.runtime_machine_name(),
        os_version=runtime_info.runtime_os_version(),
        processor_count=runtime_info.runtime_processor_count(),
        working_set=runtime_info.runtime_working_set_bytes(),
        timestamp=context.now,
    )
