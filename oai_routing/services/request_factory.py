"""Request Factory: settings-aware entry point around the pure request builder.

Invariants:
    - API key always read from Settings.openai_api_key
    - method=None falls back to conventional_method(operation)
    - Every built request logged at DEBUG with operation and method
    - RoutingError logged with its error_code, then re-raised unchanged
"""

import logging
from typing import Any

from oai_routing.config import Settings, get_settings
from oai_routing.core.conventions import conventional_method
from oai_routing.core.domain_types import HttpMethod
from oai_routing.core.errors import RoutingError
from oai_routing.core.operations import Operation, operation_name
from oai_routing.core.request_builder import (
    BASE_URL, QueryItems, RequestDescriptor, build,
)

logger = logging.getLogger(__name__)


def build_request(
    operation: Operation,
    method: HttpMethod | None = None,
    *,
    payload: Any = None,
    query_items: QueryItems | None = None,
    settings: Settings | None = None,
) -> RequestDescriptor:
    """Build a descriptor using the configured API key."""
    settings = settings or get_settings()
    method = HttpMethod(method) if method is not None else conventional_method(operation)
    name = operation_name(operation)
    try:
        descriptor = build(
            operation, settings.openai_api_key, method,
            payload=payload, query_items=query_items,
        )
    except RoutingError as e:
        logger.error(
            f"Request build failed for {name}: {e.message}",
            extra={
                "operation": name, "method": method.value,
                "error_code": e.code,
            },
        )
        raise
    logger.debug(
        f"Built {method.value} request for {name}",
        extra={
            "operation": name, "method": method.value,
            "url_path": descriptor.url.removeprefix(BASE_URL),
        },
    )
    return descriptor
