"""Request Builder: combine an operation with host, headers, query and body.

Invariants:
    - BASE_URL is fixed; it is never a per-call parameter
    - Headers are exactly Content-Type (application/json) and Authorization (Bearer)
    - No query items (None or empty) means no query string; otherwise every
      pair appears once, in the given order (repeated keys are not regrouped)
    - No payload means body is None; a payload is encoded to compact JSON bytes
    - NaN and Infinity anywhere in a payload raise SerializationError
    - Query values are percent-encoded (space is %20, never +)
    - Failures raise SerializationError or MalformedURLError, nothing else is caught
    - No IO: building never touches the network, filesystem, or shared state

Design Decisions:
    - URL joined by RFC 3986 reference resolution (httpx.URL.join): a path
      missing its leading slash resolves against the root of BASE_URL
    - Method is not checked against conventional_method(); see core/conventions.py
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, TypeAdapter

from oai_routing.core.domain_types import HttpMethod
from oai_routing.core.errors import (
    ErrorContext, MalformedURLError, SerializationError,
)
from oai_routing.core.operations import Operation, operation_name, resolve_path

BASE_URL = "https://api.openai.com"

CONTENT_TYPE_JSON = "application/json"

QueryItems = Sequence[tuple[str, str]]


@dataclass(frozen=True)
class RequestDescriptor:
    """Transport-ready HTTP request. Immutable, compared by value."""
    url: str
    method: HttpMethod
    headers: Mapping[str, str]
    body: bytes | None = None


_ANY_ADAPTER = TypeAdapter(Any)


def _find_non_finite(value: Any, where: str = "$") -> str | None:
    """Location of the first NaN/Infinity float in a plain structure."""
    if isinstance(value, float):
        return None if math.isfinite(value) else where
    if isinstance(value, Mapping):
        items = ((f"{where}.{k}", v) for k, v in value.items())
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = ((f"{where}[{i}]", v) for i, v in enumerate(value))
    else:
        return None
    for child_where, child in items:
        found = _find_non_finite(child, child_where)
        if found is not None:
            return found
    return None


def encode_payload(payload: Any) -> bytes:
    """Encode a payload to compact JSON bytes, keeping key order.

    Pydantic models drop None fields; any other value goes through a
    TypeAdapter(Any) (dicts, lists, dataclasses, primitives). NaN and
    Infinity have no JSON form and are rejected.
    """
    payload_type = type(payload).__name__
    try:
        if isinstance(payload, BaseModel):
            plain = payload.model_dump(exclude_none=True)
        else:
            plain = _ANY_ADAPTER.dump_python(payload)
        where = _find_non_finite(plain)
        if where is not None:
            raise SerializationError(f"non-finite float at {where}", payload_type)
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(exclude_none=True).encode("utf-8")
        return _ANY_ADAPTER.dump_json(payload)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e), payload_type) from e


def build_url(operation: Operation, query_items: QueryItems | None = None) -> str:
    """Absolute URL for an operation, with an optional query string."""
    path = resolve_path(operation)
    try:
        url = httpx.URL(BASE_URL).join(path)
        if query_items:
            query = urlencode(list(query_items), quote_via=quote)
            url = url.copy_with(query=query.encode("ascii"))
    except httpx.InvalidURL as e:
        raise MalformedURLError(
            str(e), path,
            ErrorContext(operation=operation_name(operation)),
        ) from e
    return str(url)


def build(
    operation: Operation,
    api_key: str,
    method: HttpMethod,
    payload: Any = None,
    query_items: QueryItems | None = None,
) -> RequestDescriptor:
    """Build the request descriptor for one call of an operation."""
    method = HttpMethod(method)
    url = build_url(operation, query_items)
    headers = {
        "Content-Type": CONTENT_TYPE_JSON,
        "Authorization": f"Bearer {api_key}",
    }
    body = None
    if payload is not None:
        try:
            body = encode_payload(payload)
        except SerializationError as e:
            e.context.operation = operation_name(operation)
            e.context.method = method.value
            raise
    return RequestDescriptor(
        url=url, method=method, headers=MappingProxyType(headers), body=body,
    )
