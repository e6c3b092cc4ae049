"""httpx Adapter: express a RequestDescriptor in httpx's request vocabulary.

Invariants:
    - Conversion only; the returned httpx.Request is never sent here
    - Method, URL, headers and body carried over unchanged
"""

import httpx

from oai_routing.core.request_builder import RequestDescriptor


def to_httpx_request(descriptor: RequestDescriptor) -> httpx.Request:
    """Convert a descriptor for a transport collaborator that speaks httpx."""
    return httpx.Request(
        descriptor.method.value,
        descriptor.url,
        headers=dict(descriptor.headers),
        content=descriptor.body,
    )
