"""Open ArcGIS resources as handles."""

from __future__ import annotations

import logging

from ...core.exceptions import UnsupportedHandleError
from ...models import BaseHandle
from .config import LAYER_TYPES, SERVICE_SUFFIXES
from .http import HTTPClient

logger = logging.getLogger(__name__)


def resolve_handle_type(url: str, metadata: dict) -> type[BaseHandle]:
    """Pick the handle class for a resource.

    Service endpoints are recognised by their URL, layers by the ``type``
    key of their metadata.

    Raises:
        UnsupportedHandleError: If neither matches a known variant
    """
    suffix = url.rstrip("/").rsplit("/", 1)[-1].lower()
    if suffix in SERVICE_SUFFIXES:
        return SERVICE_SUFFIXES[suffix]

    layer_type = metadata.get("type")
    if layer_type in LAYER_TYPES:
        return LAYER_TYPES[layer_type]

    raise UnsupportedHandleError(
        f"Unsupported resource at {url}: type {layer_type!r}",
        handle_type=layer_type,
    )


async def arc_open(url: str, *, client: HTTPClient | None = None) -> BaseHandle:
    """Fetch a resource's metadata and wrap it in a handle.

    Args:
        url: Endpoint of a FeatureServer, MapServer, ImageServer, layer or table
        client: HTTP client to reuse; a temporary one is created otherwise

    Returns:
        A fresh handle with an empty query

    Raises:
        ProviderError: If the server answers with an error payload
        UnsupportedHandleError: If the resource type is not supported
    """
    url = url.strip().rstrip("/")

    if client is None:
        async with HTTPClient() as owned:
            metadata = await owned.get(url)
    else:
        metadata = await client.get(url)

    handle_cls = resolve_handle_type(url, metadata)
    logger.debug("arcgis_opened", extra={"url": url, "handle_type": handle_cls.__name__})
    return handle_cls(url=url, metadata=metadata)
