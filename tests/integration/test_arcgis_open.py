"""Integration tests against public ArcGIS services."""

import os

import pytest

from arcgislayers import (
    FeatureLayer,
    MapServer,
    arc_open,
    list_fields,
    list_items,
    refresh_layer,
    update_params,
)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("RUN_ARCGISLAYERS_NETWORK_TESTS") != "1",
        reason="Requires network access. Set RUN_ARCGISLAYERS_NETWORK_TESTS=1 to run",
    ),
]


@pytest.mark.asyncio
async def test_open_layer_and_refresh(places_layer_url):
    layer = await arc_open(places_layer_url)

    assert isinstance(layer, FeatureLayer)
    assert len(list_fields(layer)) > 0

    refreshed = await refresh_layer(update_params(layer, outFields="*"))
    assert refreshed.query == {"outFields": "*"}


@pytest.mark.asyncio
async def test_list_items_of_map_server(world_imagery_url):
    server = await arc_open(world_imagery_url)

    assert isinstance(server, MapServer)
    assert len(list_items(server)) >= 1
