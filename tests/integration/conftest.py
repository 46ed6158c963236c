"""Shared fixtures for integration tests."""

import pytest

PLACES_LAYER_URL = (
    "https://services3.arcgis.com/ZvidGQkLaDJxRSJ2/arcgis/rest/services/"
    "PLACES_LocalData_for_BetterHealth/FeatureServer/0"
)
WORLD_IMAGERY_URL = (
    "https://services.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer"
)


@pytest.fixture
def places_layer_url():
    return PLACES_LAYER_URL


@pytest.fixture
def world_imagery_url():
    return WORLD_IMAGERY_URL
