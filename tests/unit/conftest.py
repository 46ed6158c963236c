"""Shared fixtures: representative ArcGIS REST metadata responses."""

import pytest

from arcgislayers.models import FeatureLayer, FeatureServer

LAYER_URL = "https://services.example.com/arcgis/rest/services/Places/FeatureServer/0"
SERVER_URL = "https://services.example.com/arcgis/rest/services/Places/FeatureServer"


@pytest.fixture
def layer_metadata():
    """Metadata of a point feature layer."""
    return {
        "currentVersion": 11.1,
        "id": 0,
        "name": "Places",
        "type": "Feature Layer",
        "geometryType": "esriGeometryPoint",
        "maxRecordCount": 2000,
        "extent": {"spatialReference": {"wkid": 102100, "latestWkid": 3857}},
        "fields": [
            {"name": "OBJECTID", "type": "esriFieldTypeOID", "alias": "OBJECTID"},
            {
                "name": "place_name",
                "type": "esriFieldTypeString",
                "alias": "Place name",
                "length": 256,
                "nullable": True,
            },
        ],
    }


@pytest.fixture
def server_metadata():
    """Metadata of a feature server with two layers and one table."""
    return {
        "currentVersion": 11.1,
        "serviceDescription": "Places",
        "layers": [
            {"id": 0, "name": "Places", "type": "Feature Layer", "geometryType": "esriGeometryPoint"},
            {"id": 1, "name": "Roads", "type": "Feature Layer", "geometryType": "esriGeometryPolyline"},
        ],
        "tables": [
            {"id": 2, "name": "Visits", "type": "Table"},
        ],
        "spatialReference": {"wkid": 102100, "latestWkid": 3857},
    }


@pytest.fixture
def feature_layer(layer_metadata):
    return FeatureLayer(url=LAYER_URL, metadata=layer_metadata)


@pytest.fixture
def feature_server(server_metadata):
    return FeatureServer(url=SERVER_URL, metadata=server_metadata)
