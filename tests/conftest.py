"""Shared fixtures: sample USGS GeoJSON payloads and canned HTTP responses."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

import pytest
import requests


def _feature(**props: Any) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "id": "us20005iis",
        "properties": props,
        "geometry": {"type": "Point", "coordinates": [79.7746, 32.1149, 10.0]},
    }


def _collection(features: List[Dict[str, Any]]) -> str:
    return json.dumps({
        "type": "FeatureCollection",
        "metadata": {"generated": 1462233012000, "count": len(features)},
        "features": features,
    })


def make_response(status_code: int = 200, body: Union[str, bytes] = "", encoding: Optional[str] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else body.encode("utf-8")
    response.encoding = encoding
    return response


@pytest.fixture
def feature():
    return _feature


@pytest.fixture
def collection():
    return _collection


@pytest.fixture
def town_quake_json() -> str:
    return _collection([
        _feature(mag=6.6, place="10km NW of Town", felt=157, cdi=7,
                 title="M 6.6 - 10km NW of Town"),
        _feature(mag=5.1, place="Somewhere else", felt=60, cdi=3.4),
    ])


@pytest.fixture
def http_response():
    return make_response
