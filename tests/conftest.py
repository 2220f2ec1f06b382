"""
Pytest configuration and fixtures for osmgeocode tests.
"""

import copy
import json
from urllib.parse import parse_qs, urlsplit

import pytest

from osmgeocode import ExecutorResponse, GeocodeClient


# Respuesta real de Nominatim para "Stockholm" (un solo elemento)
STOCKHOLM_RECORD = {
    "place_id": 128726,
    "licence": "Data © OpenStreetMap contributors, ODbL 1.0. https://osm.org/copyright",
    "osm_type": "node",
    "osm_id": 25929985,
    "boundingbox": ["59.1651172", "59.4851172", "17.9110935", "18.2310935"],
    "lat": "59.3251172",
    "lon": "18.0710935",
    "display_name": "Stockholm, Stockholms kommun, Stockholms län, Svealand, 111 29, Sverige",
    "class": "place",
    "type": "city",
    "importance": 0.840175301943447,
    "icon": "https://nominatim.openstreetmap.org/images/mapicons/poi_place_city.p.20.png",
    "address": {
        "city": "Stockholm",
        "municipality": "Stockholms kommun",
        "state": "Stockholms län",
        "region": "Svealand",
        "postcode": "111 29",
        "country": "Sverige",
        "country_code": "se",
    },
}


class FakeExecutor:
    """Ejecutor HTTP de test: devuelve respuestas fijas sin tocar la red."""

    def __init__(self, body=b"[]", status_code=200, exception=None, handler=None):
        self.body = body
        self.status_code = status_code
        self.exception = exception
        self.handler = handler
        self.calls = []
        self.closed = False

    def execute(self, method, url, basic_auth=None):
        self.calls.append((method, url, basic_auth))
        if self.exception is not None:
            raise self.exception
        if self.handler is not None:
            return self.handler(method, url, basic_auth)
        return ExecutorResponse(body=self.body, status_code=self.status_code)

    def close(self):
        self.closed = True

    def last_query(self) -> dict:
        """Parámetros decodificados de la última URL ejecutada."""
        return parse_qs(urlsplit(self.calls[-1][1]).query)


@pytest.fixture
def stockholm_record():
    """Copia independiente del registro de Stockholm."""
    return copy.deepcopy(STOCKHOLM_RECORD)


@pytest.fixture
def make_client():
    """Crea un GeocodeClient con un FakeExecutor.

    Acepta ``body`` como bytes, str o cualquier objeto serializable a JSON.
    """
    def _make(body=b"[]", status_code=200, exception=None, handler=None):
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            body = body.encode("utf-8")
        executor = FakeExecutor(body, status_code, exception, handler)
        return GeocodeClient(executor=executor), executor

    return _make


def pytest_addoption(parser):
    """Add --integration command line option."""
    parser.addoption(
        "--integration", action="store_true", default=False, help="run integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked with 'integration' unless --integration is provided."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
