"""
osmgeocode - Código de país a partir de texto libre
===================================================

Cliente mínimo para el servicio de geocodificación Nominatim de OpenStreetMap.

Uso:
    from osmgeocode import GeocodeClient

    with GeocodeClient() as client:
        code = client.resolve_country_code("Stockholm")  # "se"

Transporte inyectable (p.ej. un doble de test sin red):
    client = GeocodeClient(executor=mi_ejecutor)

Modelos de Datos (Pydantic):
    search() devuelve un GeocodeResponse inmutable con GeocodeResult
    ordenados por relevancia.
"""

from .client import SEARCH_URL, GeocodeClient
from .executor import ExecutorResponse, HTTPExecutor, RequestsExecutor
from .models import GeocodeAddress, GeocodeResponse, GeocodeResult
from .exceptions import (
    GeocodeError,
    ConfigurationError,
    RequestConstructionError,
    TransportError,
    TransportConnectionError,
    TransportTimeoutError,
    UnexpectedStatusError,
    DecodeError,
    NoMatchError,
)

__version__ = "1.0.0"
__all__ = [
    "SEARCH_URL",
    "GeocodeClient",
    "ExecutorResponse",
    "HTTPExecutor",
    "RequestsExecutor",
    "GeocodeAddress",
    "GeocodeResult",
    "GeocodeResponse",
    "GeocodeError",
    "ConfigurationError",
    "RequestConstructionError",
    "TransportError",
    "TransportConnectionError",
    "TransportTimeoutError",
    "UnexpectedStatusError",
    "DecodeError",
    "NoMatchError",
]
