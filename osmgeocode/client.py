"""
osmgeocode - Código de país a partir de texto libre
====================================================

Cliente mínimo para el buscador de Nominatim (OpenStreetMap).

Copyright (C) 2025 Goalnefesh

This file is part of osmgeocode.

This program is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 2 of the License, or
(at your option) any later version.
"""

from urllib.parse import urlencode

from pydantic import ValidationError

from .exceptions import (
    ConfigurationError,
    DecodeError,
    GeocodeError,
    NoMatchError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)
from .executor import HTTPExecutor, RequestsExecutor
from .models import GeocodeResponse

SEARCH_URL = "https://nominatim.openstreetmap.org/search"


class GeocodeClient:
    """Resuelve ubicaciones en texto libre a códigos de país ISO 3166-1.

    Cada llamada es independiente: una petición, sin caché, sin reintentos
    y sin estado entre llamadas. Es seguro usarlo desde varios hilos si el
    ejecutor HTTP también lo es.

    Example:
        with GeocodeClient() as client:
            client.resolve_country_code("Stockholm")  # "se"

    Attributes:
        executor: Ejecutor HTTP usado para las peticiones
        search_url: Endpoint de búsqueda del proveedor
    """

    def __init__(self, executor: HTTPExecutor | None = None, search_url: str = SEARCH_URL):
        """Inicializa el cliente.

        Args:
            executor: Ejecutor HTTP opcional. Si no se proporciona se crea un
                      RequestsExecutor con configuración estándar, que el
                      cliente cerrará en close(). Un ejecutor externo NO se cierra.
            search_url: URL del endpoint de búsqueda
        """
        if not search_url or not search_url.strip():
            raise ConfigurationError(
                "La URL de búsqueda no puede estar vacía",
                details={"search_url": search_url}
            )
        self.search_url = search_url
        self._owns_executor = executor is None
        self.executor = executor if executor is not None else RequestsExecutor()

    def close(self):
        """Cierra el ejecutor HTTP si lo ha creado este cliente."""
        if self._owns_executor:
            self.executor.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # =========================================================================
    # API Principal
    # =========================================================================

    def build_search_url(self, location: str) -> str:
        """Construye la URL de búsqueda con la query codificada en UTF-8.

        Args:
            location: Texto libre (ciudad, fragmento de dirección, ...)

        Returns:
            str: URL con los parámetros q, format=json y addressdetails=1

        Raises:
            RequestConstructionError: Si el texto no es str o no es codificable
        """
        if not isinstance(location, str):
            raise RequestConstructionError(
                "El texto de búsqueda debe ser string",
                details={"received_type": type(location).__name__}
            )
        params = {"q": location, "format": "json", "addressdetails": 1}
        try:
            query = urlencode(params, encoding="utf-8", errors="strict")
        except UnicodeEncodeError as e:
            raise RequestConstructionError(
                "El texto de búsqueda no se puede codificar en UTF-8",
                details={"reason": e.reason, "position": e.start}
            ) from e
        return f"{self.search_url}?{query}"

    def search(self, location: str) -> GeocodeResponse:
        """Busca una ubicación y devuelve todas las coincidencias decodificadas.

        Args:
            location: Texto libre a buscar

        Returns:
            GeocodeResponse: Resultados ordenados por relevancia (puede estar vacía)

        Raises:
            RequestConstructionError: Si la petición no se puede construir
            TransportError: Si falla el transporte
            UnexpectedStatusError: Si el código de estado no es 200
            DecodeError: Si el cuerpo no es un array JSON de resultados
        """
        url = self.build_search_url(location)

        try:
            response = self.executor.execute("GET", url, None)
        except GeocodeError:
            raise
        except Exception as e:
            raise TransportError(f"Error ejecutando la petición: {e}", url=url) from e

        if response.status_code != 200:
            raise UnexpectedStatusError(
                f"Nominatim ha devuelto un código de estado inesperado: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        try:
            return GeocodeResponse.from_json(response.body)
        except ValidationError as e:
            raise DecodeError(
                "Respuesta de Nominatim no válida",
                details={"errors": e.error_count(), "reason": e.errors(include_url=False)[0]["msg"]}
            ) from e

    def resolve_country_code(self, location: str) -> str:
        """Resuelve un texto libre al código de país de la mejor coincidencia.

        Si la mejor coincidencia no tiene código de país se devuelve cadena
        vacía, no un error.

        Args:
            location: Texto libre a buscar

        Returns:
            str: Código ISO 3166-1 alpha-2 tal y como lo envía el proveedor ("se")

        Raises:
            NoMatchError: Si la búsqueda no devuelve resultados
            (y los mismos errores que search())
        """
        response = self.search(location)
        best = response.first
        if best is None:
            raise NoMatchError("Sin coincidencias para la ubicación", location=location)
        return best.address.country_code
