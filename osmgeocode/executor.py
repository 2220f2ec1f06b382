"""
Ejecutor HTTP para el cliente de geocodificación.

Copyright (C) 2025 Goalnefesh

This file is part of osmgeocode.

This program is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 2 of the License, or
(at your option) any later version.
"""

import logging
from typing import NamedTuple, Optional, Protocol

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from .exceptions import (
    RequestConstructionError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)

__all__ = ["ExecutorResponse", "HTTPExecutor", "RequestsExecutor"]

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


class ExecutorResponse(NamedTuple):
    """Cuerpo y código de estado de una respuesta HTTP ya leída."""

    body: bytes
    status_code: int


class HTTPExecutor(Protocol):
    """Capacidad mínima que GeocodeClient necesita del transporte.

    Las implementaciones deben lanzar TransportError (o una subclase) ante
    fallos de red y devolver la respuesta sea cual sea su código de estado.
    """

    def execute(
        self, method: str, url: str, basic_auth: Optional[tuple[str, str]] = None
    ) -> ExecutorResponse:
        ...


class RequestsExecutor:
    """Ejecutor HTTP basado en requests.

    Sin reintentos ni timeout propio salvo que se configure uno: la política
    de transporte es responsabilidad del llamante.
    No guarda estado por petición: puede compartirse entre hilos si la
    sesión de requests también se comparte de forma segura.

    Attributes:
        session: Sesión de requests usada para las peticiones
        timeout: Timeout en segundos (None = sin límite)

    Example:
        with RequestsExecutor(timeout=10) as executor:
            response = executor.execute("GET", "https://nominatim.openstreetmap.org/search?q=Oslo&format=json")
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        logger: logging.Logger | None = None,
    ):
        """Configura el ejecutor.

        Args:
            session: Sesión externa opcional. Si se proporciona, el ejecutor
                     NO la cerrará; el usuario es responsable.
            timeout: Timeout en segundos para cada petición (default: None)
            headers: Cabeceras adicionales (p.ej. User-Agent) para todas las peticiones
            logger: Logger opcional para debug
        """
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if headers:
            self.session.headers.update(headers)

        self.log = logger or log

    def execute(
        self, method: str, url: str, basic_auth: Optional[tuple[str, str]] = None
    ) -> ExecutorResponse:
        """Ejecuta una petición y devuelve cuerpo y código de estado.

        Args:
            method: Método HTTP ("GET", ...)
            url: URL completa, con la query ya codificada
            basic_auth: Credenciales (usuario, contraseña) para HTTP Basic

        Returns:
            ExecutorResponse: Cuerpo en bytes y código de estado

        Raises:
            RequestConstructionError: Si la petición no se puede preparar
            TransportTimeoutError: Si la petición excede el timeout
            TransportConnectionError: Si hay error de conexión o DNS
            TransportError: Si hay otro error de transporte
        """
        request = requests.Request(method, url, auth=basic_auth)
        try:
            prepared = self.session.prepare_request(request)
        except (RequestException, ValueError) as e:
            raise RequestConstructionError(
                f"No se puede construir la petición: {e}", details={"url": url}
            ) from e

        # Proxies y certificados del entorno, igual que Session.request
        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)

        self.log.debug("%s %s", method, prepared.url)
        try:
            response = self.session.send(prepared, timeout=self.timeout, **settings)
            body = response.content
        except Timeout as e:
            raise TransportTimeoutError(f"Timeout después de {self.timeout}s", url=url) from e
        except ConnectionError as e:
            raise TransportConnectionError("Error de conexión con el servidor", url=url) from e
        except RequestException as e:
            raise TransportError(f"Error de transporte: {e}", url=url) from e

        self.log.debug("%s %s -> %d (%d bytes)", method, response.url, response.status_code, len(body))
        return ExecutorResponse(body=body, status_code=response.status_code)

    def close(self):
        """Cierra la sesión si la ha creado este ejecutor."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
