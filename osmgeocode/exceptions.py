"""
Jerarquía de excepciones de osmgeocode.

Todas las excepciones heredan de GeocodeError, permitiendo capturar
cualquier fallo de una consulta con un solo except.
"""

from typing import Any, Dict, Optional

__all__ = [
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


class GeocodeError(Exception):
    """Clase base para todas las excepciones de osmgeocode.

    Attributes:
        message: Mensaje de error principal
        details: Diccionario opcional con contexto adicional del error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        if self.details:
            return f"{class_name}(message={self.message!r}, details={self.details!r})"
        return f"{class_name}(message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la excepción a diccionario para serialización JSON.

        Returns:
            dict: Diccionario con type, message y details de la excepción
        """
        result = {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details.copy(),
        }

        if getattr(self, "url", None):
            result["url"] = self.url
        if getattr(self, "status_code", None) is not None:
            result["status_code"] = self.status_code
        if getattr(self, "location", None) is not None:
            result["location"] = self.location

        return result


class ConfigurationError(GeocodeError):
    """Configuración inválida del cliente (p.ej. URL de búsqueda vacía)."""
    pass


class RequestConstructionError(GeocodeError):
    """No se ha podido construir la petición HTTP.

    Se lanza antes de tocar la red:
    - Texto de búsqueda que no admite codificación UTF-8 (surrogates sueltos)
    - URL mal formada
    - Credenciales no codificables
    """
    pass


class TransportError(GeocodeError):
    """Fallo de red o de transporte al ejecutar la petición.

    El llamante puede reintentar en una capa superior; el cliente no lo hace.

    Attributes:
        url: URL que causó el error (si está disponible)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, url: Optional[str] = None):
        super().__init__(message, details)
        self.url = url
        if url:
            self.details["url"] = url


class TransportConnectionError(TransportError):
    """No se ha podido establecer conexión (servidor caído, DNS, red)."""
    pass


class TransportTimeoutError(TransportError):
    """La petición ha excedido el tiempo máximo configurado en el ejecutor."""
    pass


class UnexpectedStatusError(GeocodeError):
    """El servicio ha respondido con un código distinto de 200.

    No se distingue entre 4xx y 5xx ni se interpreta el cuerpo.

    Attributes:
        status_code: Código de estado HTTP recibido
        url: URL consultada
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.url = url
        if status_code is not None:
            self.details["status_code"] = status_code
        if url:
            self.details["url"] = url


class DecodeError(GeocodeError):
    """El cuerpo de la respuesta no es JSON válido o no tiene la forma esperada.

    El diagnóstico original queda en ``__cause__`` y resumido en ``details``.
    """
    pass


class NoMatchError(GeocodeError):
    """La respuesta es un array vacío: la ubicación no coincide con nada."""

    def __init__(self, message: str, location: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.location = location
        if location is not None:
            self.details["location"] = location
