from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .address import GeocodeAddress


class GeocodeResult(BaseModel):
    """Modelo para una coincidencia individual devuelta por Nominatim."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Coordenadas tal y como las envía el proveedor (texto)
    lat: str = Field("", description="Latitud WGS84")
    lon: str = Field("", description="Longitud WGS84")

    # Clasificación OSM; "class" es palabra reservada en Python
    class_: str = Field("", alias="class", description="Clase OSM (place, boundary, ...)")
    type: str = Field("", description="Tipo OSM dentro de la clase (city, village, ...)")

    # strict: un número JSON; "0.5" como texto no es válido
    importance: float = Field(0.0, strict=True, description="Relevancia relativa asignada por el proveedor")
    address: GeocodeAddress = Field(default_factory=GeocodeAddress)

    @field_validator("lat", "lon", "class_", "type", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v

    @field_validator("importance", mode="before")
    @classmethod
    def null_importance(cls, v: Any) -> Any:
        if v is None:
            return 0.0
        return v

    @field_validator("address", mode="before")
    @classmethod
    def null_address(cls, v: Any) -> Any:
        if v is None:
            return {}
        return v

    @property
    def country_code(self) -> str:
        """Código de país de la dirección (puede ser cadena vacía)."""
        return self.address.country_code
