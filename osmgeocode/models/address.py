from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeocodeAddress(BaseModel):
    """Bloque ``address`` de un resultado de Nominatim.

    Todos los campos son texto; la ausencia se representa con cadena vacía.
    """
    model_config = ConfigDict(frozen=True)

    city: str = Field("", description="Ciudad")
    municipality: str = Field("", description="Municipio")
    state: str = Field("", description="Estado, provincia o equivalente")
    region: str = Field("", description="Región")
    postcode: str = Field("", description="Código postal")
    country: str = Field("", description="Nombre del país en el idioma local")
    country_code: str = Field("", description="Código ISO 3166-1 alpha-2 (minúsculas)")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v
