from typing import Iterator, Optional

from pydantic import ConfigDict, RootModel

from .result import GeocodeResult


class GeocodeResponse(RootModel[tuple[GeocodeResult, ...]]):
    """Respuesta completa de una búsqueda: resultados ordenados por relevancia.

    El primer elemento es la mejor coincidencia. Puede estar vacía.
    """
    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_json(cls, body: bytes | str) -> "GeocodeResponse":
        """Valida el cuerpo JSON; cualquier forma distinta de un array falla."""
        return cls.model_validate_json(body)

    @property
    def results(self) -> tuple[GeocodeResult, ...]:
        return self.root

    @property
    def first(self) -> Optional[GeocodeResult]:
        """Mejor coincidencia o None si no hay resultados."""
        return self.root[0] if self.root else None

    def __iter__(self) -> Iterator[GeocodeResult]:  # type: ignore[override]
        """Permite iterar sobre los resultados directamente: for r in response: ..."""
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> GeocodeResult:
        return self.root[index]
