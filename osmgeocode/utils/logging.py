"""
Logging de osmgeocode.

La librería no configura nada: sus módulos cuelgan de ``osmgeocode.*`` con un
NullHandler. La línea de comandos llama a setup_logging().
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO

from ..exceptions import GeocodeError

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Atributos que cualquier LogRecord trae de serie; el resto viene de extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """
    Una línea JSON por registro.

    Un GeocodeError pasado en ``extra={"error": exc}`` se expande con
    to_dict(): tipo, mensaje y, si los tiene, status_code, url y location.
    """

    def _serialize_value(self, value: Any) -> Any:
        if isinstance(value, GeocodeError):
            return self._serialize_value(value.to_dict())
        if hasattr(value, "model_dump"):
            return value.model_dump(mode="json", by_alias=True)
        if isinstance(value, dict):
            return {str(k): self._serialize_value(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        return str(value)

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                log_data[key] = self._serialize_value(value)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class _CLIHandler(logging.StreamHandler):
    """Manejador instalado por setup_logging (identificable para reemplazarlo)."""


def setup_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    logger_name: str = "osmgeocode",
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configura el árbol de loggers ``osmgeocode`` para la línea de comandos.

    Llamadas sucesivas reemplazan el manejador anterior en lugar de añadir
    otro; los manejadores que haya puesto la aplicación no se tocan.

    Args:
        level: Nivel de logging (default: logging.INFO)
        json_format: Si es True, usa StructuredJSONFormatter
        logger_name: Raíz del árbol a configurar
        stream: Destino de los logs (default: sys.stderr)

    Returns:
        logging.Logger: Logger configurado
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if isinstance(h, _CLIHandler)]:
        logger.removeHandler(handler)

    handler = _CLIHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(StructuredJSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
    logger.addHandler(handler)

    return logger
