"""
Línea de comandos de osmgeocode.

    python -m osmgeocode "Stockholm"          -> se
    python -m osmgeocode "Oslo" --json        -> respuesta completa en JSON

Códigos de salida: 0 éxito, 1 sin coincidencias, 2 cualquier otro error.
"""

import argparse
import logging
import os
import sys

from .client import SEARCH_URL, GeocodeClient
from .exceptions import GeocodeError, NoMatchError
from .executor import RequestsExecutor
from .utils.logging import setup_logging

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osmgeocode",
        description="Obtiene el código de país de una ubicación usando Nominatim (OpenStreetMap)",
    )
    parser.add_argument("location", help="Texto libre a buscar (ciudad, dirección, ...)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Imprime la respuesta completa decodificada en lugar del código de país",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout en segundos de la petición (default: sin límite)",
    )
    parser.add_argument(
        "--user-agent",
        default=None,
        help="Cabecera User-Agent a enviar (la política de uso de Nominatim la recomienda)",
    )
    parser.add_argument(
        "--search-url",
        default=SEARCH_URL,
        help=f"Endpoint de búsqueda (default: {SEARCH_URL})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Nivel de logging (sobrescribe OSMGEOCODE_LOG_LEVEL)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emite los logs en formato JSON estructurado",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    log_level = args.log_level or os.getenv("OSMGEOCODE_LOG_LEVEL", "WARNING").upper()
    if log_level not in LOG_LEVELS:
        log_level = "WARNING"
    logger = setup_logging(getattr(logging, log_level), json_format=args.json_logs)

    headers = {"User-Agent": args.user_agent} if args.user_agent else None
    executor = RequestsExecutor(timeout=args.timeout, headers=headers)

    try:
        with executor, GeocodeClient(executor=executor, search_url=args.search_url) as client:
            if args.json:
                print(client.search(args.location).model_dump_json(by_alias=True))
            else:
                print(client.resolve_country_code(args.location))
    except NoMatchError as e:
        logger.info("Sin coincidencias", extra={"location": args.location})
        print(str(e), file=sys.stderr)
        return EXIT_NO_MATCH
    except GeocodeError as e:
        logger.debug("Consulta fallida", extra={"error": e})
        print(str(e), file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
