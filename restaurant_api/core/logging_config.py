"""
➡️ But : Configurer les logs une seule fois et tracer chaque requête HTTP.

setup_logging() : handler console (+ fichier optionnel) sur le logger racine.

RequestLoggingMiddleware : une ligne par requête (méthode, URI, statut, latence)
et un identifiant X-Request-ID propagé dans la réponse.

Limite : le handler `Exception` (erreurs 500 inattendues) est exécuté par le
ServerErrorMiddleware de Starlette, à l'extérieur de ce middleware et de CORS.
Ces réponses 500 n'ont donc ni X-Request-ID, ni en-têtes CORS, ni ligne d'accès ;
la trace est loggée par `unhandled_error_handler` (core/errors.py).
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"

access_logger = logging.getLogger("restaurant_api.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure le logger racine (idempotent : ne fait rien s'il a déjà des handlers)."""
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        access_logger.info(
            "method=%s uri=%s status=%s latency=%.2fms request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
            request_id,
        )
        return response
