import time
import uuid
import logging
from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from app import config

# **Middleware de Logging para registrar peticiones**
class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        # Generar un ID único por cada petición
        request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        logging.info(f"Request [{request_id}]: {request.method} {request.url.path}")

        # Procesar la solicitud; si falla se registra como 500
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            process_time = time.time() - start_time
            logging.info(f"Response [{request_id}]: {status_code} ({process_time:.2f}s)")

# Función para agregar todos los middlewares
def setup_middlewares(app):
    """Agrega los middlewares a la aplicación FastAPI."""

    # Configuración CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    # Middleware de Logging
    app.add_middleware(LoggingMiddleware)
