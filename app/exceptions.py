import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# **Manejo de errores de validación de Pydantic**
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Captura errores de validación y retorna un JSON estructurado."""
    error_messages = [
        {"field": e["loc"][-1] if e.get("loc") else None, "message": e["msg"]}
        for e in exc.errors()
    ]
    logging.warning(f"Validation error on {request.url.path}: {len(error_messages)} error(s)")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "data": "Invalid request data",
            "errors": error_messages
        }
    )

# **Manejo de errores globales**
async def global_exception_handler(request: Request, exc: Exception):
    # Log detallado del error
    logging.error(f"Uncaught error occurred: {exc!r}, URL: {request.url}")

    # Devuelve una respuesta clara
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "data": "Internal server error. Please contact the administrator."
        },
        headers={"X-Error-Code": "INTERNAL_SERVER_ERROR"}
    )

# **Función para configurar los manejadores de excepciones**
def setup_exception_handlers(app):
    """Registra los manejadores de excepciones en la aplicación FastAPI."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
