import logging
from fastapi import FastAPI
from app import config
from app.passwords.routes import router as password_router
from app.middlewares import setup_middlewares
from app.exceptions import setup_exception_handlers

# **Configurar Logging**
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# **Configurar FastAPI**
app = FastAPI(
    title=config.API_TITLE,
    description="Password policy API for the school portal: validation, strength scoring and secure password generation",
    version=config.API_VERSION
)

# **Configurar Middlewares**
setup_middlewares(app)

# **Configurar Manejadores de Excepciones**
setup_exception_handlers(app)

# **Registrar Rutas**
app.include_router(password_router)

# **Endpoint de Salud**
@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "API running"}
