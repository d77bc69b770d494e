import os
from typing import Optional
from dotenv import load_dotenv

# Cargar variables de entorno
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    number = int(value)
    if minimum is not None and number < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {number}")
    return number


# **Configuración de la API**
API_TITLE = os.getenv("API_TITLE", "School Portal API - Password Policy")
API_VERSION = os.getenv("API_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# **Política de contraseñas por defecto**
PASSWORD_MIN_LENGTH = _env_int("PASSWORD_MIN_LENGTH", 8, minimum=0)
PASSWORD_REQUIRE_UPPERCASE = _env_bool("PASSWORD_REQUIRE_UPPERCASE", True)
PASSWORD_REQUIRE_LOWERCASE = _env_bool("PASSWORD_REQUIRE_LOWERCASE", True)
PASSWORD_REQUIRE_NUMBER = _env_bool("PASSWORD_REQUIRE_NUMBER", True)
PASSWORD_REQUIRE_SPECIAL = _env_bool("PASSWORD_REQUIRE_SPECIAL", True)

# Longitud de las contraseñas generadas para estudiantes y docentes
GENERATED_PASSWORD_LENGTH = _env_int("GENERATED_PASSWORD_LENGTH", 12, minimum=4)
