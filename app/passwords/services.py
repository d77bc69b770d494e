import logging
from typing import Optional
from fastapi import HTTPException
from app import config
from app.passwords.generator import generate_secure_password
from app.passwords.models import GeneratedPassword, PasswordRequirements
from app.passwords.validator import (
    build_strength_indicator,
    validate_password,
    validate_password_comprehensive,
)


def default_requirements() -> PasswordRequirements:
    """Requisitos configurados por variables de entorno"""
    return PasswordRequirements(
        min_length=config.PASSWORD_MIN_LENGTH,
        require_uppercase=config.PASSWORD_REQUIRE_UPPERCASE,
        require_lowercase=config.PASSWORD_REQUIRE_LOWERCASE,
        require_number=config.PASSWORD_REQUIRE_NUMBER,
        require_special=config.PASSWORD_REQUIRE_SPECIAL,
    )


class PasswordService:
    """Clase para validar, evaluar y generar contraseñas"""

    def __init__(self, requirements: Optional[PasswordRequirements] = None):
        self.requirements = requirements if requirements is not None else default_requirements()

    def get_requirements(self):
        """Obtener los requisitos activos"""
        return {"success": True, "data": self.requirements}

    def validate(self, password: str, requirements: Optional[PasswordRequirements] = None):
        """Validar una contraseña y calcular su fortaleza"""
        result = validate_password(password, requirements or self.requirements)
        logging.info(f"Password validated: valid={result.is_valid} strength={result.strength.value}")
        return {"success": True, "data": result}

    def validate_comprehensive(
        self,
        password: str,
        confirm_password: str,
        requirements: Optional[PasswordRequirements] = None
    ):
        """Validación completa: reglas, confirmación y contraseñas comunes"""
        result = validate_password_comprehensive(password, confirm_password, requirements or self.requirements)
        logging.info(f"Comprehensive password validation: valid={result.is_valid} errors={len(result.errors)}")
        return {"success": True, "data": result}

    def strength_indicator(self, password: str, show_requirements: bool = True):
        """Datos del indicador de fortaleza; `data` es None si la contraseña está vacía"""
        indicator = build_strength_indicator(password, self.requirements, show_requirements)
        return {"success": True, "data": indicator}

    def generate(self, length: Optional[int] = None):
        """Generar una contraseña segura"""
        length = config.GENERATED_PASSWORD_LENGTH if length is None else length
        try:
            password = generate_secure_password(length)
        except (TypeError, ValueError) as e:
            logging.warning(f"Password generation rejected: {e}")
            raise HTTPException(status_code=400, detail={"success": False, "data": str(e)})

        logging.info(f"Secure password generated (length={length})")
        return {"success": True, "data": GeneratedPassword(password=password, length=len(password))}
