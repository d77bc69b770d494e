from typing import Optional
from fastapi import APIRouter, Query
from app.passwords.schemas import (
    ComprehensiveValidationRequest,
    PasswordValidationRequest,
    SetPasswordRequest,
    SimpleResponse,
    StrengthIndicatorRequest,
)
from app.passwords.services import PasswordService

router = APIRouter(prefix="/password", tags=["Password"])


@router.get("/requirements")
def get_requirements():
    """Obtener los requisitos de contraseña activos"""
    return PasswordService().get_requirements()


@router.post("/validate")
def validate_password(request: PasswordValidationRequest):
    """Validar una contraseña y calcular su puntaje y fortaleza"""
    return PasswordService().validate(request.password, request.requirements)


@router.post("/validate-comprehensive")
def validate_password_comprehensive(request: ComprehensiveValidationRequest):
    """Validar reglas, confirmación y contraseñas comunes antes de enviar un formulario"""
    return PasswordService().validate_comprehensive(request.password, request.confirm_password, request.requirements)


@router.post("/strength")
def password_strength(request: StrengthIndicatorRequest):
    """Datos para el indicador de fortaleza mientras el usuario escribe"""
    return PasswordService().strength_indicator(request.password, request.show_requirements)


@router.get("/generate")
def generate_password(length: Optional[int] = Query(None, ge=4, le=128, description="Longitud de la contraseña")):
    """Generar una contraseña segura para estudiantes y docentes"""
    return PasswordService().generate(length)


@router.post("/submit", response_model=SimpleResponse)
def submit_password(request: SetPasswordRequest):
    """
    Recibe la contraseña de un formulario de registro.
    La validación ocurre en el esquema; si llega aquí la contraseña es aceptada.
    """
    return SimpleResponse(success=True, data="Password accepted")
