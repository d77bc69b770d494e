from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class StrengthCategory(str, Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


class PasswordRequirements(BaseModel):
    """
    Requisitos de composición de una contraseña.
    Un `min_length` nulo o igual a 0 desactiva la regla de longitud.
    Se rechazan los campos desconocidos.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    min_length: Optional[int] = Field(8, ge=0, description="Longitud mínima de la contraseña")
    require_uppercase: bool = Field(True, description="Exigir al menos una letra mayúscula")
    require_lowercase: bool = Field(True, description="Exigir al menos una letra minúscula")
    require_number: bool = Field(True, description="Exigir al menos un número")
    require_special: bool = Field(True, description="Exigir al menos un carácter especial")


class PasswordValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = []
    strength: StrengthCategory
    score: int = Field(..., ge=0, le=100)


class ComprehensiveValidationResult(BaseModel):
    is_valid: bool
    errors: List[str] = []


class RequirementCheck(BaseModel):
    label: str
    met: bool


class StrengthIndicator(BaseModel):
    """Datos para pintar la barra de progreso, la etiqueta y la lista de requisitos"""
    score: int = Field(..., ge=0, le=100)
    strength: StrengthCategory
    color: str
    label: str
    requirements: List[RequirementCheck] = []
    errors: List[str] = []


class GeneratedPassword(BaseModel):
    password: str
    length: int
