from pydantic import BaseModel, Field, model_validator
from typing import Optional
from app.passwords.models import PasswordRequirements
from app.passwords.services import default_requirements
from app.passwords.validator import validate_password_comprehensive


class PasswordValidationRequest(BaseModel):
    password: str = Field(..., description="Contraseña a evaluar")
    requirements: Optional[PasswordRequirements] = Field(None, description="Requisitos a aplicar; por defecto los configurados")


class ComprehensiveValidationRequest(PasswordValidationRequest):
    confirm_password: str = Field(..., description="Confirmación de la contraseña")


class StrengthIndicatorRequest(BaseModel):
    password: str = Field(..., description="Contraseña escrita por el usuario")
    show_requirements: bool = Field(True, description="Incluir la lista de requisitos")


class SetPasswordRequest(BaseModel):
    """
    Contraseña enviada desde un formulario de registro.
    Se rechaza si no cumple los requisitos configurados, si la confirmación no
    coincide o si es una contraseña común.
    """
    password: str = Field(..., description="Nueva contraseña")
    confirm_password: str = Field(..., description="Confirmación de la nueva contraseña")

    @model_validator(mode="after")
    def validate_password_policy(self):
        result = validate_password_comprehensive(self.password, self.confirm_password, default_requirements())
        if not result.is_valid:
            raise ValueError("; ".join(result.errors))
        return self


class SimpleResponse(BaseModel):
    success: bool
    data: str
