import re
from typing import List, Mapping, Optional, Union
from app.passwords.models import (
    ComprehensiveValidationResult,
    PasswordRequirements,
    PasswordValidationResult,
    RequirementCheck,
    StrengthCategory,
    StrengthIndicator,
)

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
NUMBER_PATTERN = re.compile(r"[0-9]")
SPECIAL_PATTERN = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?]""")

# Contraseñas de uso común que se rechazan aunque cumplan las reglas
COMMON_PASSWORDS = frozenset([
    "password",
    "12345678",
    "123456789",
    "qwerty",
    "abc123",
    "password123",
    "admin",
    "letmein",
    "welcome",
    "monkey",
])

STRENGTH_COLORS = {
    StrengthCategory.WEAK: "danger",
    StrengthCategory.MEDIUM: "warning",
    StrengthCategory.STRONG: "info",
    StrengthCategory.VERY_STRONG: "success",
}

STRENGTH_LABELS = {
    StrengthCategory.WEAK: "Weak 😟",
    StrengthCategory.MEDIUM: "Medium 😐",
    StrengthCategory.STRONG: "Strong 🙂",
    StrengthCategory.VERY_STRONG: "Very Strong 😃",
}

RULE_POINTS = 20
MAX_SCORE = 100

RequirementsInput = Optional[Union[PasswordRequirements, Mapping]]


def _resolve_requirements(requirements: RequirementsInput) -> PasswordRequirements:
    if requirements is None:
        return PasswordRequirements()
    if isinstance(requirements, PasswordRequirements):
        return requirements
    return PasswordRequirements(**requirements)


def _ensure_str(value, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


# **Clasificación del puntaje**
def strength_from_score(score: int) -> StrengthCategory:
    if score < 40:
        return StrengthCategory.WEAK
    if score < 60:
        return StrengthCategory.MEDIUM
    if score < 80:
        return StrengthCategory.STRONG
    return StrengthCategory.VERY_STRONG


# **Validación de reglas y cálculo de la fortaleza**
def validate_password(password: str, requirements: RequirementsInput = None) -> PasswordValidationResult:
    """
    Evalúa la contraseña contra los requisitos y calcula su puntaje (0-100).

    Las reglas se evalúan en orden fijo: longitud, mayúscula, minúscula, número
    y carácter especial; los mensajes de error conservan ese orden. Cada clase
    de carácter presente suma puntos aunque no sea obligatoria.
    """
    _ensure_str(password, "password")
    requirements = _resolve_requirements(requirements)
    errors: List[str] = []
    score = 0

    if requirements.min_length and len(password) < requirements.min_length:
        errors.append(f"Password must be at least {requirements.min_length} characters long")
    else:
        score += RULE_POINTS

    character_rules = (
        (requirements.require_uppercase, UPPERCASE_PATTERN, "Password must contain at least one uppercase letter"),
        (requirements.require_lowercase, LOWERCASE_PATTERN, "Password must contain at least one lowercase letter"),
        (requirements.require_number, NUMBER_PATTERN, "Password must contain at least one number"),
        (requirements.require_special, SPECIAL_PATTERN, "Password must contain at least one special character (!@#$%^&*...)"),
    )
    for required, pattern, message in character_rules:
        present = pattern.search(password) is not None
        if required and not present:
            errors.append(message)
        elif present:
            score += RULE_POINTS

    # Bonificación por longitud
    if len(password) >= 12:
        score += 10
    if len(password) >= 16:
        score += 10

    return PasswordValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        strength=strength_from_score(score),
        score=min(score, MAX_SCORE),
    )


def passwords_match(password: str, confirm_password: str) -> bool:
    return password == confirm_password


def is_common_password(password: str) -> bool:
    """Comparación exacta, sin distinguir mayúsculas, contra la lista de contraseñas comunes"""
    _ensure_str(password, "password")
    return password.lower() in COMMON_PASSWORDS


def validate_password_comprehensive(
    password: str,
    confirm_password: str,
    requirements: RequirementsInput = None
) -> ComprehensiveValidationResult:
    """
    Validación completa para el envío de formularios.
    Orden de los errores: reglas, confirmación y lista de contraseñas comunes.
    """
    errors = list(validate_password(password, requirements).errors)

    if not passwords_match(password, confirm_password):
        errors.append("Passwords do not match")

    if is_common_password(password):
        errors.append("This password is too common. Please choose a more unique password")

    return ComprehensiveValidationResult(is_valid=len(errors) == 0, errors=errors)


# **Adaptador de presentación**
def _as_category(strength) -> Optional[StrengthCategory]:
    try:
        return StrengthCategory(strength)
    except (ValueError, TypeError):
        return None


def get_strength_color(strength: Union[StrengthCategory, str]) -> str:
    return STRENGTH_COLORS.get(_as_category(strength), "secondary")


def get_strength_label(strength: Union[StrengthCategory, str]) -> str:
    return STRENGTH_LABELS.get(_as_category(strength), "")


# **Indicador de fortaleza**
def get_requirement_checklist(password: str, requirements: RequirementsInput = None) -> List[RequirementCheck]:
    _ensure_str(password, "password")
    requirements = _resolve_requirements(requirements)
    checklist = []
    if requirements.min_length:
        checklist.append(RequirementCheck(
            label=f"At least {requirements.min_length} characters",
            met=len(password) >= requirements.min_length,
        ))
    checklist.extend([
        RequirementCheck(label="One uppercase letter", met=bool(UPPERCASE_PATTERN.search(password))),
        RequirementCheck(label="One lowercase letter", met=bool(LOWERCASE_PATTERN.search(password))),
        RequirementCheck(label="One number", met=bool(NUMBER_PATTERN.search(password))),
        RequirementCheck(label="One special character", met=bool(SPECIAL_PATTERN.search(password))),
    ])
    return checklist


def build_strength_indicator(
    password: str,
    requirements: RequirementsInput = None,
    show_requirements: bool = True
) -> Optional[StrengthIndicator]:
    """Retorna None cuando no hay contraseña que mostrar"""
    _ensure_str(password, "password")
    if not password:
        return None

    requirements = _resolve_requirements(requirements)
    validation = validate_password(password, requirements)
    return StrengthIndicator(
        score=validation.score,
        strength=validation.strength,
        color=get_strength_color(validation.strength),
        label=get_strength_label(validation.strength),
        requirements=get_requirement_checklist(password, requirements) if show_requirements else [],
        errors=validation.errors,
    )
