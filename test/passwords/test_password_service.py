import pytest
from fastapi import HTTPException
from app import config
from app.passwords.models import PasswordRequirements
from app.passwords.services import PasswordService, default_requirements


@pytest.fixture()
def password_service():
    """Servicio con los requisitos por defecto"""
    return PasswordService(PasswordRequirements())


def test_validate_returns_envelope(password_service):
    response = password_service.validate("Abcdef1!")
    assert response["success"] is True
    assert response["data"].is_valid is True
    assert response["data"].score == 100


def test_validate_with_request_requirements(password_service):
    response = password_service.validate("Abcdef1!", PasswordRequirements(min_length=12))
    assert response["data"].is_valid is False


def test_service_requirements_apply():
    service = PasswordService(PasswordRequirements(require_special=False))
    assert service.validate("Abcdef12")["data"].is_valid is True


def test_validate_comprehensive(password_service):
    response = password_service.validate_comprehensive("Abcdef1!", "Abcdef2!")
    assert response["success"] is True
    assert response["data"].errors == ["Passwords do not match"]


def test_strength_indicator_empty(password_service):
    response = password_service.strength_indicator("")
    assert response == {"success": True, "data": None}


def test_generate_default_length(password_service, monkeypatch):
    monkeypatch.setattr(config, "GENERATED_PASSWORD_LENGTH", 20)
    response = password_service.generate()
    assert response["data"].length == 20
    assert len(response["data"].password) == 20


def test_generate_invalid_length(password_service):
    """❌ Longitud insuficiente para incluir todas las clases de caracteres"""
    with pytest.raises(HTTPException) as exc_info:
        password_service.generate(3)
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail["success"] is False


def test_default_requirements_follow_config(monkeypatch):
    monkeypatch.setattr(config, "PASSWORD_MIN_LENGTH", 10)
    monkeypatch.setattr(config, "PASSWORD_REQUIRE_SPECIAL", False)
    requirements = default_requirements()
    assert requirements.min_length == 10
    assert requirements.require_special is False
    assert requirements.require_uppercase is config.PASSWORD_REQUIRE_UPPERCASE


def test_get_requirements(password_service):
    response = password_service.get_requirements()
    assert response["data"] == PasswordRequirements()


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    ("1", True),
    ("YES", True),
    ("on", True),
    ("false", False),
    ("0", False),
    ("no", False),
])
def test_env_bool(monkeypatch, value, expected):
    monkeypatch.setenv("PASSWORD_TEST_FLAG", value)
    assert config._env_bool("PASSWORD_TEST_FLAG", not expected) is expected


def test_env_defaults(monkeypatch):
    monkeypatch.delenv("PASSWORD_TEST_FLAG", raising=False)
    monkeypatch.delenv("PASSWORD_TEST_NUMBER", raising=False)
    assert config._env_bool("PASSWORD_TEST_FLAG", True) is True
    assert config._env_int("PASSWORD_TEST_NUMBER", 12) == 12
    monkeypatch.setenv("PASSWORD_TEST_NUMBER", "16")
    assert config._env_int("PASSWORD_TEST_NUMBER", 12) == 16


@pytest.mark.parametrize("name,value,minimum", [
    ("PASSWORD_TEST_NUMBER", "-1", 0),
    ("PASSWORD_TEST_NUMBER", "3", 4),
])
def test_env_int_below_minimum_fails_at_load(monkeypatch, name, value, minimum):
    """❌ Una configuración inválida falla al cargar, no en cada petición"""
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError) as exc_info:
        config._env_int(name, 8, minimum=minimum)
    assert name in str(exc_info.value)


def test_env_int_at_minimum(monkeypatch):
    monkeypatch.setenv("PASSWORD_TEST_NUMBER", "0")
    assert config._env_int("PASSWORD_TEST_NUMBER", 8, minimum=0) == 0
