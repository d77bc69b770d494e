import secrets
import string

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"
ALL_CHARACTERS = UPPERCASE + LOWERCASE + NUMBERS + SPECIAL

MIN_GENERATED_LENGTH = 4

_random = secrets.SystemRandom()


def generate_secure_password(length: int = 12) -> str:
    """
    Genera una contraseña aleatoria con al menos una mayúscula, una minúscula,
    un número y un carácter especial.

    Usa el generador criptográfico del sistema (`secrets`), por lo que sirve
    para las contraseñas iniciales de estudiantes y docentes.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an integer, got {type(length).__name__}")
    if length < MIN_GENERATED_LENGTH:
        raise ValueError(f"length must be at least {MIN_GENERATED_LENGTH} to include every character class")

    # Garantizar un carácter de cada tipo
    characters = [
        secrets.choice(UPPERCASE),
        secrets.choice(LOWERCASE),
        secrets.choice(NUMBERS),
        secrets.choice(SPECIAL),
    ]
    characters.extend(secrets.choice(ALL_CHARACTERS) for _ in range(length - MIN_GENERATED_LENGTH))

    _random.shuffle(characters)
    return "".join(characters)
