import secrets

from werkzeug.security import check_password_hash, generate_password_hash

from config.settings import settings


def hash_password(password: str) -> str:
    return generate_password_hash(password, method="pbkdf2:sha256", salt_length=16)


def verify_password(password: str, stored: str) -> bool:
    if not stored:
        return False
    try:
        return check_password_hash(stored, password)
    except ValueError:
        # unknown method or unparsable parameters in the stored hash
        return False


def generate_token() -> str:
    return secrets.token_urlsafe(settings.TOKEN_BYTES)
