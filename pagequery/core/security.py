from typing import Any, Dict

from jose import jwt

from .config import get_settings


def decode_access_token(token: str) -> Dict[str, Any]:
    """Decode a bearer token; raises ``jose.JWTError`` when it does not verify."""

    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
