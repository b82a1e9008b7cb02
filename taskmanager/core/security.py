from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from taskmanager.core.config import settings


def create_access_token(user_id: int, email: str) -> str:
    # token d'accès JWT, durée JWT_EXPIRE_MIN (24h par défaut)
    payload = {
        "user_id": user_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MIN),
        "type": "access",
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def decode_token(token: str) -> Optional[int]:
    """Return the user id carried by a valid access token, or None."""
    payload = verify_token(token)
    if payload is None or payload.get("type") != "access":
        return None
    return payload.get("user_id")
