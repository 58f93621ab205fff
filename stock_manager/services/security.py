from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from ..config import Settings
from ..exceptions import AuthenticationError

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_token(user_id: int, email: str, token_type: str, settings: Settings) -> str:
    if token_type == ACCESS_TOKEN:
        lifetime = timedelta(minutes=settings.access_token_expire_minutes)
    else:
        lifetime = timedelta(days=settings.refresh_token_expire_days)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "type": token_type,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, token_type: str, settings: Settings) -> Dict[str, Any]:
    """Verify signature, expiry and kind of a token and return its claims"""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.PyJWTError as e:
        raise AuthenticationError(f"Invalid {token_type} token") from e

    if payload.get("type") != token_type or not str(payload.get("sub", "")).isdigit():
        raise AuthenticationError(f"Invalid {token_type} token")
    return payload
