# homelet/core/security.py

from datetime import datetime, timedelta
from typing import Any, Dict
from uuid import uuid4

from jose import jwt, JWTError
from passlib.context import CryptContext

from homelet.core.config import settings

# --------------------------------------
# Password hashing config
# --------------------------------------
# pbkdf2_sha256 rather than bcrypt: no 72-byte password limit and no
# dependency on the bcrypt wheel.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# --------------------------------------
# Token creation helpers
# --------------------------------------

def _create_token(
    data: Dict[str, Any],
    expires_delta: timedelta,
    *,
    secret_key: str,
    token_type: str,
) -> str:
    to_encode = data.copy()
    now = datetime.utcnow()
    to_encode.update(
        {
            "iat": now,
            "exp": now + expires_delta,
            "type": token_type,
            # unique per token, so two tokens minted in the same second differ
            "jti": uuid4().hex,
        }
    )
    return jwt.encode(to_encode, secret_key, algorithm=settings.JWT_ALGORITHM)


def create_access_token(data: Dict[str, Any]) -> str:
    expire = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _create_token(
        data=data,
        expires_delta=expire,
        secret_key=settings.JWT_SECRET_KEY,
        token_type="access",
    )


def create_refresh_token(data: Dict[str, Any]) -> str:
    expire = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _create_token(
        data=data,
        expires_delta=expire,
        secret_key=settings.JWT_REFRESH_SECRET_KEY,
        token_type="refresh",
    )


def token_pair(user_id: int, role: str) -> Dict[str, str]:
    data = {"user_id": user_id, "role": role}
    return {
        "access_token": create_access_token(data),
        "refresh_token": create_refresh_token(data),
    }


# --------------------------------------
# Token verification helpers
# --------------------------------------

def verify_refresh_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a *refresh* token. Used by /auth/refresh.
    """
    payload = jwt.decode(
        token,
        settings.JWT_REFRESH_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
    )
    if payload.get("type") != "refresh":
        raise JWTError("Invalid token type")
    if "user_id" not in payload:
        raise JWTError("Missing user_id in token")
    return payload


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an *access* token.
    Used by get_current_user.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
    )

    if payload.get("type") != "access":
        raise JWTError("Invalid token type")

    if "user_id" not in payload:
        raise JWTError("Missing user_id in token")

    return payload
