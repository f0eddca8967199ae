# homelet/api/dependencies.py
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.core.errors import ForbiddenError, UnauthorizedError
from homelet.core.identity import Identity
from homelet.core.logging import get_logger
from homelet.core.security import verify_access_token
from homelet.db import crud_users
from homelet.db.models import User
from homelet.db.session import get_db

logger = get_logger("auth")
security = HTTPBearer(auto_error=False)


async def get_current_user(
    db: AsyncSession = Depends(get_db),
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> User:
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    try:
        payload = verify_access_token(credentials.credentials)
    except JWTError as e:
        logger.info("rejected access token: %s", e)
        raise UnauthorizedError("Invalid token")

    try:
        uid = int(payload["user_id"])
    except (TypeError, ValueError):
        raise UnauthorizedError("Invalid token user id")

    user = await crud_users.get_user(db, uid)
    if not user:
        raise UnauthorizedError("User not found")
    return user


async def get_identity(user: User = Depends(get_current_user)) -> Identity:
    return Identity.from_user(user)


def require_role(*roles: str):
    """
    Dependency factory:
      current_user = Depends(require_role("landlord"))
    Admins always pass.
    """

    async def dep(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles and user.role != "admin":
            raise ForbiddenError("Insufficient permissions")
        return user

    return dep
