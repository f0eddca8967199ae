# homelet/api/routers/auth.py
from typing import Dict, Any

from fastapi import APIRouter, Depends, HTTPException, status, Body
from sqlalchemy.ext.asyncio import AsyncSession
from jose import JWTError

from homelet.core.logging import get_logger
from homelet.db.session import get_db
from homelet.db import crud_users
from homelet.schemas.auth import RefreshIn, Token
from homelet.schemas.user import UserCreate, UserLogin, UserOut
from homelet.core.security import (
    token_pair,
    verify_password,
    verify_refresh_token,
)

router = APIRouter()
logger = get_logger("auth")


async def _issue_tokens(db: AsyncSession, user) -> Dict[str, Any]:
    """
    Build the Token response and remember the refresh token so that
    /refresh and /logout can check and revoke it.
    """
    tokens = token_pair(user.id, user.role)
    await crud_users.save_refresh_token(db, user.id, tokens["refresh_token"])
    return {
        **tokens,
        "token_type": "bearer",
        "user": UserOut.model_validate(user),
    }


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(payload: UserCreate, db: AsyncSession = Depends(get_db)):
    existing = await crud_users.get_user_by_email(db, payload.email)
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email exists")

    user = await crud_users.create_user(
        db=db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        phone=payload.phone,
        role=payload.role,
    )
    logger.info("registered user %s as %s", user.id, user.role)
    return await _issue_tokens(db, user)


@router.post("/login", response_model=Token)
async def login(payload: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await crud_users.get_user_by_email(db, payload.email)
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return await _issue_tokens(db, user)


@router.post("/refresh", response_model=Token)
async def refresh(body: RefreshIn, db: AsyncSession = Depends(get_db)):
    try:
        payload = verify_refresh_token(body.refresh_token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
        )

    if not await crud_users.is_refresh_token_active(db, body.refresh_token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token revoked",
        )

    user = await crud_users.get_user(db, int(payload["user_id"]))
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return await _issue_tokens(db, user)


@router.post("/logout")
async def logout(
    body: Dict[str, Any] | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    # body is optional; without a token there is nothing to revoke
    token = (body or {}).get("refresh_token")
    if token:
        await crud_users.revoke_refresh_token(db, token)
    return {"ok": True}
