from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select

from homelet.api.dependencies import require_role
from homelet.core.logging import get_logger
from homelet.db.session import get_db
from homelet.db.models import User, Property, Booking
from homelet.db import crud_users
from homelet.schemas.user import UserBase, UserRoleUpdate


router = APIRouter()
logger = get_logger("admin")


@router.get("/stats")
async def admin_stats(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_role("admin")),
):
    users_count = (await db.execute(select(func.count(User.id)))).scalar_one()
    props_count = (await db.execute(select(func.count(Property.id)))).scalar_one()
    bookings_count = (await db.execute(select(func.count(Booking.id)))).scalar_one()
    return {
        "total_users": users_count,
        "total_properties": props_count,
        "total_bookings": bookings_count,
    }


@router.get("/users")
async def admin_users(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_role("admin")),
):
    users = await crud_users.list_users(db)
    return {"data": [UserBase.model_validate(u) for u in users]}


@router.put("/users/{user_id}/role")
async def set_role(
    user_id: int,
    body: UserRoleUpdate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_role("admin")),
):
    user = await crud_users.update_user_role(db, user_id, body.role.value)
    logger.info("user %s role set to %s by admin %s", user_id, user.role, current_user.id)
    return UserBase.model_validate(user)
