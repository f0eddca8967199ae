# homelet/db/crud_favorites.py

from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.db.models import Favorite


async def get_favorite(db: AsyncSession, user_id: int, property_id: int) -> Favorite | None:
    res = await db.execute(
        select(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.property_id == property_id,
        )
    )
    return res.scalar_one_or_none()


async def toggle_favorite(db: AsyncSession, user_id: int, property_id: int) -> bool:
    """
    Add the property to the user's favorites, or remove it if already there.
    Returns the new state (True = now a favorite).
    """
    fav = await get_favorite(db, user_id, property_id)
    if fav:
        await db.delete(fav)
        await db.commit()
        return False

    db.add(Favorite(user_id=user_id, property_id=property_id))
    await db.commit()
    return True


async def list_favorite_property_ids(db: AsyncSession, user_id: int) -> List[int]:
    res = await db.execute(
        select(Favorite.property_id)
        .where(Favorite.user_id == user_id)
        .order_by(Favorite.id.desc())
    )
    return list(res.scalars().all())


async def count_favorites(db: AsyncSession, user_id: int) -> int:
    res = await db.execute(
        select(func.count(Favorite.id)).where(Favorite.user_id == user_id)
    )
    return int(res.scalar_one())
