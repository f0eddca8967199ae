# homelet/db/crud_properties.py
from typing import Tuple, List, Dict, Any, Optional

from sqlalchemy import select, func, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from homelet.db.models import Property


async def list_properties(
    db: AsyncSession,
    filters: dict = None,
    page: int = 1,
    per_page: int = 20,
) -> Tuple[List[Property], int]:
    """
    Public listing. Only "available" properties unless a status filter says otherwise.
    """
    filters = filters or {}
    stmt = select(Property).options(selectinload(Property.owner))

    where_clauses = [Property.status == (filters.get("status") or "available")]

    if filters.get("city"):
        where_clauses.append(func.lower(Property.city) == filters["city"].lower())
    if filters.get("type"):
        where_clauses.append(Property.type == filters["type"])
    if filters.get("min_price") is not None:
        where_clauses.append(Property.price >= float(filters["min_price"]))
    if filters.get("max_price") is not None:
        where_clauses.append(Property.price <= float(filters["max_price"]))
    if filters.get("bedrooms") is not None:
        where_clauses.append(Property.bedrooms >= int(filters["bedrooms"]))
    if filters.get("bathrooms") is not None:
        where_clauses.append(Property.bathrooms >= int(filters["bathrooms"]))
    if filters.get("search"):
        pattern = f"%{filters['search']}%"
        where_clauses.append(
            or_(Property.title.ilike(pattern), Property.description.ilike(pattern))
        )

    stmt = stmt.where(and_(*where_clauses))

    # sorting
    sort = filters.get("sort")
    if sort == "price_asc":
        stmt = stmt.order_by(Property.price.asc(), Property.id.desc())
    elif sort == "price_desc":
        stmt = stmt.order_by(Property.price.desc(), Property.id.desc())
    else:
        # default: recent first
        stmt = stmt.order_by(Property.id.desc())

    count_stmt = select(func.count()).select_from(stmt.subquery())
    total = (await db.execute(count_stmt)).scalar_one()

    offset = (page - 1) * per_page
    stmt = stmt.offset(offset).limit(per_page)
    res = await db.execute(stmt)
    items = list(res.scalars().all())
    return items, int(total)


async def get_property(db: AsyncSession, prop_id: int) -> Property | None:
    res = await db.execute(
        select(Property)
        .options(selectinload(Property.owner))
        .where(Property.id == prop_id)
        .execution_options(populate_existing=True)
    )
    return res.scalars().first()


async def get_property_for_update(db: AsyncSession, prop_id: int) -> Property | None:
    """
    Same as get_property but takes a row lock (SELECT ... FOR UPDATE) on
    databases that support one. The lock is held until the caller commits.
    """
    res = await db.execute(
        select(Property).where(Property.id == prop_id).with_for_update()
    )
    return res.scalars().first()


async def list_properties_for_owner(db: AsyncSession, owner_id: int) -> List[Property]:
    """
    Landlord dashboard: ALL their properties, whatever the status.
    """
    res = await db.execute(
        select(Property)
        .options(selectinload(Property.owner))
        .where(Property.owner_id == owner_id)
        .order_by(Property.id.desc())
    )
    return list(res.scalars().all())


async def list_properties_by_ids(db: AsyncSession, ids: List[int]) -> List[Property]:
    if not ids:
        return []
    res = await db.execute(
        select(Property)
        .options(selectinload(Property.owner))
        .where(Property.id.in_(ids))
        .order_by(Property.id.desc())
    )
    return list(res.scalars().all())


async def create_property(db: AsyncSession, **kwargs) -> Property:
    prop = Property(**kwargs)
    db.add(prop)
    await db.commit()
    return await get_property(db, prop.id)


async def update_property(db: AsyncSession, prop: Property, data: dict) -> Property:
    for k, v in data.items():
        if v is not None:
            setattr(prop, k, v)
    db.add(prop)
    await db.commit()
    return await get_property(db, prop.id)


async def delete_property(db: AsyncSession, prop: Property):
    await db.delete(prop)
    await db.commit()
    return True


async def count_properties(
    db: AsyncSession,
    owner_id: Optional[int] = None,
    status: Optional[str] = None,
) -> int:
    stmt = select(func.count(Property.id))
    if owner_id is not None:
        stmt = stmt.where(Property.owner_id == owner_id)
    if status is not None:
        stmt = stmt.where(Property.status == status)
    return int((await db.execute(stmt)).scalar_one())


async def owner_summary(db: AsyncSession, owner_id: int) -> Dict[str, Any]:
    return {
        "total_properties": await count_properties(db, owner_id=owner_id),
        "available_properties": await count_properties(db, owner_id=owner_id, status="available"),
        "rented_properties": await count_properties(db, owner_id=owner_id, status="rented"),
    }
