# homelet/db/crud_bookings.py

from datetime import date, datetime
from typing import List, Optional, Sequence

from sqlalchemy import select, func, or_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from homelet.db.models import Booking

# property/tenant/landlord loaded up front: async sessions can't lazy-load
_EXPANDED = (
    selectinload(Booking.property),
    selectinload(Booking.tenant),
    selectinload(Booking.landlord),
)


async def find_overlapping_bookings(
    db: AsyncSession,
    *,
    property_id: int,
    start_date: date,
    end_date: date,
    statuses: Sequence[str],
) -> List[Booking]:
    """
    Bookings on property_id in one of `statuses` whose [start, end] shares
    at least one day with [start_date, end_date] (both ends inclusive).
    """
    stmt = select(Booking).where(
        Booking.property_id == property_id,
        Booking.status.in_(list(statuses)),
        Booking.start_date <= end_date,
        Booking.end_date >= start_date,
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def insert_booking(
    db: AsyncSession,
    *,
    property_id: int,
    tenant_id: int,
    landlord_id: int,
    start_date: date,
    end_date: date,
    total_amount: float,
    message: str = "",
) -> Booking:
    now = datetime.utcnow()
    booking = Booking(
        property_id=property_id,
        tenant_id=tenant_id,
        landlord_id=landlord_id,
        start_date=start_date,
        end_date=end_date,
        total_amount=total_amount,
        message=message,
        status="pending",
        created_at=now,
        updated_at=now,
    )
    db.add(booking)
    await db.commit()
    return booking


async def update_booking_status(
    db: AsyncSession,
    booking_id: int,
    status: str,
    *,
    from_statuses: Sequence[str],
    updated_at: Optional[datetime] = None,
) -> bool:
    """
    Compare-and-set: moves the booking to `status` only while it is still in
    one of `from_statuses`. Returns False when another writer got there first.
    """
    stmt = (
        update(Booking)
        .where(Booking.id == booking_id, Booking.status.in_(list(from_statuses)))
        .values(status=status, updated_at=updated_at or datetime.utcnow())
        .execution_options(synchronize_session=False)
    )
    res = await db.execute(stmt)
    await db.commit()
    return res.rowcount == 1


async def get_booking(db: AsyncSession, booking_id: int) -> Booking | None:
    res = await db.execute(
        select(Booking)
        .options(*_EXPANDED)
        .where(Booking.id == booking_id)
        .execution_options(populate_existing=True)
    )
    return res.scalars().first()


async def list_bookings_for_user(
    db: AsyncSession,
    user_id: int,
    role: Optional[str] = None,
) -> List[Booking]:
    """
    role="tenant" -> bookings the user made, role="landlord" -> bookings on
    the user's properties, None -> both.
    """
    if role == "tenant":
        cond = Booking.tenant_id == user_id
    elif role == "landlord":
        cond = Booking.landlord_id == user_id
    else:
        cond = or_(Booking.tenant_id == user_id, Booking.landlord_id == user_id)

    stmt = (
        select(Booking)
        .options(*_EXPANDED)
        .where(cond)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def count_bookings(
    db: AsyncSession,
    *,
    tenant_id: Optional[int] = None,
    landlord_id: Optional[int] = None,
    status: Optional[str] = None,
) -> int:
    stmt = select(func.count(Booking.id))
    if tenant_id is not None:
        stmt = stmt.where(Booking.tenant_id == tenant_id)
    if landlord_id is not None:
        stmt = stmt.where(Booking.landlord_id == landlord_id)
    if status is not None:
        stmt = stmt.where(Booking.status == status)
    return int((await db.execute(stmt)).scalar_one())


async def approved_revenue(db: AsyncSession, landlord_id: int) -> float:
    stmt = select(func.coalesce(func.sum(Booking.total_amount), 0)).where(
        Booking.landlord_id == landlord_id,
        Booking.status == "approved",
    )
    return float((await db.execute(stmt)).scalar_one())
