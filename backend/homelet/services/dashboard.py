# homelet/services/dashboard.py
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.db import crud_bookings, crud_favorites, crud_properties
from homelet.schemas.dashboard import DashboardStats


async def stats_for(db: AsyncSession, user) -> DashboardStats:
    """
    Landlords see their listings, the bookings made on them and the
    revenue of approved bookings; everyone else sees their own bookings
    and saved properties.
    """
    if user.role == "landlord":
        summary = await crud_properties.owner_summary(db, user.id)
        return DashboardStats(
            **summary,
            pending_bookings=await crud_bookings.count_bookings(
                db, landlord_id=user.id, status="pending"
            ),
            total_bookings=await crud_bookings.count_bookings(db, landlord_id=user.id),
            monthly_revenue=await crud_bookings.approved_revenue(db, user.id),
        )

    return DashboardStats(
        saved_properties=await crud_favorites.count_favorites(db, user.id),
        total_bookings=await crud_bookings.count_bookings(db, tenant_id=user.id),
        pending_bookings=await crud_bookings.count_bookings(
            db, tenant_id=user.id, status="pending"
        ),
    )
