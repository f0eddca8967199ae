from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.api.dependencies import get_current_user
from homelet.db.session import get_db
from homelet.db import crud_properties
from homelet.schemas.dashboard import DashboardStats
from homelet.schemas.property import PropertyDetail
from homelet.services import dashboard

router = APIRouter()


@router.get("/properties")
async def landlord_properties(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    """
    All properties of the current user, whatever their status.
    """
    items = await crud_properties.list_properties_for_owner(db, owner_id=current_user.id)
    return {"data": {"items": [PropertyDetail.model_validate(p) for p in items]}}


@router.get("/stats", response_model=DashboardStats)
async def landlord_stats(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return await dashboard.stats_for(db, current_user)
