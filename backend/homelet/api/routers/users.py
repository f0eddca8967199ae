from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.api.dependencies import get_current_user
from homelet.db.session import get_db
from homelet.schemas.dashboard import DashboardStats
from homelet.schemas.user import UserBase
from homelet.services import dashboard

router = APIRouter()


@router.get("/me")
async def me(current_user=Depends(get_current_user)):
    return UserBase.model_validate(current_user)


@router.get("/me/stats", response_model=DashboardStats)
async def my_stats(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return await dashboard.stats_for(db, current_user)
