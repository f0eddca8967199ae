from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.api.dependencies import get_current_user
from homelet.core.errors import NotFoundError
from homelet.db.session import get_db
from homelet.db import crud_favorites, crud_properties
from homelet.schemas.dashboard import FavoriteToggle
from homelet.schemas.property import PropertyDetail

router = APIRouter()


@router.post("")
async def toggle_favorite(
    body: FavoriteToggle,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    if not await crud_properties.get_property(db, body.property_id):
        raise NotFoundError("Property not found")
    is_favorite = await crud_favorites.toggle_favorite(db, current_user.id, body.property_id)
    return {"is_favorite": is_favorite}


@router.get("")
async def list_favorites(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    ids = await crud_favorites.list_favorite_property_ids(db, current_user.id)
    props = await crud_properties.list_properties_by_ids(db, ids)
    return {"items": [PropertyDetail.model_validate(p) for p in props]}
