# homelet/api/routers/properties.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.api.dependencies import get_current_user, require_role
from homelet.core.enums import PropertyStatus, PropertyType
from homelet.core.errors import ForbiddenError, NotFoundError
from homelet.core.logging import get_logger
from homelet.db.session import get_db
from homelet.db import crud_properties
from homelet.schemas.property import (
    PropertiesPage,
    PropertyCreate,
    PropertyDetail,
    PropertyUpdate,
)

router = APIRouter()
logger = get_logger("properties")


async def _owned_property(db: AsyncSession, prop_id: int, user):
    prop = await crud_properties.get_property(db, prop_id)
    if not prop:
        raise NotFoundError("Property not found")
    if prop.owner_id != user.id and user.role != "admin":
        raise ForbiddenError("Unauthorized to modify this property")
    return prop


@router.get("")
async def list_properties(
    db: AsyncSession = Depends(get_db),
    city: Optional[str] = None,
    type: Optional[PropertyType] = None,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    bedrooms: Optional[int] = Query(None, ge=0),
    bathrooms: Optional[int] = Query(None, ge=0),
    status: Optional[PropertyStatus] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
):
    """
    Public listings, "available" only unless ?status= asks for another one.
    """
    filters = {
        "city": city,
        "type": type.value if type else None,
        "min_price": min_price,
        "max_price": max_price,
        "bedrooms": bedrooms,
        "bathrooms": bathrooms,
        "status": status.value if status else None,
        "search": search,
        "sort": sort,
    }
    items, total = await crud_properties.list_properties(
        db,
        filters=filters,
        page=page,
        per_page=per_page,
    )
    page_obj = PropertiesPage(
        items=[PropertyDetail.model_validate(p) for p in items],
        total=total,
        page=page,
        per_page=per_page,
    )
    return {"success": True, "data": page_obj}


@router.get("/{prop_id}")
async def get_property_detail(prop_id: int, db: AsyncSession = Depends(get_db)):
    prop = await crud_properties.get_property(db, prop_id)
    if not prop:
        raise NotFoundError("Property not found")
    return {"success": True, "data": PropertyDetail.model_validate(prop)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_property(
    body: PropertyCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_role("landlord")),
):
    prop = await crud_properties.create_property(
        db,
        owner_id=current_user.id,
        **body.model_dump(mode="json"),
    )
    logger.info("property %s listed by user %s", prop.id, current_user.id)
    return {"message": "created", "data": PropertyDetail.model_validate(prop)}


@router.put("/{prop_id}")
async def update_property(
    prop_id: int,
    body: PropertyUpdate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    """
    Partial update; only fields present in the body are changed.
    Owner or admin only.
    """
    prop = await _owned_property(db, prop_id, current_user)
    data = body.model_dump(mode="json", exclude_unset=True)
    prop = await crud_properties.update_property(db, prop, data)
    return {"message": "updated", "data": PropertyDetail.model_validate(prop)}


@router.delete("/{prop_id}")
async def delete_property(
    prop_id: int,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    prop = await _owned_property(db, prop_id, current_user)
    await crud_properties.delete_property(db, prop)
    logger.info("property %s deleted by user %s", prop_id, current_user.id)
    return {"message": "deleted"}
