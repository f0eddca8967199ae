from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from homelet.api.dependencies import get_identity
from homelet.core.enums import BookingRoleFilter
from homelet.core.identity import Identity
from homelet.db.session import get_db
from homelet.schemas.booking import BookingActionIn, BookingCreate, BookingOut
from homelet.services import bookings as booking_service

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    body: BookingCreate,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    booking = await booking_service.create_booking(
        db,
        identity,
        property_id=body.property_id,
        start_date=body.start_date,
        end_date=body.end_date,
        message=body.message,
    )
    return {"success": True, "data": BookingOut.model_validate(booking)}


@router.get("")
async def list_bookings(
    type: Optional[BookingRoleFilter] = Query(None),
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    """
    ?type=tenant -> bookings I made, ?type=landlord -> bookings on my
    properties, no type -> both.
    """
    bookings = await booking_service.list_bookings(db, identity, type)
    return {"items": [BookingOut.model_validate(b) for b in bookings]}


@router.get("/{booking_id}")
async def get_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    booking = await booking_service.get_booking(db, identity, booking_id)
    return {"success": True, "data": BookingOut.model_validate(booking)}


@router.put("/{booking_id}")
async def update_booking(
    booking_id: int,
    body: BookingActionIn,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_identity),
):
    action = booking_service.parse_action(body.action)
    booking = await booking_service.transition_booking(db, identity, booking_id, action)
    return {"success": True, "data": BookingOut.model_validate(booking)}
