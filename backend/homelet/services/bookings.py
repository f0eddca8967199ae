# homelet/services/bookings.py
"""
Booking lifecycle and availability rules.

Creation:
  - the property must exist, be "available" and not belong to the requester
  - end date strictly after start date
  - no other pending/approved booking on the property may share a day
    with the requested range (both ends inclusive)
  - rent is billed per whole month, minimum one month

Transitions (after creation a booking only moves through this table):

    pending  --approve--> approved   (landlord)
    pending  --reject-->  rejected   (landlord)
    pending  --cancel-->  cancelled  (tenant)
    approved --cancel-->  cancelled  (tenant)

Approving a booking does not touch Property.status; landlords mark a
property as rented through the property endpoints.
"""
import asyncio
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from homelet.core.config import get_settings
from homelet.core.enums import (
    ACTIVE_BOOKING_STATUSES,
    BookingAction,
    BookingRoleFilter,
    BookingStatus,
    PropertyStatus,
)
from homelet.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)
from homelet.core.identity import Identity
from homelet.core.logging import get_logger
from homelet.db import crud_bookings, crud_properties
from homelet.db.models import Booking

logger = get_logger("bookings")

# action -> (statuses it may be applied from, resulting status)
TRANSITIONS = {
    BookingAction.APPROVE: (
        frozenset({BookingStatus.PENDING.value}),
        BookingStatus.APPROVED.value,
    ),
    BookingAction.REJECT: (
        frozenset({BookingStatus.PENDING.value}),
        BookingStatus.REJECTED.value,
    ),
    BookingAction.CANCEL: (
        frozenset({BookingStatus.PENDING.value, BookingStatus.APPROVED.value}),
        BookingStatus.CANCELLED.value,
    ),
}


class PropertyLocks:
    """
    One asyncio.Lock per property id, dropped again once nobody holds or
    waits for it. Serializes the overlap check and the insert inside one
    worker process; the row lock taken by get_property_for_update covers
    the multi-worker case.
    """

    def __init__(self) -> None:
        self._locks: Dict[int, asyncio.Lock] = {}
        self._holders: Dict[int, int] = {}

    @asynccontextmanager
    async def hold(self, property_id: int):
        lock = self._locks.setdefault(property_id, asyncio.Lock())
        self._holders[property_id] = self._holders.get(property_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[property_id] -= 1
            if not self._holders[property_id]:
                del self._holders[property_id]
                del self._locks[property_id]

    def __len__(self) -> int:
        return len(self._locks)


property_locks = PropertyLocks()


def parse_action(token: str) -> BookingAction:
    try:
        return BookingAction(token)
    except ValueError:
        raise InvalidInputError("Invalid action")


def billable_months(start_date: date, end_date: date) -> int:
    """
    Calendar-month difference between the two dates, at least 1.
    2024-01-15 -> 2024-01-20 is 1, 2024-01-01 -> 2024-04-01 is 3.
    """
    months = (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)
    return max(1, months)


def compute_total_amount(price: float, start_date: date, end_date: date) -> float:
    return round(float(price) * billable_months(start_date, end_date), 2)


def _validate_request(start_date: date, end_date: date, message: Optional[str]) -> str:
    if end_date <= start_date:
        raise InvalidInputError("End date must be after start date")

    message = message or ""
    max_len = get_settings().BOOKING_MESSAGE_MAX_LENGTH
    if len(message) > max_len:
        raise InvalidInputError(f"Message cannot be more than {max_len} characters")
    return message


async def create_booking(
    db: AsyncSession,
    identity: Identity,
    *,
    property_id: int,
    start_date: date,
    end_date: date,
    message: Optional[str] = None,
) -> Booking:
    message = _validate_request(start_date, end_date, message)

    async with property_locks.hold(property_id):
        try:
            prop = await crud_properties.get_property_for_update(db, property_id)
            if not prop:
                raise NotFoundError("Property not found")

            if prop.status != PropertyStatus.AVAILABLE.value:
                raise InvalidStateError("Property is not available for booking")

            if prop.owner_id == identity.user_id:
                raise ForbiddenError("You cannot book your own property")

            total_amount = compute_total_amount(prop.price, start_date, end_date)

            clashes = await crud_bookings.find_overlapping_bookings(
                db,
                property_id=property_id,
                start_date=start_date,
                end_date=end_date,
                statuses=ACTIVE_BOOKING_STATUSES,
            )
            if clashes:
                raise ConflictError("Property is already booked for these dates")

            booking = await crud_bookings.insert_booking(
                db,
                property_id=property_id,
                tenant_id=identity.user_id,
                landlord_id=prop.owner_id,
                start_date=start_date,
                end_date=end_date,
                total_amount=total_amount,
                message=message,
            )
        except Exception:
            # release the row lock before the next waiter goes in
            await db.rollback()
            raise

    logger.info(
        "booking %s created: property=%s tenant=%s %s..%s amount=%.2f",
        booking.id,
        property_id,
        identity.user_id,
        start_date,
        end_date,
        total_amount,
    )
    return await crud_bookings.get_booking(db, booking.id)


async def transition_booking(
    db: AsyncSession,
    identity: Identity,
    booking_id: int,
    action: BookingAction,
) -> Booking:
    booking = await crud_bookings.get_booking(db, booking_id)
    if not booking:
        raise NotFoundError("Booking not found")

    if action is BookingAction.CANCEL:
        if booking.tenant_id != identity.user_id:
            raise ForbiddenError("Only the tenant can cancel a booking")
    elif booking.landlord_id != identity.user_id:
        raise ForbiddenError("Only the landlord can approve or reject a booking")

    allowed_from, new_status = TRANSITIONS[action]
    if booking.status not in allowed_from:
        raise InvalidStateError(f"Cannot {action.value} a booking that is {booking.status}")

    previous = booking.status
    async with property_locks.hold(booking.property_id):
        changed = await crud_bookings.update_booking_status(
            db,
            booking.id,
            new_status,
            from_statuses=allowed_from,
            updated_at=datetime.utcnow(),
        )
    if not changed:
        current = await crud_bookings.get_booking(db, booking.id)
        raise InvalidStateError(f"Cannot {action.value} a booking that is {current.status}")

    logger.info(
        "booking %s %s -> %s by user %s", booking.id, previous, new_status, identity.user_id
    )
    return await crud_bookings.get_booking(db, booking.id)


async def list_bookings(
    db: AsyncSession,
    identity: Identity,
    role: Optional[BookingRoleFilter] = None,
) -> List[Booking]:
    return await crud_bookings.list_bookings_for_user(
        db, identity.user_id, role.value if role else None
    )


async def get_booking(db: AsyncSession, identity: Identity, booking_id: int) -> Booking:
    booking = await crud_bookings.get_booking(db, booking_id)
    if not booking:
        raise NotFoundError("Booking not found")
    if identity.user_id not in (booking.tenant_id, booking.landlord_id):
        raise ForbiddenError("Unauthorized to view this booking")
    return booking
