# homelet/schemas/booking.py
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel


class BookingCreate(BaseModel):
    property_id: int
    start_date: date
    end_date: date
    message: Optional[str] = None


class BookingActionIn(BaseModel):
    # "approve" | "reject" | "cancel"; checked by services.bookings.parse_action
    action: str


class BookingParty(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class BookingProperty(BaseModel):
    id: int
    title: str
    price: float
    city: str
    address: str
    images: List[str] = []

    model_config = {"from_attributes": True}


class BookingOut(BaseModel):
    id: int
    property_id: int
    tenant_id: int
    landlord_id: int
    start_date: date
    end_date: date
    status: str
    total_amount: float
    message: str = ""
    created_at: datetime
    updated_at: datetime

    property: Optional[BookingProperty] = None
    tenant: Optional[BookingParty] = None
    landlord: Optional[BookingParty] = None

    # Pydantic v2 style – replaces orm_mode=True
    model_config = {"from_attributes": True}
