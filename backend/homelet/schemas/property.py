# homelet/schemas/property.py
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field

from homelet.core.enums import PropertyStatus, PropertyType


class OwnerInfo(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class PropertyBase(BaseModel):
    id: int
    title: str
    description: str
    type: str
    price: float
    address: str
    city: str
    state: str
    zip_code: str
    bedrooms: int
    bathrooms: int
    area: float
    parking: bool
    furnished: bool
    images: List[str]
    status: str
    owner_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PropertyDetail(PropertyBase):
    owner: OwnerInfo


class PropertyCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    type: PropertyType
    price: float = Field(..., ge=0)
    address: str
    city: str
    state: str
    zip_code: str
    bedrooms: int = Field(0, ge=0)
    bathrooms: int = Field(0, ge=0)
    area: float = Field(0, ge=0)
    parking: bool = False
    furnished: bool = False
    images: List[str] = []
    status: PropertyStatus = PropertyStatus.AVAILABLE


class PropertyUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=1000)
    type: Optional[PropertyType] = None
    price: Optional[float] = Field(None, ge=0)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[float] = Field(None, ge=0)
    parking: Optional[bool] = None
    furnished: Optional[bool] = None
    images: Optional[List[str]] = None
    status: Optional[PropertyStatus] = None


class PropertiesPage(BaseModel):
    items: list[PropertyDetail]
    total: int
    page: int
    per_page: int
