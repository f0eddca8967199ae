# homelet/schemas/user.py
from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field

from homelet.core.enums import UserRole


class UserBase(BaseModel):
    id: int
    name: str
    email: EmailStr
    phone: Optional[str] = None
    role: str

    # Pydantic v2 style (replaces orm_mode = True)
    model_config = {"from_attributes": True}


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    phone: Optional[str] = None
    # admins are only made by other admins
    role: Literal["user", "landlord"] = "user"


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserRoleUpdate(BaseModel):
    """
    Admin role change body: { "role": "user" | "landlord" | "admin" }
    """
    role: UserRole


class UserOut(UserBase):
    """
    Public-facing user data (e.g. auth token payload).
    """
    pass
