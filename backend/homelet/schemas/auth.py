# homelet/schemas/auth.py
from typing import Optional
from pydantic import BaseModel

from homelet.schemas.user import UserOut


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: Optional[UserOut] = None

    model_config = {"from_attributes": True}


class RefreshIn(BaseModel):
    refresh_token: str
