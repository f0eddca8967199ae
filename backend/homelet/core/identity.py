# homelet/core/identity.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """
    Who is calling. Passed explicitly into the booking service instead of
    the service looking the current user up itself.
    """

    user_id: int
    email: str
    role: str

    @classmethod
    def from_user(cls, user) -> "Identity":
        return cls(user_id=user.id, email=user.email, role=user.role)
