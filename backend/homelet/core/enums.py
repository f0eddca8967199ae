# homelet/core/enums.py
from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    LANDLORD = "landlord"
    ADMIN = "admin"


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    CONDO = "condo"
    STUDIO = "studio"


class PropertyStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"
    PENDING = "pending"


class BookingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


# pending + approved hold the dates; the others free them again
ACTIVE_BOOKING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.APPROVED.value)


class BookingAction(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"
    CANCEL = "cancel"


class BookingRoleFilter(str, Enum):
    TENANT = "tenant"
    LANDLORD = "landlord"
