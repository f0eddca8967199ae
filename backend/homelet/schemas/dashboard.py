# homelet/schemas/dashboard.py
from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Numbers for the dashboard cards. Fields that don't apply to the role stay 0."""

    total_properties: int = 0
    available_properties: int = 0
    rented_properties: int = 0
    pending_bookings: int = 0
    total_bookings: int = 0
    monthly_revenue: float = 0
    saved_properties: int = 0


class FavoriteToggle(BaseModel):
    property_id: int
