# homelet/db/models.py

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Text,
    ForeignKey,
    Float,
    Boolean,
    JSON,
    UniqueConstraint,
    CheckConstraint,
)
from sqlalchemy.orm import relationship

from homelet.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(32), nullable=True)

    # DB column name: password_hash
    # Python attribute: hashed_password
    hashed_password = Column("password_hash", String(255), nullable=False)

    # "user" | "landlord" | "admin"
    role = Column(String(20), nullable=False, default="user")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    properties = relationship(
        "Property",
        back_populates="owner",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    favorites = relationship(
        "Favorite",
        back_populates="user",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    refresh_tokens = relationship(
        "UserRefreshToken",
        back_populates="user",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)

    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    # "apartment" | "house" | "condo" | "studio"
    type = Column(String(20), nullable=False)
    # monthly rent
    price = Column(Float, nullable=False)

    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False)

    bedrooms = Column(Integer, nullable=False, default=0)
    bathrooms = Column(Integer, nullable=False, default=0)
    area = Column(Float, nullable=False, default=0)
    parking = Column(Boolean, nullable=False, default=False)
    furnished = Column(Boolean, nullable=False, default=False)

    # list[str] as JSON in DB
    images = Column(JSON, nullable=False, default=list)

    # "available" | "rented" | "pending"
    status = Column(String(20), nullable=False, default="available", index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    owner = relationship("User", back_populates="properties")

    bookings = relationship(
        "Booking",
        back_populates="property",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    favorites = relationship(
        "Favorite",
        back_populates="property",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_property_price_non_negative"),
    )


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)

    property_id = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tenant_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # owner of the property when the booking was made
    landlord_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    # "pending" | "approved" | "rejected" | "cancelled"
    status = Column(String(20), nullable=False, default="pending", index=True)
    total_amount = Column(Float, nullable=False)
    message = Column(String(500), nullable=False, default="")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    property = relationship("Property", back_populates="bookings")
    tenant = relationship("User", foreign_keys=[tenant_id])
    landlord = relationship("User", foreign_keys=[landlord_id])

    __table_args__ = (
        CheckConstraint("end_date > start_date", name="check_booking_dates"),
        CheckConstraint("total_amount >= 0", name="check_booking_amount_non_negative"),
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'cancelled')",
            name="check_booking_status",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, property={self.property_id}, "
            f"tenant={self.tenant_id}, status={self.status})>"
        )


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    property_id = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="favorites")
    property = relationship("Property", back_populates="favorites")

    __table_args__ = (
        UniqueConstraint("user_id", "property_id", name="uq_user_property_favorite"),
    )


class UserRefreshToken(Base):
    __tablename__ = "user_refresh_tokens"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    revoked = Column(Boolean, nullable=False, default=False)

    user = relationship("User", back_populates="refresh_tokens")
