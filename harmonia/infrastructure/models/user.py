"""SQLAlchemy model for the users table."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an account."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_image_url = Column(String(500), nullable=True)
    role = Column(String(20), nullable=False, default="patient")
    is_onboarded = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    patient_profile = relationship(
        "PatientProfileModel", back_populates="user", uselist=False
    )
    provider_profile = relationship(
        "ProviderProfileModel", back_populates="user", uselist=False
    )


__all__ = ["UserModel"]
