"""SQLAlchemy model for provider profiles."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class ProviderProfileModel(Base):
    """Database representation of a provider's searchable profile."""

    __tablename__ = "provider_profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    specialty = Column(String(120), nullable=False)
    cultural_backgrounds = Column(JSON, nullable=False, default=list)
    languages_spoken = Column(JSON, nullable=False, default=list)
    license_number = Column(String(80), nullable=True)
    years_of_experience = Column(Integer, nullable=True)
    education = Column(Text, nullable=True)
    certifications = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=True)
    cultural_competency_statement = Column(Text, nullable=True)
    telehealth = Column(Boolean, nullable=False, default=False)
    in_person = Column(Boolean, nullable=False, default=False)
    accepts_insurance = Column(Boolean, nullable=False, default=False)
    location = Column(String(200), nullable=True)
    rating = Column(Numeric(3, 2), nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    subscription_tier = Column(String(30), nullable=False, default="basic")
    is_verified = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    user = relationship("UserModel", back_populates="provider_profile", lazy="joined")


__all__ = ["ProviderProfileModel"]
