"""SQLAlchemy model for provider reviews."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class ProviderReviewModel(Base):
    __tablename__ = "provider_reviews"

    id = Column(String(36), primary_key=True, default=generate_id)
    patient_id = Column(
        String(36), ForeignKey("patient_profiles.id"), nullable=False, index=True
    )
    provider_id = Column(
        String(36), ForeignKey("provider_profiles.id"), nullable=False, index=True
    )
    appointment_id = Column(String(36), ForeignKey("appointments.id"), nullable=True)
    rating = Column(Integer, nullable=False)
    cultural_competency_rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    is_anonymous = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    patient = relationship("PatientProfileModel", lazy="joined")


__all__ = ["ProviderReviewModel"]
