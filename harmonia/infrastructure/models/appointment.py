"""SQLAlchemy model for appointments."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class AppointmentModel(Base):
    """Database representation of a booked visit."""

    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=generate_id)
    patient_id = Column(
        String(36), ForeignKey("patient_profiles.id"), nullable=False, index=True
    )
    provider_id = Column(
        String(36), ForeignKey("provider_profiles.id"), nullable=False, index=True
    )
    appointment_date = Column(DateTime, nullable=False)
    duration = Column(Integer, nullable=False, default=30)
    type = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default="scheduled")
    is_virtual = Column(Boolean, nullable=False, default=False)
    meeting_link = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    patient = relationship("PatientProfileModel", lazy="joined")
    provider = relationship("ProviderProfileModel", lazy="joined")


__all__ = ["AppointmentModel"]
