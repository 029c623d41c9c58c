"""SQLAlchemy model for patient profiles."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class PatientProfileModel(Base):
    __tablename__ = "patient_profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    date_of_birth = Column(DateTime, nullable=True)
    gender = Column(String(50), nullable=True)
    cultural_background = Column(String(120), nullable=True)
    primary_language = Column(String(80), nullable=True)
    secondary_languages = Column(JSON, nullable=False, default=list)
    emergency_contact_name = Column(String(120), nullable=True)
    emergency_contact_phone = Column(String(40), nullable=True)
    medical_conditions = Column(JSON, nullable=False, default=list)
    medications = Column(JSON, nullable=False, default=list)
    allergies = Column(JSON, nullable=False, default=list)
    cultural_practices = Column(Text, nullable=True)
    dietary_restrictions = Column(Text, nullable=True)
    insurance_provider = Column(String(120), nullable=True)
    insurance_policy_number = Column(String(80), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    user = relationship("UserModel", back_populates="patient_profile", lazy="joined")


__all__ = ["PatientProfileModel"]
