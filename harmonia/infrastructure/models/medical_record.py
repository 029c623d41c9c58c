"""SQLAlchemy model for medical records."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class MedicalRecordModel(Base):
    __tablename__ = "medical_records"

    id = Column(String(36), primary_key=True, default=generate_id)
    patient_id = Column(
        String(36),
        ForeignKey("patient_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    provider_id = Column(String(36), ForeignKey("provider_profiles.id"), nullable=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    record_type = Column(String(30), nullable=False)
    file_url = Column(String(500), nullable=True, index=True)
    file_name = Column(String(255), nullable=True)
    file_size = Column(Integer, nullable=True)
    record_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    provider = relationship("ProviderProfileModel", lazy="joined")


__all__ = ["MedicalRecordModel"]
