"""SQLAlchemy model for health journal entries."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from harmonia.infrastructure.database import Base
from harmonia.utils import generate_id, now_in_app_naive_datetime


class HealthJournalEntryModel(Base):
    __tablename__ = "health_journal_entries"

    id = Column(String(36), primary_key=True, default=generate_id)
    patient_id = Column(
        String(36),
        ForeignKey("patient_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    entry_date = Column(DateTime, nullable=False)
    blood_pressure_systolic = Column(Integer, nullable=True)
    blood_pressure_diastolic = Column(Integer, nullable=True)
    blood_glucose = Column(Integer, nullable=True)
    weight = Column(Numeric(5, 2), nullable=True)
    weight_unit = Column(String(10), nullable=False, default="lbs")
    mood = Column(String(50), nullable=True)
    sleep_hours = Column(Numeric(3, 1), nullable=True)
    sleep_quality = Column(String(50), nullable=True)
    physical_activity = Column(Text, nullable=True)
    traditional_practices = Column(Text, nullable=True)
    community_connection = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["HealthJournalEntryModel"]
