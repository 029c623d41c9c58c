"""Medical record and stored object schemas."""

from datetime import datetime

from pydantic import Field

from .auth import UserSummaryRead
from .base import APIModel


class MedicalRecordCreate(APIModel):
    patient_id: str | None = None
    title: str = Field(..., min_length=1)
    description: str | None = None
    record_type: str
    record_date: datetime
    file_url: str | None = None
    file_name: str | None = None
    file_size: int | None = Field(default=None, ge=0)


class MedicalRecordRead(APIModel):
    id: str
    patient_id: str
    provider_id: str | None
    title: str
    description: str | None
    record_type: str
    record_date: datetime
    file_url: str | None
    file_name: str | None
    file_size: int | None
    created_at: datetime | None


class RecordProviderRead(APIModel):
    id: str
    specialty: str
    user: UserSummaryRead


class MedicalRecordDetailRead(MedicalRecordRead):
    provider: RecordProviderRead | None = None


class UploadUrlResponse(APIModel):
    upload_url: str = Field(..., alias="uploadURL")


class MedicalRecordFileRequest(APIModel):
    file_url: str | None = Field(default=None, alias="fileURL")


class MedicalRecordFileResponse(APIModel):
    object_path: str
