"""Medical record routes and access to the files they reference."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from harmonia.application.use_cases.medical_records import (
    create_medical_record,
    find_accessible_record,
    list_medical_records,
)
from harmonia.domain.entities import User
from harmonia.infrastructure.database import get_db
from harmonia.infrastructure.storage import (
    OBJECT_PATH_PREFIX,
    download_object,
    generate_upload_url,
    normalize_object_path,
)
from harmonia.interfaces.api.dependencies import get_current_user
from harmonia.interfaces.api.routes_helpers import (
    http_error_from,
    medical_record_detail_to_read,
)
from harmonia.interfaces.api.schemas import (
    MedicalRecordCreate,
    MedicalRecordDetailRead,
    MedicalRecordFileRequest,
    MedicalRecordFileResponse,
    MedicalRecordRead,
    UploadUrlResponse,
)

router = APIRouter(tags=["medical-records"])
logger = logging.getLogger(__name__)


def _storage_unavailable(exc: RuntimeError) -> HTTPException:
    logger.error("Object storage unavailable: %s", exc)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="File storage is not available",
    )


@router.post(
    "/api/medical-records",
    response_model=MedicalRecordRead,
    status_code=status.HTTP_201_CREATED,
)
def file_medical_record(
    payload: MedicalRecordCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MedicalRecordRead:
    try:
        record = create_medical_record(db, user=current_user, **payload.model_dump())
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return MedicalRecordRead.model_validate(record)


@router.get("/api/medical-records", response_model=list[MedicalRecordDetailRead])
def read_medical_records(
    patient_id: str | None = Query(None, alias="patientId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MedicalRecordDetailRead]:
    try:
        records = list_medical_records(db, user=current_user, patient_id=patient_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return [medical_record_detail_to_read(detail) for detail in records]


@router.post("/api/objects/upload", response_model=UploadUrlResponse)
def request_upload_url(_: User = Depends(get_current_user)) -> UploadUrlResponse:
    """Return a short-lived signed URL the client uploads a file to."""

    try:
        upload_url = generate_upload_url()
    except RuntimeError as exc:
        raise _storage_unavailable(exc) from exc
    return UploadUrlResponse(upload_url=upload_url)


@router.put("/api/medical-record-files", response_model=MedicalRecordFileResponse)
def register_medical_record_file(
    payload: MedicalRecordFileRequest,
    _: User = Depends(get_current_user),
) -> MedicalRecordFileResponse:
    if not payload.file_url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="fileURL is required"
        )
    try:
        object_path = normalize_object_path(payload.file_url)
    except RuntimeError as exc:
        raise _storage_unavailable(exc) from exc
    return MedicalRecordFileResponse(object_path=object_path)


@router.get("/objects/{object_path:path}")
def read_object(
    object_path: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    """Stream a stored file referenced by a record the caller may read."""

    full_path = f"{OBJECT_PATH_PREFIX}{object_path}"
    try:
        find_accessible_record(db, user=current_user, file_url=full_path)
    except ValueError as exc:
        raise http_error_from(exc) from exc

    try:
        stored = download_object(full_path)
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Object not found"
        ) from exc
    except RuntimeError as exc:
        raise _storage_unavailable(exc) from exc

    return Response(
        content=stored.data,
        media_type=stored.content_type or "application/octet-stream",
    )
