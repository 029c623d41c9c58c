"""Azure Blob Storage utilities for medical record files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from urllib.parse import unquote, urlparse

from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import (
    BlobSasPermissions,
    BlobServiceClient,
    ContainerClient,
    generate_blob_sas,
)

from harmonia.config import get_settings
from harmonia.utils import generate_id

OBJECT_PATH_PREFIX = "/objects/"
UPLOAD_DIRECTORY = "uploads"


@dataclass(frozen=True)
class StoredObject:
    """Blob contents downloaded from the container."""

    data: bytes
    content_type: str | None


@lru_cache
def _get_blob_service_client() -> BlobServiceClient:
    settings = get_settings()
    if not settings.azure_storage_connection_string:
        msg = "Azure storage connection string is not configured"
        raise RuntimeError(msg)
    return BlobServiceClient.from_connection_string(
        settings.azure_storage_connection_string
    )


@lru_cache
def _get_container_name() -> str:
    settings = get_settings()
    if not settings.azure_storage_container_name:
        msg = "Azure storage container name is not configured"
        raise RuntimeError(msg)
    return settings.azure_storage_container_name


@lru_cache
def _get_container_client() -> ContainerClient:
    service_client = _get_blob_service_client()
    container_name = _get_container_name()
    try:
        service_client.create_container(container_name)
    except ResourceExistsError:
        pass
    return service_client.get_container_client(container_name)


def generate_upload_url() -> str:
    """Return a write-only signed URL for a fresh blob in the container."""

    container_client = _get_container_client()
    service_client = _get_blob_service_client()
    blob_name = f"{UPLOAD_DIRECTORY}/{generate_id()}"
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=get_settings().upload_url_ttl_minutes
    )
    account_key = getattr(service_client.credential, "account_key", None)
    if not account_key:
        msg = "Azure storage credential cannot sign upload URLs"
        raise RuntimeError(msg)
    sas_token = generate_blob_sas(
        account_name=service_client.account_name,
        container_name=container_client.container_name,
        blob_name=blob_name,
        account_key=account_key,
        permission=BlobSasPermissions(create=True, write=True),
        expiry=expiry,
    )
    blob_client = container_client.get_blob_client(blob_name)
    return f"{blob_client.url}?{sas_token}"


def normalize_object_path(file_url: str, *, container_url: str | None = None) -> str:
    """Map a storage URL onto the ``/objects/...`` path served by the API.

    URLs that already use the API path are returned unchanged, as are URLs
    that point outside the configured container.
    """

    if file_url.startswith(OBJECT_PATH_PREFIX):
        return file_url

    if container_url is None:
        container_url = _get_container_client().url
    parsed = urlparse(file_url)
    container = urlparse(container_url)
    if parsed.netloc.lower() != container.netloc.lower():
        return file_url

    container_path = container.path.rstrip("/") + "/"
    if not parsed.path.startswith(container_path):
        return file_url
    blob_name = unquote(parsed.path[len(container_path) :])
    if not blob_name:
        return file_url
    return f"{OBJECT_PATH_PREFIX}{blob_name}"


def download_object(object_path: str) -> StoredObject:
    """Download the blob addressed by ``object_path``."""

    blob_name = object_path
    if blob_name.startswith(OBJECT_PATH_PREFIX):
        blob_name = blob_name[len(OBJECT_PATH_PREFIX) :]
    container_client = _get_container_client()
    blob_client = container_client.get_blob_client(blob_name)
    try:
        stream = blob_client.download_blob()
    except ResourceNotFoundError as exc:  # pragma: no cover - network edge case
        raise FileNotFoundError(object_path) from exc
    content_settings = getattr(stream.properties, "content_settings", None)
    content_type = getattr(content_settings, "content_type", None)
    return StoredObject(data=stream.readall(), content_type=content_type)


__all__ = [
    "OBJECT_PATH_PREFIX",
    "StoredObject",
    "download_object",
    "generate_upload_url",
    "normalize_object_path",
]
