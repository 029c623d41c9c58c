from fastapi import FastAPI

from .admin import router as admin_router
from .appointments import router as appointments_router
from .auth import router as auth_router
from .health_journal import router as health_journal_router
from .medical_records import router as medical_records_router
from .messages import router as messages_router
from .patients import router as patients_router
from .providers import router as providers_router
from .realtime import router as realtime_router
from .reviews import router as reviews_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(patients_router)
    app.include_router(providers_router)
    app.include_router(health_journal_router)
    app.include_router(appointments_router)
    app.include_router(messages_router)
    app.include_router(medical_records_router)
    app.include_router(reviews_router)
    app.include_router(admin_router)
    app.include_router(realtime_router)
