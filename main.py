"""ASGI entry point: ``uvicorn main:app``."""

from harmonia.main import app, create_app

__all__ = ["app", "create_app"]
