"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from harmonia.config import get_settings
from harmonia.infrastructure.database import engine, initialize_database
from harmonia.infrastructure.notifications import NotificationBridge
from harmonia.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release resources on shutdown."""

    initialize_database()
    logger.info("Harmonia API started")
    yield
    app.state.notification_bridge.shutdown()
    engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the Harmonia FastAPI application."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title="Harmonia API", lifespan=lifespan)
    app.state.notification_bridge = NotificationBridge()

    # Session cookies require credentialed CORS from the web client.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
