from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.infrastructure.database import engine, initialize_database
from app.infrastructure.notifications import build_push_transport
from app.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database and push transport on startup, release them on shutdown."""

    initialize_database()
    app.state.push_transport = build_push_transport(get_settings())
    yield
    app.state.push_transport.close()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="SmartCart Notifications", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
