from contextlib import asynccontextmanager

from fastapi import FastAPI

from notiheze.infrastructure.database import engine, initialize_database
from notiheze.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the user table on startup and release connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Notiheze notifications", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
