"""FastAPI application for the golf wager API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, get_settings
from database.connection import db
from database.repositories import SettlementRepositoryDB
from settlements import InMemorySettlementRepository, NotificationSender, SettlementService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, notifier: Optional[NotificationSender] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Pick the settlement store: PostgreSQL when DATABASE_URL is set, memory otherwise."""
        if settings.database_url:
            await db.initialize(dsn=settings.database_url)
            await db.apply_schema()
            repository = SettlementRepositoryDB(db.pool)
        else:
            logger.warning("DATABASE_URL not set; settlements are kept in memory")
            repository = InMemorySettlementRepository()
        app.state.settlement_service = SettlementService(repository, notifier)
        yield
        if settings.database_url:
            await db.close()

    app = FastAPI(
        title="Golf Wager API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import games, settlements
    app.include_router(games.router, prefix="/api/games", tags=["games"])
    app.include_router(settlements.router, prefix="/api/settlements", tags=["settlements"])

    @app.get("/api/health")
    async def health():
        if not settings.database_url:
            return {"status": "ok", "database": None}
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
