"""
backend/scorecast/main.py

Purpose:
    FastAPI application bootstrap: logging, middleware/router wiring and the
    aggregator lifecycle (built once from settings, HTTP clients closed on
    shutdown).

Dependencies:
    - scorecast.config
    - scorecast.services.aggregation_service
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scorecast.config import Settings, settings
from scorecast.middleware.logging import StructuredLoggingMiddleware, setup_logging
from scorecast.routers import matches
from scorecast.services.aggregation_service import MatchAggregator

logger = logging.getLogger("scorecast")

_SOURCE_KEYS = {
    "football_api": "FOOTBALL_API_KEY",
    "odds_api": "ODDS_API_KEY",
    "tavily": "TAVILY_API_KEY",
    "gemini": "GOOGLE_API_KEY",
}


def configured_sources(config: Settings) -> dict[str, bool]:
    return {source: bool(getattr(config, key, "").strip()) for source, key in _SOURCE_KEYS.items()}


def create_app(config: Settings = settings, aggregator: MatchAggregator | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        app.state.aggregator = aggregator or MatchAggregator(config)
        missing = [name for name, ok in configured_sources(config).items() if not ok]
        if missing:
            logger.warning("Sources without credentials (will return empty): %s", ", ".join(missing))
        logger.info("ScoreCast backend started")
        yield
        await app.state.aggregator.aclose()
        logger.info("ScoreCast backend stopped")

    app = FastAPI(title="ScoreCast API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in config.BACKEND_CORS_ORIGINS.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(matches.router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "sources": configured_sources(config)}

    return app


app = create_app()
