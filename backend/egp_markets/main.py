# backend/egp_markets/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .errors import register_error_handlers
from .routers import currencies, gold, news, silver, stocks
from .services.data_providers import DataAdapters, build_adapters
from .utils.config import Settings, load_settings


def create_app(settings: Optional[Settings] = None, adapters: Optional[DataAdapters] = None) -> FastAPI:
    """Composition root: settings are resolved once here and the chosen adapters live on app.state."""
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    adapters = adapters or build_adapters(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        adapters.close()

    app = FastAPI(title="EGP Markets API", lifespan=lifespan)
    app.state.settings = settings
    app.state.adapters = adapters

    # --- CORS for the local dashboard ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/")
    def root():
        return {"message": "EGP Markets API. See /docs", "dataSource": settings.data_source}

    # Mount routers under /api
    app.include_router(gold.router, prefix="/api/gold", tags=["gold"])
    app.include_router(silver.router, prefix="/api/silver", tags=["silver"])
    app.include_router(stocks.router, prefix="/api/stocks", tags=["stocks"])
    app.include_router(currencies.router, prefix="/api", tags=["currencies"])
    app.include_router(news.router, prefix="/api/news", tags=["news"])
    return app


app = create_app()
