from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router as prices_router
from app.core.config import settings
from app.core.logger import configure_logging
from app.services.price_store import PriceRecordStore

logger = structlog.get_logger(__name__)


def create_app(store: PriceRecordStore | None = None) -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "service.startup",
            reference_price=app.state.price_store.reference_price,
        )
        yield
        logger.info("service.shutdown", records=len(app.state.price_store))

    app = FastAPI(
        title="Deal Sheet API",
        description="Promotional price records and deal payloads for the shopping companion",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.price_store = store if store is not None else PriceRecordStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(prices_router)

    @app.api_route("/health", methods=["GET", "HEAD"])
    def health_check():
        return {
            "status": "healthy",
            "service": "dealsheet-api",
            "records": len(app.state.price_store),
        }

    return app


app = create_app()
