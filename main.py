# main.py
"""
App factory. Run with `uvicorn --factory main:create_app` or `python server.py`.
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from config import get_settings
from database import Database
from logger import init_logging
from routers.errors import register_error_handlers
from routers.product_service import router as product_service_router
from services.product_service import ProductService

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    if database is None:
        settings = get_settings()
        init_logging(settings.log_level, settings.log_time_format)
        database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.create_database()
        logger.info("Product service started")
        yield
        database.close()
        logger.info("Product service stopped")

    app = FastAPI(title="Product Service API", version="1.0.0", lifespan=lifespan)
    app.state.product_service = ProductService(database)

    register_error_handlers(app)
    app.include_router(product_service_router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path,
                    response.status_code, (time.perf_counter() - start) * 1000)
        return response

    @app.get("/")
    def root():
        return {"message": "Product service running"}

    return app

