import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.routes import admin, auth, views
from app.core.config import get_settings
from app.core.logger import setup_logging
from app.db.base import Base
from app.db.init_db import seed_demo_data
from app.db.session import engine

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


class UTF8Middleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["Content-Type"] = "application/json; charset=utf-8"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        Base.metadata.create_all(bind=engine)
    if settings.seed_demo_data:
        seed_demo_data()
    logger.info(f"{settings.project_name} started")
    yield


app = FastAPI(title=settings.project_name, lifespan=lifespan)
app.add_middleware(UTF8Middleware)

app.include_router(auth.router, tags=["auth"])
app.include_router(admin.router, prefix="/admin", tags=["admin"])
app.include_router(views.router, tags=["views"])
# must stay last: catches every other GET path
app.include_router(views.fallback_router)
