"""FastAPI application — main entry point."""

import os

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portal.config import get_settings
from portal.infrastructure.database import engine, Base
from portal.core.logging import configure_logging
from portal.core.middleware import setup_middleware
from portal.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from portal.domain.models.user import User
from portal.domain.models.employee import Employee
from portal.domain.models.category import MainCategory, SubCategory
from portal.domain.models.faq import FAQ
from portal.domain.models.top_data import TopData
from portal.domain.models.system_prompt import SystemPrompt
from portal.domain.models.home_content import HomeContent
from portal.domain.models.latest_job import LatestJob
from portal.domain.models.thumbnail import Thumbnail

# Import routers
from portal.interfaces.api.admin import router as admin_router
from portal.interfaces.api.admin_content import router as admin_content_router
from portal.interfaces.api.users import router as users_router
from portal.interfaces.api.employee import router as employee_router
from portal.interfaces.api.category import router as category_router
from portal.interfaces.api.home_content import router as home_content_router
from portal.interfaces.api.latest_jobs import router as latest_jobs_router
from portal.interfaces.api.thumbnails import router as thumbnails_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def check_signing_secret(settings) -> None:
    """Refuse the fallback JWT secret in production; warn about it elsewhere."""
    if not settings.uses_default_secret:
        return
    if settings.ENVIRONMENT == "production":
        raise RuntimeError("JWT_SECRET is not set; refusing to start with the fallback secret")
    logger.warning("JWT_SECRET is not set, tokens are signed with the public fallback secret")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting content portal...", env=settings.ENVIRONMENT)
    check_signing_secret(settings)

    # Create DB tables (dev only; use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    os.makedirs(os.path.join(settings.UPLOAD_DIR, "thumbnails"), exist_ok=True)

    yield

    logger.info("Content portal stopped")


app = FastAPI(
    title="Content Portal",
    description="API Backend — curated categories, FAQs, jobs and thumbnails",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Error bodies are always {"message": ...}
register_exception_handlers(app)

# Added last so it runs first on every request
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(admin_router)
app.include_router(admin_content_router)
app.include_router(users_router)
app.include_router(employee_router)
app.include_router(category_router)
app.include_router(home_content_router)
app.include_router(latest_jobs_router)
app.include_router(thumbnails_router)

# Uploaded images; the directory is created on startup
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


@app.get("/")
def root():
    return {
        "name": "Content Portal",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
