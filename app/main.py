# app/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config.settings import settings
from app.config.database import engine
from app.core.logging_config import setup_logging
from app.core.middleware import setup_middleware, setup_exception_handlers
from app.api.v1.router import api_router
from app.shared.database.models import Base

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    logger.info("🚀 Pockets API Starting...")
    logger.info(f"📍 Version: {settings.version}")
    logger.info(f"🌍 Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"🗄️  Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else settings.database_url}")

    if settings.create_schema_on_startup:
        Base.metadata.create_all(bind=engine)

    yield

    # Shutdown
    logger.info("🛑 Pockets API Shutting down...")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Transferencias entre cuentas y bolsillos",
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router, prefix="/api/v1")

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "🚀 Pockets API",
        "version": settings.version,
        "status": "running",
        "environment": "production" if not settings.debug else "development",
        "docs": "/docs",
        "api": "/api/v1"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
