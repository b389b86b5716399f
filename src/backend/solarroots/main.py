"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from solarroots.api.pages import router as pages_router
from solarroots.api.signups import router as signups_router
from solarroots.api.sites import router as sites_router
from solarroots.api.vision import router as vision_router
from solarroots.config import settings
from solarroots.context import build_app_context
from solarroots.db import Base, async_session_maker, engine
from solarroots.db.seed import seed_directory

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting SolarRoots API...")
    # A broken vision document aborts startup
    app.state.context = build_app_context(settings)

    # Create tables on startup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")

    if settings.seed_demo_data:
        async with async_session_maker() as db:
            await seed_directory(db)
            await db.commit()

    yield
    logger.info("Shutting down SolarRoots API...")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"→ {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"← {request.method} {request.url.path} {response.status_code}")
    return response


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# Include routers
app.include_router(sites_router, prefix="/api")
app.include_router(vision_router, prefix="/api")
app.include_router(signups_router, prefix="/api")
app.include_router(pages_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}
