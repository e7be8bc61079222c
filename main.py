# main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.logging import logger
from app.core.config import get_settings
from app.core.error_handlers import setup_error_handlers, add_request_id_middleware
from app.core.rate_limiter import limiter
from app.database.core import Base, engine

# Import models to ensure they are registered with SQLAlchemy
from app.database import models  # noqa: F401
from app.users.controller import router as users_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("Creating database tables")
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.API_TITLE} started ({settings.ENVIRONMENT})")

    yield

    engine.dispose()
    logger.info(f"{settings.API_TITLE} stopped")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan,
)

# Set up error handlers
setup_error_handlers(app)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request ID middleware for better error tracking
app.middleware("http")(add_request_id_middleware)

# Rate limiting is applied per route through the limiter decorator
app.state.limiter = limiter

app.include_router(users_router, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
async def read_root():
    """A simple health-check endpoint."""
    return {"status": "ok", "message": f"Welcome to the {settings.API_TITLE}!"}
