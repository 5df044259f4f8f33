"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from textile_billing.api.v1.router import api_router
from textile_billing.core.config import settings
from textile_billing.core.exceptions import setup_exception_handlers
from textile_billing.core.logging import setup_logging, get_logger
from textile_billing.core.integrations.observability import setup_observability
from textile_billing.db.init_db import create_tables, seed_initial_data
from textile_billing.db.session import init_db, close_db, get_engine, get_sessionmaker
from textile_billing.deps.di_container import get_container

logger = get_logger(__name__)

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Initializes logging, the database and the DI container.
    """
    # Startup
    setup_logging()
    setup_observability()
    
    await init_db()
    await create_tables(get_engine())
    if settings.SEED_DEFAULT_DATA:
        async with get_sessionmaker()() as session:
            await seed_initial_data(session)
    
    # Store container in app state for access in routes
    app.state.container = get_container()
    logger.info("Application started", extra={"version": settings.VERSION})
    
    yield
    
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Billing, payment terms and invoice data for a textile trading business",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Rate limiting middleware
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    
    # Root-level health endpoint for convenience
    from textile_billing.api.v1.endpoints.health import get_health
    app.add_api_route("/health", get_health, methods=["GET"], include_in_schema=False)
    
    setup_exception_handlers(app)
    
    return app


app = create_app()
