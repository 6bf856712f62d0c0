"""FastAPI application entry point."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import auth, bookmarks, health, users
from core.config import get_settings
from core.exceptions import AuthenticationError, AuthorizationError, ConflictError, ServiceError
from db.session import create_tables


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
    """Create tables on startup."""
    await create_tables()
    logger.info("Database tables ready")
    yield


app = FastAPI(
    title="Bookmarks API",
    description="Email/password accounts with per-user bookmark management.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def forbidden_handler(request: Request, exc: ServiceError) -> JSONResponse:  # noqa: ARG001
    """Translate a domain error into a 403 response carrying its message."""
    return JSONResponse(status_code=403, content={"detail": exc.message})


# All three are reported as Forbidden, with the service's message as detail
app.add_exception_handler(AuthenticationError, forbidden_handler)
app.add_exception_handler(ConflictError, forbidden_handler)
app.add_exception_handler(AuthorizationError, forbidden_handler)

app.include_router(health.router)
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(bookmarks.router, prefix=settings.api_prefix)
