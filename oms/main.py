from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .config import settings
from .database.database import init_db
from .routes import order
from .routes.errors import register_exception_handlers
from .utils.logging import get_logger


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan event handler."""
    if settings.create_tables:
        init_db()
    if not settings.platform_user_tokens:
        logger.warning(
            "PLATFORM_USER_TOKENS is empty; every authorized caller is treated as a platform user."
        )
    yield


app = FastAPI(title="Order Management API", lifespan=lifespan)

app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(order.router)
