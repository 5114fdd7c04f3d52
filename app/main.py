from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi_limiter import FastAPILimiter
from redis.asyncio import Redis
from structlog import get_logger

from app.config import settings
from app.core.database import engine
from app.core.logging import setup_logging
from app.routers import auth, health, properties, saved, search_history

logger = get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    redis = None
    if settings.RATE_LIMIT_ENABLED:
        redis = await Redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)
        await FastAPILimiter.init(redis)
    logger.info("Service started", rate_limit_enabled=settings.RATE_LIMIT_ENABLED)
    yield
    if redis is not None:
        await FastAPILimiter.close()
    await engine.dispose()

app = FastAPI(title="Student Housing Search Service", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(properties.router)
app.include_router(saved.router)
app.include_router(search_history.router)
app.include_router(auth.router)
app.include_router(health.router)
