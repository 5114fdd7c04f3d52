from fastapi import APIRouter, Depends
from structlog import get_logger
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import text

from app.config import settings
from app.core.database import get_db

logger = get_logger()
router = APIRouter(prefix="/api", tags=["health"])

@router.get("/health")
async def health():
    return {"status": "ok"}

@router.get("/health/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    details = {"status": "ok", "checks": {}}

    # Database check
    try:
        await db.execute(text("SELECT 1"))
        details["checks"]["database"] = "ok"
    except Exception as e:
        logger.warning("health db fail", error=str(e))
        details["checks"]["database"] = "fail"
        details["status"] = "degraded"

    # Redis backs the rate limiter only
    if settings.RATE_LIMIT_ENABLED:
        redis = Redis.from_url(settings.REDIS_URL, encoding="utf-8", decode_responses=True)
        try:
            pong = await redis.ping()
            details["checks"]["redis"] = "ok" if pong else "fail"
        except Exception as e:
            logger.warning("health redis fail", error=str(e))
            details["checks"]["redis"] = "fail"
            details["status"] = "degraded"
        finally:
            await redis.aclose()
    else:
        details["checks"]["redis"] = "disabled"

    return details
