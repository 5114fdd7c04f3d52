from typing import List

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from structlog import get_logger

from app.models.property import Property
from app.models.saved_property import SavedProperty

logger = get_logger()


class PropertyAlreadySaved(ValueError):
    pass


class PropertyNotFound(ValueError):
    pass


def _same_pair(user_id: str, property_id: int):
    return and_(SavedProperty.user_id == user_id, SavedProperty.property_id == property_id)


async def get_saved_properties(db: AsyncSession, user_id: str) -> List[SavedProperty]:
    result = await db.execute(
        select(SavedProperty)
        .options(selectinload(SavedProperty.property))
        .where(SavedProperty.user_id == user_id)
        .order_by(SavedProperty.created_at.desc(), SavedProperty.id.desc())
    )
    return list(result.scalars().all())


async def is_property_saved(db: AsyncSession, user_id: str, property_id: int) -> bool:
    result = await db.execute(select(SavedProperty.id).where(_same_pair(user_id, property_id)))
    return result.first() is not None


async def save_property(db: AsyncSession, user_id: str, property_id: int) -> SavedProperty:
    """
    Save a listing for a user.

    The existence check only short-circuits the common case; two concurrent
    saves can both pass it, so the unique constraint on (user_id, property_id)
    has the final word. An integrity error while the listing still exists is
    that constraint; otherwise the listing was deleted in the meantime.
    """
    if await is_property_saved(db, user_id, property_id):
        raise PropertyAlreadySaved(f"Property {property_id} already saved")
    if await db.get(Property, property_id) is None:
        raise PropertyNotFound(f"Property {property_id} not found")

    saved = SavedProperty(user_id=user_id, property_id=property_id)
    db.add(saved)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        if await db.get(Property, property_id) is None:
            logger.warning("Property deleted while saving", user_id=user_id, property_id=property_id)
            raise PropertyNotFound(f"Property {property_id} not found")
        logger.warning("Concurrent save rejected by unique constraint", user_id=user_id, property_id=property_id)
        raise PropertyAlreadySaved(f"Property {property_id} already saved")
    await db.refresh(saved)
    return saved


async def unsave_property(db: AsyncSession, user_id: str, property_id: int) -> bool:
    result = await db.execute(delete(SavedProperty).where(_same_pair(user_id, property_id)))
    await db.commit()
    return result.rowcount > 0
