from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from app.models.user import User
from app.schemas.user import UserClaims

logger = get_logger()

_INSERTS = {"postgresql": postgresql_insert, "sqlite": sqlite_insert}

async def upsert_user(db: AsyncSession, claims: UserClaims) -> User:
    """
    Create the user row for a subject on first sight and refresh the profile
    fields from the identity claims afterwards, in a single
    INSERT ... ON CONFLICT (id) DO UPDATE statement.
    """
    profile = {
        "email": claims.email,
        "first_name": claims.first_name,
        "last_name": claims.last_name,
        "profile_image_url": claims.profile_image_url,
    }
    insert = _INSERTS[db.get_bind().dialect.name]
    stmt = insert(User).values(id=claims.sub, **profile)
    stmt = stmt.on_conflict_do_update(
        index_elements=[User.id],
        set_={**profile, "updated_at": func.now()},
    )
    await db.execute(stmt)
    await db.commit()
    logger.info("Upserted user", user_id=claims.sub)
    return await db.get(User, claims.sub, populate_existing=True)
