# app/crud/user.py
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.task import utcnow
from app.models.user import User
from app.schemas.user import GoogleProfile

logger = logging.getLogger(__name__)


class CRUDUser:
    async def get_by_id(self, db: AsyncSession, user_id: int) -> Optional[User]:
        q = select(User).where(User.id == user_id)
        res = await db.execute(q)
        return res.scalars().first()

    async def get_by_google_id(self, db: AsyncSession, google_id: str) -> Optional[User]:
        q = select(User).where(User.google_id == google_id)
        res = await db.execute(q)
        return res.scalars().first()

    async def upsert_google_user(self, db: AsyncSession, profile: GoogleProfile) -> User:
        """Create the user on first login; afterwards only ``last_login`` moves."""
        user = await self.get_by_google_id(db, profile.google_id)
        if user:
            user.last_login = utcnow()
        else:
            user = User(
                google_id=profile.google_id,
                email=profile.email,
                display_name=profile.display_name,
                first_name=profile.first_name,
                last_name=profile.last_name,
                picture=profile.picture,
            )
            db.add(user)
            logger.info("Created user for google_id=%s", profile.google_id)
        await db.commit()
        await db.refresh(user)
        return user

user = CRUDUser()
