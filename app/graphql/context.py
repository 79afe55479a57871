# app/graphql/context.py
from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from app.core.deps import get_optional_user
from app.database import get_db
from app.models.user import User


class GraphQLContext(BaseContext):
    def __init__(self, db: AsyncSession, user: Optional[User]):
        super().__init__()
        self.db = db
        self.user = user


async def get_context(
    db: AsyncSession = Depends(get_db),
    user: Optional[User] = Depends(get_optional_user),
) -> GraphQLContext:
    return GraphQLContext(db=db, user=user)
