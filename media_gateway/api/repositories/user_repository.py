import uuid
from typing import List

from sqlalchemy import insert, select

from media_gateway.api.model.user import User
from media_gateway.api.repositories.base_repository import CatalogRepository
from media_gateway.api.repositories.interfaces import IUserRepository

USER_NOT_FOUND = "User not found"


class UserRepository(CatalogRepository, IUserRepository):
    async def create_user(self, username: str, email: str) -> User:
        stmt = insert(User).values(username=username, email=email).returning(User)
        return await self._insert_returning(stmt)

    async def list_users(self) -> List[User]:
        return await self._fetch_all(select(User))

    async def get_user_by_id(self, user_id: uuid.UUID) -> User:
        return await self._fetch_first(select(User).where(User.user_id == user_id), USER_NOT_FOUND)

    async def get_user_by_username(self, username: str) -> User:
        return await self._fetch_first(select(User).where(User.username == username), USER_NOT_FOUND)

    async def get_user_by_email(self, email: str) -> User:
        return await self._fetch_first(select(User).where(User.email == email), USER_NOT_FOUND)
