import secrets

from sqlalchemy import select
from tokengate.models.user import User
from tokengate.repositories.base import BaseRepository
from sqlalchemy.ext.asyncio import AsyncSession

class UserRepository(BaseRepository[User]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_username(self, username: str) -> User | None:
        query = select(User).where(User.username == username)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def lookup_by_credentials(self, username: str, password: str, phone: str) -> User | None:
        user = await self.get_by_username(username)
        if not user:
            return None
        password_ok = secrets.compare_digest(user.password.encode(), password.encode())
        phone_ok = secrets.compare_digest(user.phone.encode(), phone.encode())
        if password_ok and phone_ok:
            return user
        return None
