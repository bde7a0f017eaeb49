"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.model import Profile
from connector.domain.repository import ProfileRepository
from connector.domain.value import Handle, UserId
from connector.persistence.mappers import profile_to_dict, row_to_profile
from connector.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user."""
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_handle(self, handle: Handle) -> Optional[Profile]:
        """Find a profile by its handle."""
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.handle == handle.root)
            .order_by(profiles_table.c.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_all(self) -> List[Profile]:
        """List every profile, oldest first."""
        stmt = select(profiles_table).order_by(profiles_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or replace).

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        existing = await self.find_by_user(profile.user_id)

        profile_dict = profile_to_dict(profile)

        if existing:
            stmt = (
                profiles_table.update()
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = profiles_table.insert().values(**profile_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
