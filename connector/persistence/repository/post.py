"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.model import Post
from connector.domain.repository import PostRepository
from connector.domain.value import PostId
from connector.persistence.mappers import post_to_dict, row_to_post
from connector.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_all(self) -> List[Post]:
        """List every post, newest first."""
        stmt = select(posts_table).order_by(posts_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or replace).

        Likes and comments are written with the post as one document.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        existing = await self.find_by_id(post.id)

        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
