"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fellowship.domain.model import Post
from fellowship.domain.repository import PostRepository
from fellowship.domain.value import PostId
from fellowship.persistence.mappers import post_to_dict, row_to_post
from fellowship.persistence.tables import posts_table


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
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        stmt = insert(posts_table).values(**post_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={k: v for k, v in post_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(post.id) or post

    async def increment_comment_count(
        self, post_id: PostId, delta: int
    ) -> Optional[Post]:
        """Atomically add delta to comment_count (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                comment_count=func.greatest(posts_table.c.comment_count + delta, 0),
                updated_at=datetime.now(),
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None
