"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fellowship.domain.model import Comment, CommentEdit, CommentReport
from fellowship.domain.repository import CommentRepository
from fellowship.domain.value import CommentId, CommentStatus, PostId, UserId
from fellowship.persistence.mappers import (
    comment_to_dict,
    edit_to_dict,
    like_to_dict,
    report_to_dict,
    row_to_comment,
    row_to_edit,
    row_to_like,
    row_to_report,
)
from fellowship.persistence.tables import (
    comment_edits_table,
    comment_likes_table,
    comment_reports_table,
    comments_table,
)

_ACTIVE = CommentStatus.ACTIVE.value


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Likes and reports use composite primary keys on (comment, user) and
    INSERT ... ON CONFLICT DO NOTHING, so membership is decided by the
    database. Stored counters are recomputed from those tables in the same
    statement that follows each change.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, rows: Sequence[Dict[str, Any]]) -> List[Comment]:
        """Load likes, reports and edits for comment rows in three queries."""
        if not rows:
            return []

        ids = [row["id"] for row in rows]
        likes = defaultdict(list)
        reports = defaultdict(list)
        edits = defaultdict(list)

        result = await self.session.execute(
            select(comment_likes_table).where(comment_likes_table.c.comment_id.in_(ids))
        )
        for like_row in result.fetchall():
            like = like_row._asdict()
            likes[like["comment_id"]].append(row_to_like(like))

        result = await self.session.execute(
            select(comment_reports_table).where(
                comment_reports_table.c.comment_id.in_(ids)
            )
        )
        for report_row in result.fetchall():
            report = report_row._asdict()
            reports[report["comment_id"]].append(row_to_report(report))

        result = await self.session.execute(
            select(comment_edits_table)
            .where(comment_edits_table.c.comment_id.in_(ids))
            .order_by(comment_edits_table.c.edited_at)
        )
        for edit_row in result.fetchall():
            edit = edit_row._asdict()
            edits[edit["comment_id"]].append(row_to_edit(edit))

        return [
            row_to_comment(
                row,
                likes=likes[row["id"]],
                reports=reports[row["id"]],
                edits=edits[row["id"]],
            )
            for row in rows
        ]

    async def _hydrate_one(self, row: Any) -> Optional[Comment]:
        if row is None:
            return None
        comments = await self._hydrate([row._asdict()])
        return comments[0]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        return await self._hydrate_one(result.fetchone())

    async def find_top_level(
        self,
        post_id: PostId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find active top-level comments of a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status == _ACTIVE)
            .order_by(comments_table.c.created_at)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate([row._asdict() for row in result.fetchall()])

    async def find_children(
        self,
        parent_id: CommentId,
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)

        if not include_inactive:
            stmt = stmt.where(comments_table.c.status == _ACTIVE)

        stmt = stmt.order_by(comments_table.c.created_at)

        result = await self.session.execute(stmt)
        return await self._hydrate([row._asdict() for row in result.fetchall()])

    async def count_active_children(self, parent_id: CommentId) -> int:
        """Count active direct children of a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.status == _ACTIVE)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_active_top_level(self, post_id: PostId) -> int:
        """Count active top-level comments of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status == _ACTIVE)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        stmt = insert(comments_table).values(**comment_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={k: v for k, v in comment_dict.items() if k not in ("id", "post_id")},
        )
        await self.session.execute(stmt)

        # Child records carried by the model (new comments have none)
        for like in comment.likes.values():
            await self.session.execute(
                insert(comment_likes_table)
                .values(**like_to_dict(comment.id, like))
                .on_conflict_do_nothing()
            )
        for report in comment.reports.values():
            await self.session.execute(
                insert(comment_reports_table)
                .values(**report_to_dict(comment.id, report))
                .on_conflict_do_nothing()
            )

        await self.session.flush()
        return await self.find_by_id(comment.id) or comment

    async def transition_status(
        self,
        comment_id: CommentId,
        expected: CommentStatus,
        target: CommentStatus,
    ) -> Optional[Comment]:
        """Compare-and-set the status column."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == expected.value)
            .values(status=target.value, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return await self._hydrate_one(row)

    async def update_reply_count(
        self, comment_id: CommentId, reply_count: int
    ) -> Optional[Comment]:
        """Overwrite the reply count."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=reply_count)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return await self._hydrate_one(row)

    async def update_content(
        self, comment_id: CommentId, content: str, edit: CommentEdit
    ) -> Optional[Comment]:
        """Replace content of an active comment and append the edit."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == _ACTIVE)
            .values(
                content=content,
                is_edited=True,
                last_edited_at=edit.edited_at,
                updated_at=edit.edited_at,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or not active
            return None

        await self.session.execute(
            insert(comment_edits_table).values(**edit_to_dict(comment_id, edit))
        )
        await self.session.flush()
        return await self._hydrate_one(row)

    async def _sync_like_count(self, comment_id: CommentId) -> None:
        live = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
            .scalar_subquery()
        )
        await self.session.execute(
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(like_count=live)
        )

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Insert a like unless one exists for this user."""
        stmt = (
            insert(comment_likes_table)
            .values(comment_id=comment_id, user_id=user_id, created_at=datetime.now())
            .on_conflict_do_nothing(
                index_elements=[
                    comment_likes_table.c.comment_id,
                    comment_likes_table.c.user_id,
                ]
            )
            .returning(comment_likes_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        added = result.fetchone() is not None
        if added:
            await self._sync_like_count(comment_id)
        await self.session.flush()
        return added

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Delete this user's like if present."""
        stmt = (
            delete(comment_likes_table)
            .where(
                and_(
                    comment_likes_table.c.comment_id == comment_id,
                    comment_likes_table.c.user_id == user_id,
                )
            )
            .returning(comment_likes_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        removed = result.fetchone() is not None
        if removed:
            await self._sync_like_count(comment_id)
        await self.session.flush()
        return removed

    async def add_report(self, comment_id: CommentId, report: CommentReport) -> bool:
        """Insert a report unless this reporter already filed one."""
        stmt = (
            insert(comment_reports_table)
            .values(**report_to_dict(comment_id, report))
            .on_conflict_do_nothing(
                index_elements=[
                    comment_reports_table.c.comment_id,
                    comment_reports_table.c.reported_by,
                ]
            )
            .returning(comment_reports_table.c.reported_by)
        )
        result = await self.session.execute(stmt)
        recorded = result.fetchone() is not None
        if recorded:
            live = (
                select(func.count())
                .select_from(comment_reports_table)
                .where(comment_reports_table.c.comment_id == comment_id)
                .scalar_subquery()
            )
            await self.session.execute(
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(report_count=live)
            )
        await self.session.flush()
        return recorded
