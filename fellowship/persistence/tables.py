"""SQLAlchemy table definitions for Fellowship.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (owned by the platform; the engine only touches comment_count)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_id", UUID, nullable=False),
    Column("title", String(200), nullable=False),
    Column("status", String(20), nullable=False, server_default="active"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("comment_count >= 0", name="post_comment_count_non_negative"),
)

Index("idx_posts_status", posts_table.c.status)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("language", String(20), nullable=False, server_default="korean"),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("status", String(20), nullable=False, server_default="active"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("report_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("last_edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0 AND depth <= 3", name="depth_bounded"),
    CheckConstraint(
        "like_count >= 0 AND report_count >= 0 AND reply_count >= 0",
        name="counters_non_negative",
    ),
    CheckConstraint(
        "status IN ('active', 'hidden', 'deleted', 'reported')",
        name="comment_status_valid",
    ),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status", comments_table.c.status)

# ============================================================================
# COMMENT LIKES TABLE (one row per user per comment)
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("comment_id", "user_id", name="pk_comment_likes"),
)

# ============================================================================
# COMMENT REPORTS TABLE (one row per reporter per comment)
# ============================================================================
comment_reports_table = Table(
    "comment_reports",
    metadata,
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reported_by", UUID, nullable=False),
    Column("reason", String(20), nullable=False),
    Column("description", String(500), nullable=True),
    Column(
        "reported_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("comment_id", "reported_by", name="pk_comment_reports"),
)

# ============================================================================
# COMMENT EDITS TABLE (append-only edit history)
# ============================================================================
comment_edits_table = Table(
    "comment_edits",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "edited_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reason", String(200), nullable=False),
    Column("previous_content", Text, nullable=False),
)

Index(
    "idx_comment_edits_comment_id_edited_at",
    comment_edits_table.c.comment_id,
    comment_edits_table.c.edited_at,
)
