"""SQLAlchemy table definitions for the cinema API.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("full_name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="member"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('member', 'admin')", name="check_user_role"),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# MOVIES TABLE
# ============================================================================
movies_table = Table(
    "movies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE (flat, tree encoded by parent and root references)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "movie_id", UUID, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "root_parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("nesting_level", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Insertion order, breaks created_at ties in listings
    Column("seq", BigInteger, Identity(always=True), nullable=False, unique=True),
    CheckConstraint(
        "nesting_level >= 0 AND nesting_level <= 5", name="check_nesting_level"
    ),
    CheckConstraint("reply_count >= 0", name="check_reply_count_non_negative"),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 5000", name="check_content_length"
    ),
)

Index(
    "idx_comments_movie_parent_created",
    comments_table.c.movie_id,
    comments_table.c.parent_comment_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent", comments_table.c.parent_comment_id)
Index("idx_comments_root_parent", comments_table.c.root_parent_comment_id)
Index("idx_comments_created_at", comments_table.c.created_at)
