"""SQLAlchemy table definitions for the comment tree.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# AUTHORS TABLE (identity provider projection: who belongs to which organization)
# ============================================================================
authors_table = Table(
    "authors",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("organization_id", UUID, nullable=False),
)

Index("idx_authors_organization_id", authors_table.c.organization_id)

# ============================================================================
# COMMENTABLES TABLE (root resources that accept comments)
# ============================================================================
commentables_table = Table(
    "commentables",
    metadata,
    Column("resource_type", String(255), nullable=False),
    Column("resource_id", UUID, nullable=False),
    Column("organization_id", UUID, nullable=False),
    PrimaryKeyConstraint("resource_type", "resource_id"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("authors.id", ondelete="CASCADE"), nullable=False
    ),
    Column("commentable_type", String(255), nullable=False),
    Column("commentable_id", UUID, nullable=False),
    Column("organization_id", UUID, nullable=False),
    Column("body", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("alignment", SmallInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint("alignment IN (-1, 0, 1)", name="alignment_range"),
)

Index(
    "idx_comments_commentable",
    comments_table.c.commentable_type,
    comments_table.c.commentable_id,
)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# COMMENT VOTES TABLE
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, nullable=False),
    Column("weight", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("weight IN (-1, 1)", name="weight_range"),
    UniqueConstraint("comment_id", "author_id", name="unique_comment_vote"),
)

Index("idx_comment_votes_author_id", comment_votes_table.c.author_id)
