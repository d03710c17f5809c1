"""SQLAlchemy table definitions for Conduit.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (identity store)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(255), nullable=False),  # Lower-cased
    Column("email", String(255), nullable=False),  # Lower-cased
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column("password_salt", String(64), nullable=False),
    Column("password_digest", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# USER FOLLOWS TABLE (user.following as a set)
# ============================================================================
user_follows_table = Table(
    "user_follows",
    metadata,
    Column(
        "follower_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "followee_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_user_follows_followee_id", user_follows_table.c.followee_id)

# ============================================================================
# ARTICLES TABLE (content store)
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(255), nullable=False),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("body", Text, nullable=False),
    # Ordered, duplicates kept as entered
    Column("tag_list", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Comment ids in creation order
    Column(
        "comment_ids", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    Column("favorites_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("slug", name="uq_articles_slug"),
    CheckConstraint("favorites_count >= 0", name="check_favorites_count_non_negative"),
)

Index("idx_articles_created_at", articles_table.c.created_at.desc())
Index("idx_articles_author_id", articles_table.c.author_id)
Index("idx_articles_tag_list", articles_table.c.tag_list, postgresql_using="gin")

# ============================================================================
# USER FAVORITES TABLE (user.favorites as a set)
# ============================================================================
user_favorites_table = Table(
    "user_favorites",
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "article_id",
        UUID(as_uuid=True),
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_user_favorites_article_id", user_favorites_table.c.article_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("body", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "article_id",
        UUID(as_uuid=True),
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_created_at", comments_table.c.created_at)
