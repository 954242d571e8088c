"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.

A thread row carries its whole discussion: the thread's votes and the
nested reply tree (each reply with its own votes and children) are stored
as JSONB documents and always read and written together with the thread.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("bio", String(500), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reputation >= 0", name="reputation_non_negative"),
    CheckConstraint(
        "role IN ('user', 'moderator', 'admin')", name="role_valid"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("category_id", UUID, nullable=False),
    Column("tag_ids", JSONB, nullable=False, server_default="[]"),  # list of UUIDs
    Column("votes", JSONB, nullable=False, server_default="[]"),  # [{user_id, type}]
    Column("replies", JSONB, nullable=False, server_default="[]"),  # reply tree
    Column("views", Integer, nullable=False, server_default="0"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_category_id", threads_table.c.category_id)
Index("idx_threads_created_at", threads_table.c.created_at.desc())
