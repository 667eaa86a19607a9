"""SQLAlchemy table definitions for Hivemind.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE (identity mirror of the account service)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# HIVES TABLE
# ============================================================================
hives_table = Table(
    "hives",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(30), nullable=False, unique=True),
    Column("creator", String(255), nullable=False),  # Denormalized username
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("description", String(256), nullable=False),
    Column("member_count", Integer, nullable=False, server_default="0"),
    # Rollups, maintained by the consistency engine
    Column("total_upvotes", Integer, nullable=False, server_default="0"),
    Column("total_downvotes", Integer, nullable=False, server_default="0"),
    Column("total_comments", Integer, nullable=False, server_default="0"),
    Column("total_content", Integer, nullable=False, server_default="0"),
    Column("archived", Boolean, nullable=False, server_default="false"),
    Column("banned", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_edited", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_hives_created_at", hives_table.c.created_at)

# ============================================================================
# CONTENTS TABLE
# ============================================================================
contents_table = Table(
    "contents",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("hive_id", UUID, ForeignKey("hives.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(300), nullable=False),
    Column("author", String(255), nullable=False),  # Denormalized username
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("message", Text, nullable=False, server_default=""),
    Column("link", Text, nullable=True),
    Column("image_link", Text, nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_edited", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="content_votes_non_negative"),
)

Index("idx_contents_hive_id", contents_table.c.hive_id)
Index("idx_contents_created_at", contents_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "content_id", UUID, ForeignKey("contents.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author", String(255), nullable=False),  # Denormalized username
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("message", String(2048), nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_edited", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="comment_votes_non_negative"),
)

Index("idx_comments_content_id", comments_table.c.content_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# VOTE RECORDS TABLE
# ============================================================================
vote_records_table = Table(
    "vote_records",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "account_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "votable_type",
        Enum("content", "comment", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID, nullable=False),
    Column(
        "state",
        Enum("neutral", "upvoted", "downvoted", name="vote_state", create_type=False),
        nullable=False,
    ),
    Column(
        "last_edited", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "account_id", "votable_type", "votable_id", name="unique_vote_record"
    ),
)

Index("idx_vote_records_account_id", vote_records_table.c.account_id)
Index(
    "idx_vote_records_votable",
    vote_records_table.c.votable_type,
    vote_records_table.c.votable_id,
)
