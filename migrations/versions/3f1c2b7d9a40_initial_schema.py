"""initial_schema

Create the Hivemind schema:
- Accounts (identity mirror of the account service)
- Hives (topical groups with denormalized rollups)
- Contents (votable posts inside a hive)
- Comments (votable, one level of replies)
- Vote records (one per account per votable, never deleted)

Revision ID: 3f1c2b7d9a40
Revises:
Create Date: 2026-10-19 10:12:04.318220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2b7d9a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("last_edited", sa.TIMESTAMP(timezone=True), nullable=True),
    ]


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE votable_type AS ENUM ('content', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_state AS ENUM ('neutral', 'upvoted', 'downvoted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        _uuid_pk(),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_accounts_username"),
    )

    # ========================================================================
    # HIVES table
    # ========================================================================
    op.create_table(
        "hives",
        _uuid_pk(),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("creator", sa.String(255), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("description", sa.String(256), nullable=False),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_content", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("archived", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("banned", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_hives_name"),
    )
    op.create_index("idx_hives_created_at", "hives", ["created_at"])

    # ========================================================================
    # CONTENTS table
    # ========================================================================
    op.create_table(
        "contents",
        _uuid_pk(),
        sa.Column("hive_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False, server_default=""),
        sa.Column("link", sa.Text(), nullable=True),
        sa.Column("image_link", sa.Text(), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["hive_id"], ["hives.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="content_votes_non_negative"
        ),
    )
    op.create_index("idx_contents_hive_id", "contents", ["hive_id"])
    op.create_index("idx_contents_created_at", "contents", ["created_at"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("message", sa.String(2048), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["content_id"], ["contents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="comment_votes_non_negative"
        ),
    )
    op.create_index("idx_comments_content_id", "comments", ["content_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # VOTE_RECORDS table (polymorphic: content or comment)
    # ========================================================================
    op.create_table(
        "vote_records",
        _uuid_pk(),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column(
            "votable_type",
            postgresql.ENUM("content", "comment", name="votable_type", create_type=False),
            nullable=False,
        ),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column(
            "state",
            postgresql.ENUM(
                "neutral", "upvoted", "downvoted", name="vote_state", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "last_edited",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "account_id", "votable_type", "votable_id", name="unique_vote_record"
        ),
    )
    op.create_index("idx_vote_records_account_id", "vote_records", ["account_id"])
    op.create_index(
        "idx_vote_records_votable", "vote_records", ["votable_type", "votable_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("vote_records")
    op.drop_table("comments")
    op.drop_table("contents")
    op.drop_table("hives")
    op.drop_table("accounts")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS vote_state")
    op.execute("DROP TYPE IF EXISTS votable_type")
