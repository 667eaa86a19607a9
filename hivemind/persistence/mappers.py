"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hivemind.domain.model import Account, Comment, Content, Hive, VoteRecord
from hivemind.domain.value import (
    AccountId,
    CommentId,
    ContentId,
    HiveId,
    HiveName,
    Username,
    VotableType,
    VoteRecordId,
    VoteState,
)

# Counter columns are only ever changed through SQL increments
CONTENT_COUNTER_COLUMNS = ("upvotes", "downvotes", "comment_count")
COMMENT_COUNTER_COLUMNS = ("upvotes", "downvotes")
HIVE_ROLLUP_COLUMNS = (
    "total_upvotes",
    "total_downvotes",
    "total_comments",
    "total_content",
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        username=Username(row["username"]),
        created_at=row["created_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return account.model_dump()


def row_to_hive(row: Dict[str, Any]) -> Hive:
    """Convert database row to Hive domain model.

    Args:
        row: Database row as dict

    Returns:
        Hive domain model
    """
    return Hive(
        id=HiveId(_uuid(row["id"])),
        name=HiveName(row["name"]),
        creator=Username(row["creator"]),
        account_id=AccountId(_uuid(row["account_id"])),
        description=row["description"],
        member_count=row["member_count"],
        total_upvotes=row["total_upvotes"],
        total_downvotes=row["total_downvotes"],
        total_comments=row["total_comments"],
        total_content=row["total_content"],
        archived=row["archived"],
        banned=row["banned"],
        created_at=row["created_at"],
        last_edited=row.get("last_edited"),
    )


def hive_to_dict(hive: Hive) -> Dict[str, Any]:
    """Convert Hive domain model to database dict.

    Args:
        hive: Hive domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return hive.model_dump()


def row_to_content(row: Dict[str, Any]) -> Content:
    """Convert database row to Content domain model.

    Args:
        row: Database row as dict

    Returns:
        Content domain model
    """
    return Content(
        id=ContentId(_uuid(row["id"])),
        hive_id=HiveId(_uuid(row["hive_id"])),
        title=row["title"],
        author=Username(row["author"]),
        account_id=AccountId(_uuid(row["account_id"])),
        message=row["message"],
        link=row.get("link"),
        image_link=row.get("image_link"),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        comment_count=row["comment_count"],
        deleted=row["deleted"],
        created_at=row["created_at"],
        last_edited=row.get("last_edited"),
    )


def content_to_dict(content: Content) -> Dict[str, Any]:
    """Convert Content domain model to database dict."""
    return content.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content_id=ContentId(_uuid(row["content_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        author=Username(row["author"]),
        account_id=AccountId(_uuid(row["account_id"])),
        message=row["message"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        deleted=row["deleted"],
        created_at=row["created_at"],
        last_edited=row.get("last_edited"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote_record(row: Dict[str, Any]) -> VoteRecord:
    """Convert database row to VoteRecord domain model.

    Args:
        row: Database row as dict

    Returns:
        VoteRecord domain model
    """
    return VoteRecord(
        id=VoteRecordId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        state=VoteState(row["state"]),
        last_edited=row["last_edited"],
    )


def vote_record_to_dict(record: VoteRecord) -> Dict[str, Any]:
    """Convert VoteRecord domain model to database dict.

    Enums are stored by value.
    """
    data = record.model_dump()
    data["votable_type"] = record.votable_type.value
    data["state"] = record.state.value
    return data


def without(data: Dict[str, Any], columns: tuple[str, ...]) -> Dict[str, Any]:
    """Drop columns from a row dict (used to keep counters out of updates)."""
    return {key: value for key, value in data.items() if key not in columns}
