"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from hivemind.domain.model import Comment, Content, Hive


class HiveItem(BaseModel):
    """Hive with its rollups."""

    hive_id: str
    name: str
    creator: str
    description: str
    member_count: int
    total_upvotes: int
    total_downvotes: int
    total_comments: int
    total_content: int
    archived: bool
    banned: bool
    created_at: datetime
    last_edited: datetime | None

    @classmethod
    def from_domain(cls, hive: Hive) -> "HiveItem":
        return cls(
            hive_id=str(hive.id),
            name=hive.name.root,
            creator=hive.creator.root,
            description=hive.description,
            member_count=hive.member_count,
            total_upvotes=hive.total_upvotes,
            total_downvotes=hive.total_downvotes,
            total_comments=hive.total_comments,
            total_content=hive.total_content,
            archived=hive.archived,
            banned=hive.banned,
            created_at=hive.created_at,
            last_edited=hive.last_edited,
        )


class ContentItem(BaseModel):
    """Content item with its counters."""

    content_id: str
    hive_id: str
    title: str
    author: str
    account_id: str
    message: str
    link: str | None
    image_link: str | None
    upvotes: int
    downvotes: int
    comment_count: int
    deleted: bool
    created_at: datetime
    last_edited: datetime | None

    @classmethod
    def from_domain(cls, content: Content) -> "ContentItem":
        return cls(
            content_id=str(content.id),
            hive_id=str(content.hive_id),
            title=content.title,
            author=content.author.root,
            account_id=str(content.account_id),
            message=content.message,
            link=content.link,
            image_link=content.image_link,
            upvotes=content.upvotes,
            downvotes=content.downvotes,
            comment_count=content.comment_count,
            deleted=content.deleted,
            created_at=content.created_at,
            last_edited=content.last_edited,
        )


class CommentItem(BaseModel):
    """Comment as shown to readers."""

    comment_id: str
    content_id: str
    parent_id: str | None
    author: str
    account_id: str
    message: str
    upvotes: int
    downvotes: int
    deleted: bool
    created_at: datetime
    last_edited: datetime | None

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            content_id=str(comment.content_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author=comment.author.root,
            account_id=str(comment.account_id),
            message=comment.message,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            deleted=comment.deleted,
            created_at=comment.created_at,
            last_edited=comment.last_edited,
        )
