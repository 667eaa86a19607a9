"""Comment entity.

Comments hang off a content item. Threading is one level deep: a top-level
comment may have replies, a reply may not.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hivemind.domain.model.common import DomainModel, PatchModel
from hivemind.domain.value import AccountId, CommentId, ContentId, VotableType
from hivemind.domain.value.types import Username


class Comment(DomainModel):
    """Comment entity.

    A comment's hive is reached through its content item.
    """

    id: CommentId
    content_id: ContentId
    parent_id: Optional[CommentId] = None  # Set for replies
    author: Username
    account_id: AccountId
    message: str = Field(min_length=1, max_length=2048)
    upvotes: int = 0
    downvotes: int = 0
    deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    last_edited: Optional[datetime] = None

    @property
    def votable_type(self) -> VotableType:
        return VotableType.COMMENT

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    def for_display(self, placeholder: str) -> "Comment":
        """Read-time projection hiding the message of a deleted comment.

        The stored row is left untouched.
        """
        if not self.deleted:
            return self
        return self.model_copy(update={"message": placeholder})


class CommentPatch(PatchModel):
    """Fields of a comment a caller may change."""

    required_fields = ("message",)

    message: Optional[str] = Field(default=None, min_length=1, max_length=2048)
