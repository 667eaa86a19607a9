"""Content entity.

Content items are the votable posts made into a hive.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hivemind.domain.model.common import DomainModel, PatchModel
from hivemind.domain.value import AccountId, ContentId, HiveId, VotableType
from hivemind.domain.value.types import Username


class Content(DomainModel):
    """Content entity.

    Counters (upvotes, downvotes, comment_count) are maintained by the
    consistency engine and are never set through a patch.
    """

    id: ContentId
    hive_id: HiveId
    title: str = Field(min_length=1, max_length=300)
    author: Username
    account_id: AccountId
    message: str = ""
    link: Optional[str] = None
    image_link: Optional[str] = None
    upvotes: int = 0
    downvotes: int = 0
    comment_count: int = 0
    deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    last_edited: Optional[datetime] = None

    @property
    def votable_type(self) -> VotableType:
        return VotableType.CONTENT


class ContentPatch(PatchModel):
    """Fields of a content item a caller may change."""

    required_fields = ("title", "message")

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    message: Optional[str] = None
    link: Optional[str] = None
    image_link: Optional[str] = None
