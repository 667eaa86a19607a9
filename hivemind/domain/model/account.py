"""Account entity.

Accounts are owned by the account service (registration, credentials,
token issuance). This service keeps the identity needed to attribute
votes, content and comments.
"""

from datetime import datetime

from pydantic import Field

from hivemind.domain.model.common import DomainModel
from hivemind.domain.value import AccountId, Username


class Account(DomainModel):
    """Account known to the platform."""

    id: AccountId
    username: Username
    created_at: datetime = Field(default_factory=datetime.now)
