"""Model factories and seeding helpers shared by the tests."""

from datetime import datetime
from uuid import uuid4

from hivemind.config import AuthSettings, Settings
from hivemind.domain.model import Account, Comment, Content, Hive
from hivemind.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    HiveRepository,
)
from hivemind.domain.value import (
    AccountId,
    CommentId,
    ContentId,
    HiveId,
    HiveName,
    Username,
)
from hivemind.util.jwt import create_token


def make_account(username: str = "alice") -> Account:
    """Build an account with a fresh ID."""
    return Account(id=AccountId(uuid4()), username=Username(username))


def make_hive(
    owner: Account,
    name: str = "science",
    total_comments: int = 0,
    total_content: int = 0,
) -> Hive:
    """Build a hive owned by ``owner`` with the given starting rollups."""
    return Hive(
        id=HiveId(uuid4()),
        name=HiveName(name),
        creator=owner.username,
        account_id=owner.id,
        description="A hive for tests",
        total_comments=total_comments,
        total_content=total_content,
        created_at=datetime.now(),
    )


def make_content(hive: Hive, author: Account, title: str = "Test Content") -> Content:
    """Build a content item in ``hive`` with zeroed counters."""
    return Content(
        id=ContentId(uuid4()),
        hive_id=hive.id,
        title=title,
        author=author.username,
        account_id=author.id,
        message="Test message",
        created_at=datetime.now(),
    )


def make_comment(
    content: Content,
    author: Account,
    message: str = "Test comment",
    parent: Comment | None = None,
) -> Comment:
    """Build a comment (or a reply to ``parent``) on ``content``."""
    return Comment(
        id=CommentId(uuid4()),
        content_id=content.id,
        parent_id=parent.id if parent else None,
        author=author.username,
        account_id=author.id,
        message=message,
        created_at=datetime.now(),
    )


def make_token(account: Account, settings: AuthSettings | None = None) -> str:
    """Mint a caller token the way the account service does."""
    return create_token(
        str(account.id), str(account.username), settings or Settings().auth
    )


async def persist(env, *models):
    """Save models straight through the repositories of a test container.

    Bypasses the engine, so hive rollups and comment counts are stored as
    given. Returns the saved models in order.
    """
    repositories = {
        Account: AccountRepository,
        Hive: HiveRepository,
        Content: ContentRepository,
        Comment: CommentRepository,
    }
    saved = []
    for model in models:
        repository = await env.get(repositories[type(model)])
        saved.append(await repository.save(model))
    return saved
