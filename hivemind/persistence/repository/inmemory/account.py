"""In-memory account repository for testing."""

from typing import Optional

from hivemind.domain.model import Account
from hivemind.domain.repository import AccountRepository
from hivemind.domain.value import AccountId

from .store import InMemoryStore


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self.store.accounts.get(account_id)

    async def save(self, account: Account) -> Account:
        """Save an account."""
        self.store.accounts[account.id] = account
        return account
