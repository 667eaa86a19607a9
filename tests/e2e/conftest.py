"""Fixtures for end-to-end tests.

The app runs on the test container, so every request made through one
client shares a single in-memory store.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from hivemind.domain.model import Account
from hivemind.interface.api.app import create_app
from hivemind.persistence.repository.inmemory import InMemoryStore
from tests.di import build_test_container
from tests.factories import make_account, make_token


class Api:
    """Test client bundled with the store it writes to."""

    def __init__(self, client: TestClient, store: InMemoryStore) -> None:
        self.client = client
        self.store = store

    def register(self, username: str = "alice") -> tuple[Account, dict]:
        """Seed an account and return it with its auth headers.

        Accounts belong to the account service, so they are written straight
        into the store.
        """
        account = make_account(username)
        self.store.accounts[account.id] = account
        return account, {"Authorization": f"Bearer {make_token(account)}"}


@pytest.fixture
def api():
    """App client on a fresh in-memory store."""
    container = build_test_container()
    store = asyncio.run(container.get(InMemoryStore))
    with TestClient(create_app(container)) as client:
        yield Api(client, store)
