"""Test container with the persistence component swappable."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from hivemind.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Mockable components use their in-memory implementation unless named in
    ``unmock``. Unmocking "persistence" needs a migrated PostgreSQL at
    DATABASE__URL.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Container that can also serve a FastAPI app under TestClient

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # Unit and e2e tests
        container = build_test_container()

        # Against a real database
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = bool(component) and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())
