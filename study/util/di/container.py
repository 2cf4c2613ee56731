"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from study.util.di import COMPONENTS, PROVIDERS, Component


def build_providers(mocked: Iterable[Component] = ()) -> list[Provider]:
    """Instantiate every provider, using mocks for the given components.

    Raises:
        ValueError: If a component is unknown or its mock is not loaded
    """
    mocked = set(mocked)
    unknown = mocked - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the container; production implementations unless mocked.

    Settings are loaded from environment variables by the config provider.
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI app."""
    setup_dishka(container, app)
