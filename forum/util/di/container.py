"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables when first resolved.

    Returns:
        Container with production providers and FastAPI request context
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI app.

    The container is reachable afterwards as `app.state.dishka_container`.
    """
    setup_dishka(container, app)
