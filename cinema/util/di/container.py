"""Production container wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from cinema.util.di import PROVIDERS, get_provider


def create_container(with_fastapi: bool = True) -> AsyncContainer:
    """Build the production container from environment settings.

    Args:
        with_fastapi: Add FastapiProvider so REQUEST-scoped providers can see
            the current Request. Scripts running outside the app pass False.

    Returns:
        Container with every production provider
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    if with_fastapi:
        providers.append(FastapiProvider())
    return make_async_container(*providers)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; closing it is left to the caller."""
    setup_dishka(container, app)
