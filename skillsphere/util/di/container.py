"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from skillsphere.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every component on its production implementation.

    Closing it shuts down in reverse order of creation: the engine registry
    (and every change subscription) first, then the change feed and the
    database engine.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve ``container`` to ``FromDishka`` route parameters."""
    setup_dishka(container, app)
