"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from fellowship.config import Settings
from fellowship.util.di import PROVIDERS, get_provider
from fellowship.util.observability import configure_logfire


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    configure_logfire(Settings())

    # Get provider instances - all are instantiated without arguments
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
