"""Dependency injection container for the application."""

from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from sns_monitor.config import Config, config as default_config
from sns_monitor.infrastructure.session import SessionStore


def _create_queue_directory(session_store: SessionStore):
    """Factory for QueueDirectory to avoid circular import."""
    from sns_monitor.services.directory import QueueDirectory

    return QueueDirectory(session_store)


def _create_topic_directory(session_store: SessionStore):
    """Factory for TopicDirectory to avoid circular import."""
    from sns_monitor.services.directory import TopicDirectory

    return TopicDirectory(session_store)


def _create_message_lifecycle(session_store: SessionStore):
    """Factory for MessageLifecycle to avoid circular import."""
    from sns_monitor.services.message_lifecycle import MessageLifecycle

    return MessageLifecycle(session_store)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    config = providers.Object(default_config)

    # One store per process, shared by every consumer
    session_store = providers.Singleton(
        SessionStore,
        config=config,
    )

    queue_directory = providers.Singleton(
        _create_queue_directory,
        session_store=session_store,
    )

    topic_directory = providers.Singleton(
        _create_topic_directory,
        session_store=session_store,
    )

    message_lifecycle = providers.Singleton(
        _create_message_lifecycle,
        session_store=session_store,
    )


def create_container(app_config: Config | None = None) -> DependenciesContainer:
    """Build a container, optionally bound to a specific configuration."""
    container = DependenciesContainer()
    if app_config is not None:
        container.config.override(providers.Object(app_config))
    return container
