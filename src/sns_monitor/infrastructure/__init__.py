"""Infrastructure package."""

from sns_monitor.infrastructure.dependency_injection import (
    DependenciesContainer,
    create_container,
)
from sns_monitor.infrastructure.session import SessionStore
from sns_monitor.infrastructure.sns_client import SNSClient
from sns_monitor.infrastructure.sqs_client import SQSClient

__all__ = [
    "DependenciesContainer",
    "SNSClient",
    "SQSClient",
    "SessionStore",
    "create_container",
]
