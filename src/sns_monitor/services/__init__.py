"""Services package."""

from sns_monitor.services.action_runner import ActionRunner
from sns_monitor.services.directory import QueueDirectory, TopicDirectory
from sns_monitor.services.message_lifecycle import MessageLifecycle
from sns_monitor.services.pagination import Paginator

__all__ = [
    "ActionRunner",
    "MessageLifecycle",
    "Paginator",
    "QueueDirectory",
    "TopicDirectory",
]
