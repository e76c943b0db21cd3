"""Models package."""

from sns_monitor.models.page import Page
from sns_monitor.models.schemas import ActionResult, ActionSpec, QueueMessage, Topic

__all__ = ["ActionResult", "ActionSpec", "Page", "QueueMessage", "Topic"]
