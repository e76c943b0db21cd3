"""Discovery of available SQS queues and SNS topics."""

import logging
from typing import Iterator

from sns_monitor.infrastructure.session import SessionStore
from sns_monitor.models.schemas import Topic
from sns_monitor.services.pagination import Paginator

logger = logging.getLogger(__name__)


class QueueDirectory:
    """Lists the SQS queue URLs visible to the configured account."""

    def __init__(self, session_store: SessionStore):
        self._session_store = session_store

    def list_queues(self) -> Iterator[str]:
        """
        List queue URLs in the order SQS returns them.

        Returns:
            Lazy iterator of queue URLs, empty if no SQS client is available.
        """
        client = self._session_store.get_queue_client()
        if client is None:
            logger.debug("No SQS client available, not listing queues")
            return iter(())

        return Paginator(client.iter_queue_pages, description="queues")


class TopicDirectory:
    """Lists the SNS topics visible to the configured account."""

    def __init__(self, session_store: SessionStore):
        self._session_store = session_store

    def list_topics(self) -> Iterator[Topic]:
        """
        List topics in the order SNS returns them.

        Topics are passed through as returned, including entries without
        an ARN.

        Returns:
            Lazy iterator of topics, empty if no SNS client is available.
        """
        client = self._session_store.get_topic_client()
        if client is None:
            logger.warning("Unable to list topics without an SNS client")
            return iter(())

        return Paginator(client.iter_topic_pages, description="topics")
