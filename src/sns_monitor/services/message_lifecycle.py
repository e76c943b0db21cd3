"""Receiving and deleting queue messages."""

import logging
from typing import Iterator

from sns_monitor.errors import ClientUnavailableError, DeleteError
from sns_monitor.infrastructure.session import SessionStore
from sns_monitor.models.page import Page
from sns_monitor.models.schemas import QueueMessage
from sns_monitor.services.pagination import Paginator

logger = logging.getLogger(__name__)


class MessageLifecycle:
    """Receives messages from a queue and removes them once handled."""

    def __init__(self, session_store: SessionStore):
        """
        Initialize the lifecycle manager.

        Args:
            session_store: Store providing the SQS client.
        """
        self._session_store = session_store

    def fetch_messages(
        self,
        queue_url: str,
        max_messages: int,
        wait_seconds: int,
    ) -> Iterator[QueueMessage]:
        """
        Issue a single long-poll receive and iterate over its messages.

        Args:
            queue_url: SQS queue URL.
            max_messages: Maximum number of messages to receive.
            wait_seconds: Long polling wait time in seconds.

        Returns:
            Lazy iterator over the received messages. Empty if no SQS client
            is available or the receive call fails.
        """
        client = self._session_store.get_queue_client()
        if client is None:
            return iter(())

        def receive() -> Iterator[Page[QueueMessage]]:
            raw_messages = client.receive_messages(
                queue_url=queue_url,
                max_messages=max_messages,
                wait_time=wait_seconds,
            )
            yield Page(items=[QueueMessage.from_sqs(raw) for raw in raw_messages])

        return Paginator(receive, description="messages")

    def delete_message(self, queue_url: str, message: QueueMessage) -> None:
        """
        Delete a received message from its queue.

        Args:
            queue_url: SQS queue URL the message was received from.
            message: The received message.

        Raises:
            ClientUnavailableError: If no SQS client can be resolved.
            DeleteError: If the message has no receipt handle or SQS
                rejects the request.
        """
        client = self._session_store.get_queue_client()
        if client is None:
            raise ClientUnavailableError("unable to acquire SQS client")

        if not message.receipt_handle:
            raise DeleteError(f"message {message.message_id} has no receipt handle")

        client.delete_message(
            queue_url=queue_url,
            receipt_handle=message.receipt_handle,
        )
        logger.info("Deleted message %s", message.message_id)
