"""SQS client wrapper for AWS operations."""

import logging
from typing import Any, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from sns_monitor.errors import DeleteError
from sns_monitor.models.page import Page

logger = logging.getLogger(__name__)

# Largest page ListQueues will return
LIST_QUEUES_PAGE_SIZE = 1000


class SQSClient:
    """Handles SQS operations."""

    def __init__(self, client: Any):
        """
        Initialize SQS client wrapper.

        Args:
            client: boto3 SQS client instance.
        """
        self._client = client

    def iter_queue_pages(self, page_size: int = LIST_QUEUES_PAGE_SIZE) -> Iterator[Page[str]]:
        """
        Iterate over pages of queue URLs.

        Each page is requested only when the previous one has been consumed.
        boto3 stops on an empty continuation token and raises
        PaginationError if the same token comes back twice.

        Args:
            page_size: MaxResults per request. SQS only returns a NextToken
                when it is set.

        Yields:
            Page of queue URLs.
        """
        paginator = self._client.get_paginator("list_queues")
        for page in paginator.paginate(PaginationConfig={"PageSize": page_size}):
            yield Page(
                items=page.get("QueueUrls", []),
                next_token=page.get("NextToken"),
            )

    def receive_messages(
        self,
        queue_url: str,
        max_messages: int = 10,
        wait_time: int = 10,
    ) -> list[dict]:
        """
        Receive messages from SQS queue.

        Args:
            queue_url: SQS queue URL.
            max_messages: Maximum number of messages to receive.
            wait_time: Long polling wait time in seconds.

        Returns:
            List of raw message dictionaries.
        """
        response = self._client.receive_message(
            QueueUrl=queue_url,
            MaxNumberOfMessages=max_messages,
            WaitTimeSeconds=wait_time,
        )
        messages = response.get("Messages", [])
        if messages:
            logger.info("Received %d message(s) from SQS", len(messages))
        return messages

    def delete_message(self, queue_url: str, receipt_handle: str) -> None:
        """
        Delete a message from SQS queue.

        Args:
            queue_url: SQS queue URL.
            receipt_handle: Message receipt handle.

        Raises:
            DeleteError: If SQS rejects the request.
        """
        try:
            self._client.delete_message(
                QueueUrl=queue_url,
                ReceiptHandle=receipt_handle,
            )
        except (BotoCoreError, ClientError) as e:
            raise DeleteError(f"failed to delete message from {queue_url}: {e}") from e
        logger.debug("Deleted message from %s", queue_url)
