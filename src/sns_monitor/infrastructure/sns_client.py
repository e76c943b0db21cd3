"""SNS client wrapper for AWS operations."""

from typing import Any, Iterator

from sns_monitor.models.page import Page
from sns_monitor.models.schemas import Topic


class SNSClient:
    """Handles SNS operations."""

    def __init__(self, client: Any):
        self._client = client

    def iter_topic_pages(self) -> Iterator[Page[Topic]]:
        """Iterate over pages of topics, 100 per page as SNS returns them."""
        paginator = self._client.get_paginator("list_topics")
        for page in paginator.paginate():
            yield Page(
                items=[Topic.from_sns(raw) for raw in page.get("Topics", [])],
                next_token=page.get("NextToken"),
            )
