"""Pydantic models for queue messages, topics and actions."""

import shlex

from pydantic import BaseModel, Field


class QueueMessage(BaseModel):
    """Message received from an SQS queue."""

    message_id: str | None = None
    body: str | None = None
    receipt_handle: str | None = None

    @classmethod
    def from_sqs(cls, raw: dict) -> "QueueMessage":
        """Build a message from a raw ReceiveMessage entry."""
        return cls(
            message_id=raw.get("MessageId"),
            body=raw.get("Body"),
            receipt_handle=raw.get("ReceiptHandle"),
        )


class Topic(BaseModel):
    """SNS topic as returned by ListTopics."""

    topic_arn: str | None = None

    @classmethod
    def from_sns(cls, raw: dict) -> "Topic":
        return cls(topic_arn=raw.get("TopicArn"))


class ActionSpec(BaseModel):
    """Command run for every message, with the message body on stdin."""

    command: str
    arguments: list[str] = Field(default_factory=list)

    @classmethod
    def parse(cls, action: str) -> "ActionSpec":
        """
        Split an action command line into command and arguments.

        Args:
            action: Command line, e.g. ``"jq -r .Message"``.

        Returns:
            ActionSpec for the command line.

        Raises:
            ValueError: If the command line is empty.
        """
        parts = shlex.split(action)
        if not parts:
            raise ValueError("must specify an action")
        return cls(command=parts[0], arguments=parts[1:])

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.arguments]

    def __str__(self) -> str:
        return shlex.join(self.argv)


class ActionResult(BaseModel):
    """Outcome of running the action for one message."""

    success: bool
    return_code: int | None = None
    error: str | None = None
