"""Configuration management for the queue monitor."""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

# ReceiveMessage bounds
MAX_MESSAGES_LIMIT = 10
MAX_WAIT_SECONDS = 20


def _optional(key: str) -> str | None:
    """Read an environment variable, treating empty strings as unset."""
    value = os.getenv(key)
    return value or None


@dataclass(frozen=True)
class Config:
    """Monitor configuration loaded from environment variables."""

    # AWS
    aws_region: str | None = _optional("AWS_REGION")
    aws_profile: str | None = _optional("AWS_PROFILE")

    # Monitor
    queue_url: str = os.getenv("MONITOR_QUEUE", "")
    action: str = os.getenv("MONITOR_ACTION", "")
    max_messages: int = int(os.getenv("MONITOR_MAX_MESSAGES", "10"))
    wait_seconds: int = int(os.getenv("MONITOR_WAIT_SECONDS", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def validate(self) -> None:
        """Validate configuration required by the monitor command."""
        if not self.queue_url:
            raise ValueError("MONITOR_QUEUE (or --queue) is required")

        if not self.action.strip():
            raise ValueError("must specify an action")

        if not 1 <= self.max_messages <= MAX_MESSAGES_LIMIT:
            raise ValueError(
                f"max messages must be between 1 and {MAX_MESSAGES_LIMIT}, "
                f"got {self.max_messages}"
            )

        if not 0 <= self.wait_seconds <= MAX_WAIT_SECONDS:
            raise ValueError(
                f"wait seconds must be between 0 and {MAX_WAIT_SECONDS}, "
                f"got {self.wait_seconds}"
            )


config = Config()
