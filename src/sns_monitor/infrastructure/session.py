"""Lazy resolution and caching of the boto3 session and service clients."""

import logging
import threading
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from sns_monitor.config import Config
from sns_monitor.errors import ClientCreationError, ConfigurationError
from sns_monitor.infrastructure.sns_client import SNSClient
from sns_monitor.infrastructure.sqs_client import SQSClient

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds the AWS session and the SQS/SNS clients built from it.

    Nothing is resolved until first needed. The explicit ``resolve_*``
    methods raise on failure and are meant for startup; the ``get_*``
    accessors used during normal operation return None instead, so that a
    missing client turns the dependent operation into a no-op.
    """

    def __init__(
        self,
        config: Config,
        boto_session: boto3.Session | None = None,
        sqs_client: Any = None,
        sns_client: Any = None,
    ):
        """
        Initialize the store.

        Args:
            config: Monitor configuration (profile and region).
            boto_session: Pre-built session; skips loading the defaults.
            sqs_client: Pre-built boto3 SQS client.
            sns_client: Pre-built boto3 SNS client.
        """
        self._config = config
        self._lock = threading.RLock()
        self._session = boto_session
        self._sqs: SQSClient | None = None
        self._sns: SNSClient | None = None

        if sqs_client is not None:
            self.attach_queue_client(sqs_client)
        if sns_client is not None:
            self.attach_topic_client(sns_client)

    def attach_configuration(self, boto_session: boto3.Session) -> None:
        """Use the given session instead of loading the AWS defaults."""
        with self._lock:
            self._session = boto_session

    def attach_queue_client(self, client: Any) -> None:
        """Use the given boto3 SQS client instead of building one."""
        with self._lock:
            self._sqs = client if isinstance(client, SQSClient) else SQSClient(client)

    def attach_topic_client(self, client: Any) -> None:
        """Use the given boto3 SNS client instead of building one."""
        with self._lock:
            self._sns = client if isinstance(client, SNSClient) else SNSClient(client)

    def resolve_configuration(self) -> boto3.Session:
        """
        Return the AWS session, loading it from the environment if needed.

        Returns:
            The cached or newly created boto3 session.

        Raises:
            ConfigurationError: If the profile is unknown or no credentials
                can be found.
        """
        with self._lock:
            if self._session is not None:
                return self._session

            try:
                session = boto3.Session(
                    profile_name=self._config.aws_profile,
                    region_name=self._config.aws_region,
                )
                credentials = session.get_credentials()
            except BotoCoreError as e:
                logger.error("Unable to load default AWS configuration: %s", e)
                raise ConfigurationError(
                    f"unable to load default AWS configuration: {e}"
                ) from e

            if credentials is None:
                logger.error("Unable to load default AWS configuration: no credentials")
                raise ConfigurationError(
                    "unable to load default AWS configuration: no credentials found"
                )

            self._session = session
            return session

    def resolve_queue_client(self) -> SQSClient:
        """
        Return the SQS client, building it if needed.

        Raises:
            ConfigurationError: If the AWS configuration cannot be loaded.
            ClientCreationError: If the client cannot be created.
        """
        with self._lock:
            if self._sqs is None:
                self._sqs = SQSClient(self._create_client("sqs"))
            return self._sqs

    def resolve_topic_client(self) -> SNSClient:
        """
        Return the SNS client, building it if needed.

        Raises:
            ConfigurationError: If the AWS configuration cannot be loaded.
            ClientCreationError: If the client cannot be created.
        """
        with self._lock:
            if self._sns is None:
                self._sns = SNSClient(self._create_client("sns"))
            return self._sns

    def get_queue_client(self) -> SQSClient | None:
        """Return the SQS client, or None if it cannot be resolved."""
        try:
            return self.resolve_queue_client()
        except (ConfigurationError, ClientCreationError):
            return None

    def get_topic_client(self) -> SNSClient | None:
        """Return the SNS client, or None if it cannot be resolved."""
        try:
            return self.resolve_topic_client()
        except (ConfigurationError, ClientCreationError):
            return None

    def _create_client(self, service_name: str) -> Any:
        session = self.resolve_configuration()
        try:
            return session.client(service_name)
        except BotoCoreError as e:
            logger.error("Unable to create %s client: %s", service_name.upper(), e)
            raise ClientCreationError(
                f"unable to create {service_name.upper()} client: {e}"
            ) from e
