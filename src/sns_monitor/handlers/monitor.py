"""Monitor handler: polls a queue and runs the action for each message."""

import logging
import signal
import sys
import threading
from enum import Enum
from typing import TextIO

from sns_monitor.config import Config
from sns_monitor.errors import MonitorError
from sns_monitor.infrastructure.dependency_injection import DependenciesContainer
from sns_monitor.models.schemas import ActionSpec, QueueMessage
from sns_monitor.services.action_runner import ActionRunner
from sns_monitor.services.message_lifecycle import MessageLifecycle

logger = logging.getLogger(__name__)

RULE = "==============="


class ProcessOutcome(str, Enum):
    """What happened to a single message."""

    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def process_message(
    message: QueueMessage,
    queue_url: str,
    runner: ActionRunner,
    lifecycle: MessageLifecycle,
    out: TextIO | None = None,
) -> ProcessOutcome:
    """
    Run the action for one message, then delete the message.

    The message is deleted once the action has finished, whether it
    succeeded or not. Messages without a body are neither run nor deleted.

    Args:
        message: Message received from the queue.
        queue_url: Queue the message came from.
        runner: Action runner.
        lifecycle: Used to delete the message.
        out: Stream for progress lines, defaults to stdout.

    Returns:
        ProcessOutcome for the message.
    """
    if out is None:
        out = sys.stdout
    print("Message arrived.", file=out, flush=True)

    if message.body is None:
        logger.warning("Message %s has no body, leaving it on the queue", message.message_id)
        return ProcessOutcome.SKIPPED

    print("running:", runner.spec.command, file=out)
    print(RULE, file=out, flush=True)
    result = runner.run(message.body)
    print(f"\n{RULE}", file=out)

    if result.success:
        print("\ncommand finished", file=out, flush=True)
    else:
        print(f"\nfailed to run [{runner.spec}]: {result.error}", file=out, flush=True)

    try:
        lifecycle.delete_message(queue_url, message)
    except MonitorError as e:
        logger.error("Failed to remove message %s: %s", message.message_id, e)
        print(f"failed to remove message: {e}", file=out, flush=True)

    return ProcessOutcome.SUCCEEDED if result.success else ProcessOutcome.FAILED


class Poller:
    """
    Background poll loop with cooperative shutdown.

    The stop event is only checked between batches: a receive call that is
    already waiting, and every message of the batch it returns, complete
    before the loop exits.
    """

    def __init__(
        self,
        lifecycle: MessageLifecycle,
        runner: ActionRunner,
        queue_url: str,
        max_messages: int,
        wait_seconds: int,
        stop_event: threading.Event | None = None,
        out: TextIO | None = None,
    ):
        self._lifecycle = lifecycle
        self._runner = runner
        self._queue_url = queue_url
        self._max_messages = max_messages
        self._wait_seconds = wait_seconds
        self._stop = stop_event or threading.Event()
        self._out = out
        self._thread: threading.Thread | None = None

        self.counts = {outcome: 0 for outcome in ProcessOutcome}
        self.error: Exception | None = None

    @property
    def stop_event(self) -> threading.Event:
        return self._stop

    @property
    def stopping(self) -> bool:
        return self._stop.is_set()

    @property
    def failed(self) -> bool:
        return self.error is not None

    def run(self) -> None:
        """
        Poll until stopped. Runs on the calling thread.

        An unexpected error ends the loop and is kept in ``error``.
        """
        logger.info("Monitoring %s", self._queue_url)
        try:
            while not self._stop.is_set():
                messages = self._lifecycle.fetch_messages(
                    self._queue_url,
                    self._max_messages,
                    self._wait_seconds,
                )
                for message in messages:
                    outcome = process_message(
                        message=message,
                        queue_url=self._queue_url,
                        runner=self._runner,
                        lifecycle=self._lifecycle,
                        out=self._out,
                    )
                    self.counts[outcome] += 1
        except Exception as e:
            self.error = e
            logger.error("Poll loop failed: %s", e, exc_info=True)
        finally:
            # Wake anyone waiting for shutdown if the loop dies unexpectedly
            self._stop.set()
            logger.info("Stopped monitoring %s", self._queue_url)
            logger.info(
                "Stats: %d success, %d failed, %d skipped",
                self.counts[ProcessOutcome.SUCCEEDED],
                self.counts[ProcessOutcome.FAILED],
                self.counts[ProcessOutcome.SKIPPED],
            )

    def start(self) -> threading.Thread:
        """Start the poll loop on a background thread."""
        if self._thread is not None:
            raise RuntimeError("poller already started")
        self._thread = threading.Thread(target=self.run, name="sns-monitor-poller")
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        """Ask the poll loop to exit after the current batch."""
        self._stop.set()

    def wait_for_stop(self) -> None:
        """Block until stop is requested."""
        self._stop.wait()

    def join(self) -> None:
        """Block until the poll loop has exited."""
        if self._thread is not None:
            self._thread.join()


def run_monitor(
    app_config: Config,
    container: DependenciesContainer,
    out: TextIO | None = None,
) -> Poller:
    """
    Monitor a queue until SIGINT or SIGTERM is received.

    Startup problems (invalid config, no AWS credentials, no SQS client)
    raise before any polling starts.

    Args:
        app_config: Validated monitor configuration.
        container: DI container providing the session store and lifecycle.
        out: Stream for progress lines, defaults to stdout.

    Returns:
        The poller, after it has exited. Check ``failed`` for a crash.

    Raises:
        ValueError: If the configuration is invalid.
        ConfigurationError: If the AWS configuration cannot be loaded.
        ClientCreationError: If the SQS client cannot be created.
    """
    app_config.validate()
    spec = ActionSpec.parse(app_config.action)

    container.session_store().resolve_queue_client()

    poller = Poller(
        lifecycle=container.message_lifecycle(),
        runner=ActionRunner(spec),
        queue_url=app_config.queue_url,
        max_messages=app_config.max_messages,
        wait_seconds=app_config.wait_seconds,
        out=out,
    )

    def handle_signal(signum, _frame):
        logger.info(
            "Received %s, stopping after the current batch", signal.Signals(signum).name
        )
        poller.stop()

    previous = {
        sig: signal.signal(sig, handle_signal) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        poller.start()
        poller.wait_for_stop()
        logger.info("Waiting for the poller to finish...")
        poller.join()
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    return poller
