"""Entry point for the sns-monitor CLI."""

import argparse
import logging
import sys

from sns_monitor.config import Config, config
from sns_monitor.errors import MonitorError
from sns_monitor.handlers.monitor import run_monitor
from sns_monitor.infrastructure import DependenciesContainer, create_container

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging to stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_parser(defaults: Config) -> argparse.ArgumentParser:
    """Build the argument parser, using the environment config as defaults."""
    parser = argparse.ArgumentParser(
        prog="sns-monitor",
        description="List SQS queues and SNS topics, or monitor a queue",
    )
    parser.add_argument("--profile", help="AWS profile to use")
    parser.add_argument("--region", help="AWS region to use")
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        help="Logging level (default: %(default)s)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="List AWS resources")
    list_commands = list_parser.add_subparsers(dest="resource", required=True)
    list_commands.add_parser("queues", help="List SQS queues")
    list_commands.add_parser("topics", help="List SNS topics")

    monitor_parser = commands.add_parser(
        "monitor",
        help="Monitor a queue for messages",
        description=(
            "Monitors a queue for messages, executing an action for any incoming "
            "message. The body of the message is passed to the action on "
            "standard input."
        ),
    )
    monitor_parser.add_argument("--queue", help="The queue URL to monitor")
    monitor_parser.add_argument("--action", help="The action to run")
    monitor_parser.add_argument(
        "--max-messages",
        type=int,
        help=f"Maximum messages to retrieve at a time (default: {defaults.max_messages})",
    )
    monitor_parser.add_argument(
        "--wait-seconds",
        type=int,
        help=f"Maximum time to wait for messages in seconds (default: {defaults.wait_seconds})",
    )

    return parser


def list_queues(container: DependenciesContainer) -> int:
    """Print every queue URL, one per line."""
    for queue_url in container.queue_directory().list_queues():
        print(queue_url)
    return 0


def list_topics(container: DependenciesContainer) -> int:
    """Print every topic ARN, one per line."""
    for topic in container.topic_directory().list_topics():
        if topic.topic_arn is not None:
            print(topic.topic_arn)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser(config)
    args = parser.parse_args(argv)

    app_config = config.with_overrides(
        aws_profile=args.profile,
        aws_region=args.region,
        log_level=args.log_level,
        queue_url=getattr(args, "queue", None),
        action=getattr(args, "action", None),
        max_messages=getattr(args, "max_messages", None),
        wait_seconds=getattr(args, "wait_seconds", None),
    )
    setup_logging(app_config.log_level)

    container = create_container(app_config)

    try:
        if args.command == "list":
            if args.resource == "queues":
                return list_queues(container)
            return list_topics(container)

        poller = run_monitor(app_config, container)
        return 1 if poller.failed else 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except (MonitorError, ValueError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
