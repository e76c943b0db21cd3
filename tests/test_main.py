"""Tests for the CLI entry point."""

from unittest.mock import MagicMock, patch

from dependency_injector import providers

from sns_monitor import main as cli
from sns_monitor.errors import ClientCreationError
from sns_monitor.handlers.monitor import Poller
from sns_monitor.infrastructure.dependency_injection import create_container
from sns_monitor.infrastructure.session import SessionStore


def _container_with(**clients):
    """Patch target for create_container that injects boto3 clients."""

    def factory(app_config):
        container = create_container(app_config)
        store = SessionStore(app_config, **clients)
        container.session_store.override(providers.Object(store))
        return container

    return factory


class TestMain:
    """Tests for main."""

    @patch("sns_monitor.main.setup_logging")
    def test_list_queues(self, _mock_logging, capsys, boto_sqs, sqs_stubber):
        sqs_stubber.add_response("list_queues", {"QueueUrls": ["https://q/1", "https://q/2"]})

        with patch("sns_monitor.main.create_container", _container_with(sqs_client=boto_sqs)):
            code = cli.main(["list", "queues"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["https://q/1", "https://q/2"]

    @patch("sns_monitor.main.setup_logging")
    def test_list_topics_skips_missing_arns(self, _mock_logging, capsys, boto_sns, sns_stubber):
        sns_stubber.add_response(
            "list_topics", {"Topics": [{"TopicArn": "arn:aws:sns:us-east-1:123:a"}, {}]}
        )

        with patch("sns_monitor.main.create_container", _container_with(sns_client=boto_sns)):
            code = cli.main(["list", "topics"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["arn:aws:sns:us-east-1:123:a"]

    @patch("sns_monitor.main.setup_logging")
    def test_monitor_invalid_config_exits_1(self, _mock_logging):
        code = cli.main(
            ["monitor", "--queue", "https://q/1", "--action", "cat", "--max-messages", "50"]
        )

        assert code == 1

    @patch("sns_monitor.main.setup_logging")
    @patch("sns_monitor.main.run_monitor")
    def test_monitor_startup_failure_exits_1(self, mock_run_monitor, _mock_logging):
        mock_run_monitor.side_effect = ClientCreationError("no region")

        code = cli.main(["monitor", "--queue", "https://q/1", "--action", "cat"])

        assert code == 1

    @patch("sns_monitor.main.setup_logging")
    @patch("sns_monitor.main.run_monitor")
    def test_monitor_poller_failure_exits_1(self, mock_run_monitor, _mock_logging):
        """Test a poll loop that died on an unexpected error fails the command."""
        poller = MagicMock(spec=Poller)
        poller.failed = True
        mock_run_monitor.return_value = poller

        code = cli.main(["monitor", "--queue", "https://q/1", "--action", "cat"])

        assert code == 1

    @patch("sns_monitor.main.setup_logging")
    @patch("sns_monitor.main.run_monitor")
    def test_monitor_flags_override_environment(self, mock_run_monitor, _mock_logging):
        mock_run_monitor.return_value.failed = False

        code = cli.main(
            [
                "--region", "eu-west-1",
                "monitor",
                "--queue", "https://q/1",
                "--action", "jq -r .Message",
                "--max-messages", "5",
                "--wait-seconds", "0",
            ]
        )

        assert code == 0
        app_config = mock_run_monitor.call_args.args[0]
        assert app_config.aws_region == "eu-west-1"
        assert app_config.queue_url == "https://q/1"
        assert app_config.action == "jq -r .Message"
        assert app_config.max_messages == 5
        assert app_config.wait_seconds == 0
