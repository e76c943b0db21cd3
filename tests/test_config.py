"""Tests for configuration."""

import pytest

from sns_monitor.config import Config


def _valid_config(**overrides) -> Config:
    base = Config(
        queue_url="https://sqs.us-east-1.amazonaws.com/123/queue",
        action="cat",
        max_messages=10,
        wait_seconds=10,
    )
    return base.with_overrides(**overrides)


class TestConfig:
    """Tests for Config."""

    def test_valid_config(self):
        _valid_config().validate()

    def test_missing_queue(self):
        with pytest.raises(ValueError, match="MONITOR_QUEUE"):
            _valid_config(queue_url="").validate()

    def test_missing_action(self):
        with pytest.raises(ValueError, match="must specify an action"):
            _valid_config(action=" ").validate()

    @pytest.mark.parametrize("max_messages", [0, 11])
    def test_max_messages_out_of_range(self, max_messages):
        with pytest.raises(ValueError, match="max messages"):
            _valid_config(max_messages=max_messages).validate()

    @pytest.mark.parametrize("wait_seconds", [-1, 21])
    def test_wait_seconds_out_of_range(self, wait_seconds):
        with pytest.raises(ValueError, match="wait seconds"):
            _valid_config(wait_seconds=wait_seconds).validate()

    def test_zero_wait_is_allowed(self):
        _valid_config(wait_seconds=0).validate()

    def test_with_overrides_ignores_none(self):
        """Test None overrides keep the original values."""
        config = _valid_config().with_overrides(action=None, wait_seconds=3)

        assert config.action == "cat"
        assert config.wait_seconds == 3
