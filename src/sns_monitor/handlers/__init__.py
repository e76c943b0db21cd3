"""Handlers package."""

from sns_monitor.handlers.monitor import Poller, ProcessOutcome, process_message, run_monitor

__all__ = ["Poller", "ProcessOutcome", "process_message", "run_monitor"]
