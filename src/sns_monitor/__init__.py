"""Poll an SQS queue and run an action for every message that arrives."""

__version__ = "0.1.0"
