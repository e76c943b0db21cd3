"""Exceptions raised by the monitor."""


class MonitorError(Exception):
    """Base class for monitor errors."""


class ConfigurationError(MonitorError):
    """AWS configuration or credentials could not be loaded."""


class ClientCreationError(MonitorError):
    """A boto3 client could not be built from the loaded configuration."""


class ClientUnavailableError(MonitorError):
    """No client is available for an operation that needs one."""


class DeleteError(MonitorError):
    """A message could not be removed from its queue."""
