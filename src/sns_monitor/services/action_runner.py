"""Runs the configured action with a message body on standard input."""

import logging
import subprocess
from typing import IO

from sns_monitor.models.schemas import ActionResult, ActionSpec

logger = logging.getLogger(__name__)


class ActionRunner:
    """Runs one action process per message."""

    def __init__(self, spec: ActionSpec, stdout: IO | None = None):
        """
        Initialize the runner.

        Args:
            spec: Command and arguments to run.
            stdout: Where the action's output goes. None inherits the
                monitor's standard output.
        """
        self._spec = spec
        self._stdout = stdout

    @property
    def spec(self) -> ActionSpec:
        return self._spec

    def run(self, body: str) -> ActionResult:
        """
        Run the action, writing the body to its standard input.

        Never raises; launch failures and non-zero exits are reported in
        the returned ActionResult.
        """
        try:
            completed = subprocess.run(
                self._spec.argv,
                input=body,
                stdout=self._stdout,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            logger.error("Action %s exited with status %d", self._spec.command, e.returncode)
            return ActionResult(success=False, return_code=e.returncode, error=str(e))
        except OSError as e:
            logger.error("Failed to start action %s: %s", self._spec.command, e)
            return ActionResult(success=False, error=str(e))

        return ActionResult(success=True, return_code=completed.returncode)
