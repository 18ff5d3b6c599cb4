import logging
import subprocess

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional


LOGGER = logging.getLogger(__name__)


@dataclass
class CommandOutcome:
    """Result of running a command line: an exit status, or the reason it never started."""

    returncode: Optional[int] = None
    error: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.error is None

    @classmethod
    def completed_with(cls, returncode: int) -> "CommandOutcome":
        return cls(returncode=returncode)

    @classmethod
    def failed(cls, reason: str) -> "CommandOutcome":
        return cls(error=reason)


class CommandRunner:
    """
    Runs command lines through the platform shell, attached to the terminal.

    Only one command runs at a time; `is_running()` reports whether one is in
    progress so an interrupt handler can leave the signal to the child.
    """

    def __init__(self):
        self._running = False

    def is_running(self) -> bool:
        return self._running

    @contextmanager
    def _mark_running(self) -> Iterator[None]:
        self._running = True
        try:
            yield
        finally:
            self._running = False

    def execute(self, line: str) -> CommandOutcome:
        with self._mark_running():
            try:
                # stdin/stdout/stderr are inherited so pagers and editors work.
                result = subprocess.run(line, shell=True, check=False)
            except (OSError, subprocess.SubprocessError) as e:
                LOGGER.debug("Command failed to start: %s (%s)", line, e)
                return CommandOutcome.failed(str(e))

        # Non-zero exit codes are not reported to the user.
        LOGGER.debug("Command exited with status %s: %s", result.returncode, line)
        return CommandOutcome.completed_with(result.returncode)
