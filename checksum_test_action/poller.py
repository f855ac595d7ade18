"""Fixed-interval polling of a test run until it leaves in_progress."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from checksum_test_action.client import RunClient
from checksum_test_action.config import max_attempts
from checksum_test_action.errors import RunTimeoutError
from checksum_test_action.models.run import InProgress, RunRecord, Terminal

log = logging.getLogger(__name__)

type Sleep = Callable[[float], Awaitable[None]]


@dataclass(kw_only=True)
class PollState:
    """Progress of a single polling loop."""

    attempt: int = 0
    last_record: RunRecord | None = None


@dataclass(frozen=True, kw_only=True)
class RunPoller:
    """Polls a run on a fixed cadence within an attempt budget.

    The budget is ``ceil(timeout / poll_interval)`` attempts, so the actual
    wall-clock bound can exceed ``timeout`` by up to one interval. Every
    attempt sleeps before polling, including the first one.
    """

    client: RunClient
    poll_interval: float
    timeout: float
    sleep: Sleep = field(default=asyncio.sleep, repr=False)

    @property
    def max_attempts(self) -> int:
        return max_attempts(self.timeout, self.poll_interval)

    async def wait_for_terminal(self, started: RunRecord) -> RunRecord:
        """Wait until the run reaches a terminal status.

        Args:
            started: Record returned when the run was created

        Returns:
            The first record whose status is not in_progress

        Raises:
            RunTimeoutError: If every attempt still reported in_progress

        """
        state = PollState()

        while state.attempt < self.max_attempts:
            state.attempt += 1
            await self.sleep(self.poll_interval)

            log.info("Polling attempt %d for test run %s...", state.attempt, started.id)
            record = await self.client.get_run(started.id)

            match record.status:
                case Terminal(value=value):
                    log.info("Current status: %s", value)
                    return record
                case InProgress(value=value):
                    log.info("Current status: %s", value)
                    state.last_record = record

        log.warning(
            "Giving up on test run %s after %d attempts", started.id, state.attempt
        )
        raise RunTimeoutError(started.id, self.timeout)
