"""Errors raised while creating and polling a test run.

Every error here is fatal to the invocation: nothing is retried.
"""

from typing import Literal


class RunError(Exception):
    """Base class for failures of the test run flow."""


class TransportError(RunError):
    """The API answered with a non-success HTTP status."""

    def __init__(
        self, operation: Literal["create", "fetch"], status: int, body: str
    ) -> None:
        super().__init__(f"Failed to {operation} test run. HTTP {status}: {body}")
        self.operation = operation
        self.status = status
        self.body = body


class ProtocolError(RunError):
    """A successful response did not match the expected contract."""


class RunTimeoutError(RunError, TimeoutError):
    """The run was still in progress when the polling budget ran out."""

    def __init__(self, run_id: str, timeout_seconds: float) -> None:
        super().__init__(
            f"Test run {run_id} is still in_progress "
            f"after timeout of {timeout_seconds:g}s"
        )
        self.run_id = run_id
        self.timeout_seconds = timeout_seconds
