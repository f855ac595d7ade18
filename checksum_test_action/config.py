"""Configuration for a Checksum test run."""

import math
from collections.abc import Sequence

from pydantic import Field, SecretStr

from checksum_test_action.models.base import Model

DEFAULT_BASE_URL = "https://aiagents.checksum.ai"
DEFAULT_POLL_INTERVAL_SECONDS = 10.0
DEFAULT_TIMEOUT_SECONDS = 900.0


def parse_suite_ids(suite_ids: str) -> Sequence[str]:
    """Parse comma-separated suite IDs, dropping blank entries."""
    return tuple(s.strip() for s in suite_ids.split(",") if s.strip())


def max_attempts(timeout_seconds: float, poll_interval_seconds: float) -> int:
    """Number of polls that fit in the timeout, rounded up."""
    return math.ceil(timeout_seconds / poll_interval_seconds)


class RunConfig(Model):
    """Parameters of a single test run invocation."""

    api_key: SecretStr
    suite_ids: Sequence[str] = Field(
        default=(), description="Suites to run (empty means all suites)"
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="API base URL, used verbatim"
    )
    poll_interval_seconds: float = Field(
        default=DEFAULT_POLL_INTERVAL_SECONDS, gt=0, allow_inf_nan=False
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, allow_inf_nan=False
    )

    @property
    def max_attempts(self) -> int:
        return max_attempts(self.timeout_seconds, self.poll_interval_seconds)
