"""Pydantic models for Checksum test run API responses."""

from typing import Any

from pydantic import ConfigDict, field_validator

from checksum_test_action.models.base import Model
from checksum_test_action.models.run import RunRecord, parse_status


class RunPayload(Model):
    """Test run object returned by both the create and get endpoints.

    Only ``status`` is always expected; the create endpoint adds ``id`` and the
    get endpoint usually carries the result counters. Counters reported as
    ``null`` or left out are treated as zero.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    status: str | None = None
    url: str | None = None
    passed_count: int = 0
    failed_count: int = 0
    healed_count: int = 0
    bug_count: int = 0
    error_count: int = 0

    @field_validator(
        "passed_count",
        "failed_count",
        "healed_count",
        "bug_count",
        "error_count",
        mode="before",
    )
    @classmethod
    def _null_counter_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    def to_record(self, run_id: str, status: str) -> RunRecord:
        """Convert to a domain record once id and status have been checked."""
        return RunRecord(
            id=run_id,
            status=parse_status(status),
            url=self.url or None,
            passed_count=self.passed_count,
            failed_count=self.failed_count,
            healed_count=self.healed_count,
            bug_count=self.bug_count,
            error_count=self.error_count,
        )
