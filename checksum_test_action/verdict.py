"""Pass/fail decision for a finished test run."""

from collections.abc import Mapping
from dataclasses import dataclass

from checksum_test_action.models.run import COMPLETED, RunRecord

STATUS_SYMBOLS = {
    "completed": "✅",
    "error": "❌",
}
UNKNOWN_STATUS_SYMBOL = "⚠️"


def status_symbol(status: str) -> str:
    """Marker shown next to a final status in the summary."""
    return STATUS_SYMBOLS.get(status, UNKNOWN_STATUS_SYMBOL)


@dataclass(frozen=True, kw_only=True)
class Verdict:
    """Outcome of a test run that reached a terminal status."""

    run_id: str
    status: str
    passed_count: int
    failed_count: int
    healed_count: int
    bug_count: int
    error_count: int
    result_url: str
    success: bool
    reason: str | None = None

    def outputs(self) -> Mapping[str, str]:
        """Step outputs exposed to the CI host."""
        return {
            "test-run-id": self.run_id,
            "status": self.status,
            "passed-count": str(self.passed_count),
            "failed-count": str(self.failed_count),
            "healed-count": str(self.healed_count),
            "bug-count": str(self.bug_count),
            "error-count": str(self.error_count),
            "result-url": self.result_url,
        }


def evaluate(record: RunRecord, base_url: str) -> Verdict:
    """Decide whether a terminal run passed.

    A run passes only when it completed without failed, bug or error cases.
    Healed cases are reported but never fail the run.
    """
    status = record.status.value
    reason: str | None = None

    if status != COMPLETED:
        reason = (
            "Checksum test run did not complete successfully. "
            f"Final status: {status}"
        )
    elif record.failed_count > 0 or record.bug_count > 0 or record.error_count > 0:
        reason = "Checksum test run completed with failing, bug, or error cases."

    return Verdict(
        run_id=record.id,
        status=status,
        passed_count=record.passed_count,
        failed_count=record.failed_count,
        healed_count=record.healed_count,
        bug_count=record.bug_count,
        error_count=record.error_count,
        result_url=record.result_url(base_url),
        success=reason is None,
        reason=reason,
    )
