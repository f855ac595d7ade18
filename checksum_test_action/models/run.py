"""Domain models for Checksum test runs."""

from dataclasses import dataclass
from typing import Final, Literal
from urllib.parse import quote

IN_PROGRESS: Final = "in_progress"
COMPLETED: Final = "completed"


@dataclass(frozen=True)
class InProgress:
    """The only non-terminal run status."""

    value: Literal["in_progress"] = IN_PROGRESS


@dataclass(frozen=True)
class Terminal:
    """Any status other than in_progress, kept verbatim."""

    value: str


type RunStatus = InProgress | Terminal


def parse_status(value: str) -> RunStatus:
    """Classify a raw status string reported by the API."""
    if value == IN_PROGRESS:
        return InProgress()
    return Terminal(value)


def run_url(base_url: str, run_id: str) -> str:
    """Build the canonical URL of a run; base_url is used as-is."""
    return f"{base_url}/test-runs/{quote(run_id, safe='')}"


@dataclass(frozen=True, kw_only=True)
class RunRecord:
    """Snapshot of a test run as returned by a single API call."""

    id: str
    status: RunStatus
    url: str | None = None
    passed_count: int = 0
    failed_count: int = 0
    healed_count: int = 0
    bug_count: int = 0
    error_count: int = 0

    @property
    def is_terminal(self) -> bool:
        return isinstance(self.status, Terminal)

    def result_url(self, base_url: str) -> str:
        """URL reported by the server, or the canonical one derived from the id."""
        return self.url or run_url(base_url, self.id)
