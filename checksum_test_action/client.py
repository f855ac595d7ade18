"""Client for the Checksum test run API."""

import logging
from dataclasses import dataclass
from typing import Literal

from checksum_test_action.config import RunConfig
from checksum_test_action.errors import ProtocolError, TransportError
from checksum_test_action.models.api import RunPayload
from checksum_test_action.models.run import IN_PROGRESS, RunRecord, run_url
from checksum_test_action.transport import Transport, TransportResponse

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class RunClient:
    """Creates test runs and fetches their current state.

    A failed call is never retried; the error propagates to the caller.
    """

    config: RunConfig
    transport: Transport

    async def create_run(self) -> RunRecord:
        """Start a run for the configured suites.

        Raises:
            TransportError: If the API answers with a non-success status
            ProtocolError: If the response has no id or the run is not
                in_progress

        """
        url = f"{self.config.base_url}/test-runs"
        headers = {
            "Content-Type": "application/json",
            "X-API-KEY": self.config.api_key.get_secret_value(),
        }
        suite_ids = list(self.config.suite_ids)

        log.info("Creating Checksum test run with %d suite ids", len(suite_ids))

        response = await self.transport.request(
            "POST", url, headers=headers, payload={"suite_ids": suite_ids}
        )
        data = self._parse(response, "create")

        if not data.id:
            raise ProtocolError("Response from create_test_run did not include an id")

        if data.status != IN_PROGRESS:
            raise ProtocolError(
                f'Expected initial status to be in_progress but got "{data.status}"'
            )

        return data.to_record(data.id, data.status)

    async def get_run(self, run_id: str) -> RunRecord:
        """Fetch the current state of a run.

        Raises:
            TransportError: If the API answers with a non-success status
            ProtocolError: If the response has no status

        """
        url = run_url(self.config.base_url, run_id)
        headers = {"X-API-KEY": self.config.api_key.get_secret_value()}

        response = await self.transport.request("GET", url, headers=headers)
        data = self._parse(response, "fetch")

        if not data.status:
            raise ProtocolError(
                "Response from get_test_run did not include a status field"
            )

        return data.to_record(run_id, data.status)

    @staticmethod
    def _parse(
        response: TransportResponse, operation: Literal["create", "fetch"]
    ) -> RunPayload:
        if not response.ok:
            raise TransportError(operation, response.status, response.text)

        try:
            return RunPayload.model_validate(response.json())
        except ValueError as e:  # includes pydantic ValidationError
            raise ProtocolError(
                f"Unexpected response when trying to {operation} test run: {e}"
            ) from e
