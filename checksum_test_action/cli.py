"""CLI entry point for the Checksum test run action."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import aiohttp
from pydantic import ValidationError

from checksum_test_action.client import RunClient
from checksum_test_action.config import (
    DEFAULT_BASE_URL,
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    RunConfig,
    parse_suite_ids,
)
from checksum_test_action.errors import RunError
from checksum_test_action.outputs import write_github_outputs
from checksum_test_action.poller import RunPoller, Sleep
from checksum_test_action.transport import AiohttpTransport
from checksum_test_action.verdict import Verdict, evaluate, status_symbol

SEPARATOR = "━" * 34


def seconds_or(default: float) -> Callable[[str], float]:
    """Argument type parsing seconds, with a blank value meaning the default."""

    def seconds(value: str) -> float:
        return float(value) if value.strip() else default

    return seconds


def log_run_summary(log: logging.Logger, verdict: Verdict) -> None:
    """Log a formatted summary of the finished run."""
    log.info("")
    log.info(SEPARATOR)
    log.info("🧪 Checksum AI Test Run Summary")
    log.info(SEPARATOR)
    log.info("%s Status: %s", status_symbol(verdict.status), verdict.status)
    log.info("✅ Passed: %d", verdict.passed_count)
    log.info("❌ Failed: %d", verdict.failed_count)
    log.info("🧩 Healed: %d", verdict.healed_count)
    log.info("🐞 Bug: %d", verdict.bug_count)
    log.info("⚠️ Error: %d", verdict.error_count)
    log.info("🔗 Results URL: %s", verdict.result_url)
    log.info(SEPARATOR)
    log.info("")


def format_output(verdict: Verdict) -> dict[str, Any]:
    """Format the verdict for JSON output."""
    return {
        "test_run_id": verdict.run_id,
        "status": verdict.status,
        "passed": verdict.passed_count,
        "failed": verdict.failed_count,
        "healed": verdict.healed_count,
        "bugs": verdict.bug_count,
        "errors": verdict.error_count,
        "result_url": verdict.result_url,
        "success": verdict.success,
        "reason": verdict.reason,
    }


async def run(
    config: RunConfig,
    github_output: Path | None = None,
    sleep: Sleep = asyncio.sleep,
) -> int:
    """Create a test run, wait for it to finish and return exit code."""
    log = logging.getLogger("checksum_test_action")

    try:
        async with AiohttpTransport.open() as transport:
            client = RunClient(config=config, transport=transport)
            started = await client.create_run()

            log.info("✅ Created Checksum test run %s (in_progress)", started.id)
            log.info("🔗 Results URL: %s", started.result_url(config.base_url))
            log.info(
                "⏳ Polling every %gs for up to %gs",
                config.poll_interval_seconds,
                config.timeout_seconds,
            )

            poller = RunPoller(
                client=client,
                poll_interval=config.poll_interval_seconds,
                timeout=config.timeout_seconds,
                sleep=sleep,
            )
            final = await poller.wait_for_terminal(started)
    except (RunError, aiohttp.ClientError) as e:
        message = str(e) or type(e).__name__
        log.error("%s", message)
        print(json.dumps({"success": False, "reason": message}))
        return 1

    verdict = evaluate(final, config.base_url)
    log_run_summary(log, verdict)
    print(json.dumps(format_output(verdict), indent=2))

    if github_output is not None:
        write_github_outputs(github_output, verdict.outputs())

    if not verdict.success:
        log.error("%s", verdict.reason)
        return 1

    log.info("✅ Checksum test run completed successfully with no failures.")
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run Checksum AI test suites and wait for the results"
    )
    parser.add_argument(
        "--api-key",
        default=os.environ.get("CHECKSUM_API_KEY"),
        help="Checksum API key (defaults to $CHECKSUM_API_KEY)",
    )
    parser.add_argument(
        "--suite-ids",
        default="",
        help="Comma-separated suite IDs to run (empty runs all suites)",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="Base URL of the Checksum API",
    )
    parser.add_argument(
        "--poll-interval-seconds",
        type=seconds_or(DEFAULT_POLL_INTERVAL_SECONDS),
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        help="Seconds to wait between status checks",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=seconds_or(DEFAULT_TIMEOUT_SECONDS),
        default=DEFAULT_TIMEOUT_SECONDS,
        help="Maximum seconds to wait for the run to finish",
    )
    parser.add_argument(
        "--github-output",
        type=Path,
        default=os.environ.get("GITHUB_OUTPUT") or None,
        help="File receiving step outputs (defaults to $GITHUB_OUTPUT)",
    )

    args = parser.parse_args()

    if not args.api_key:
        parser.error("--api-key or CHECKSUM_API_KEY is required")

    try:
        config = RunConfig(
            api_key=args.api_key,
            suite_ids=parse_suite_ids(args.suite_ids),
            base_url=args.base_url or DEFAULT_BASE_URL,
            poll_interval_seconds=args.poll_interval_seconds,
            timeout_seconds=args.timeout_seconds,
        )
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(run(config, github_output=args.github_output))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
