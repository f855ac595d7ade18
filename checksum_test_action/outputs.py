"""Step outputs for GitHub Actions."""

import logging
import uuid
from collections.abc import Mapping
from pathlib import Path

log = logging.getLogger(__name__)


def write_github_outputs(path: Path, outputs: Mapping[str, str]) -> None:
    """Append outputs to the file referenced by GITHUB_OUTPUT.

    Multiline values use the heredoc form accepted by the runner.
    """
    with path.open("a", encoding="utf-8") as f:
        for name, value in outputs.items():
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                f.write(f"{name}={value}\n")

    log.debug("Wrote %d output(s) to %s", len(outputs), path)
