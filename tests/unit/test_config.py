"""Tests for run configuration."""

import pytest
from pydantic import SecretStr, ValidationError

from checksum_test_action.config import (
    DEFAULT_BASE_URL,
    RunConfig,
    max_attempts,
    parse_suite_ids,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ()),
        ("   ", ()),
        ("suite-a", ("suite-a",)),
        ("suite-a,suite-b", ("suite-a", "suite-b")),
        (" suite-b , suite-a ", ("suite-b", "suite-a")),
        ("suite-a,,  ,suite-b,", ("suite-a", "suite-b")),
    ],
)
def test_parse_suite_ids(raw: str, expected: tuple[str, ...]) -> None:
    """Splits on commas, trims entries and drops blanks, keeping order."""
    assert parse_suite_ids(raw) == expected


@pytest.mark.parametrize(
    ("timeout", "interval", "expected"),
    [
        (900, 10, 90),
        (95, 10, 10),
        (90, 10, 9),
        (5, 10, 1),
        (10, 10, 1),
        (1, 0.3, 4),
    ],
)
def test_max_attempts_rounds_up(timeout: float, interval: float, expected: int) -> None:
    """Attempt budget is the ceiling of timeout over interval."""
    assert max_attempts(timeout, interval) == expected


class TestRunConfig:
    """Tests for RunConfig model."""

    def test_defaults(self) -> None:
        """Uses production URL, 10s interval and 900s timeout by default."""
        config = RunConfig(api_key=SecretStr("key"))

        assert config.suite_ids == ()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.poll_interval_seconds == 10
        assert config.timeout_seconds == 900
        assert config.max_attempts == 90

    def test_base_url_is_kept_verbatim(self) -> None:
        """Does not strip or add trailing slashes."""
        config = RunConfig(api_key=SecretStr("key"), base_url="http://api.test/")

        assert config.base_url == "http://api.test/"

    @pytest.mark.parametrize("field", ["poll_interval_seconds", "timeout_seconds"])
    @pytest.mark.parametrize("value", [0, -1, float("inf"), float("nan")])
    def test_rejects_non_positive_or_infinite_durations(
        self, field: str, value: float
    ) -> None:
        """Poll interval and timeout must be positive and finite."""
        with pytest.raises(ValidationError):
            RunConfig.model_validate({"api_key": "key", field: value})

    def test_api_key_is_not_exposed_in_repr(self) -> None:
        """Secret stays masked when the config is printed."""
        config = RunConfig(api_key=SecretStr("super-secret"))

        assert "super-secret" not in repr(config)
        assert config.api_key.get_secret_value() == "super-secret"

    def test_is_immutable(self) -> None:
        """Configuration cannot be changed after creation."""
        config = RunConfig(api_key=SecretStr("key"))

        with pytest.raises(ValidationError):
            config.timeout_seconds = 1  # type: ignore[misc]
