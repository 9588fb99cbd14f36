"""Constants and assertions shared across test modules."""

from datetime import UTC, datetime
from typing import Any

TEST_TIME = datetime(2014, 11, 28, 1, 1, 0, tzinfo=UTC)
TEST_TIME_MILLIS = 1417136460000
TEST_HOST = "host1"
TRACE_ID = "d9466896a525ccbf"
SPAN_ID = "bcfb32e050b264b8"

# Placeholder for expected values whose content is not asserted
MATCH_ANYTHING = object()


def assert_record_matches(actual: dict[str, Any], expected: dict[str, Any]) -> None:
    """Assert actual has exactly the expected keys, with matching values."""
    missing = expected.keys() - actual.keys()
    unexpected = actual.keys() - expected.keys()
    assert not missing, f"keys not found: {sorted(missing)}\nactual={actual}"
    assert not unexpected, f"unexpected keys: {sorted(unexpected)}\nactual={actual}"
    for key, value in expected.items():
        if value is MATCH_ANYTHING:
            continue
        assert actual[key] == value, (
            f"value for key {key} is incorrect: {actual[key]!r} != {value!r}"
        )
