import pytest

from features.utility.services.uptime import format_uptime


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (-5, "0s"),
        (59.9, "59s"),
        (61, "1m 1s"),
        (3600, "1h 0m 0s"),
        (90061, "1d 1h 1m 1s"),
    ],
)
def test_format_uptime(seconds, expected):
    assert format_uptime(seconds) == expected
