import pytest

from xdbot.core.duration import MAX_DURATION, format_duration, parse_duration


def test_parse_is_additive_and_order_independent() -> None:
    assert parse_duration("1m 30s") == 90000
    assert parse_duration("30s 1m") == 90000


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1m30s", 90000),
        ("1m 1m", 120000),
        ("2h", 7_200_000),
        ("1d", 86_400_000),
        ("250ms", 250),
        ("1s 500ms", 1500),
        ("1H 2M", 3_720_000),
        ("5 secs", 0),
        ("5secs", 5000),
        ("2minutes", 120000),
        ("", 0),
    ],
)
def test_parse_units(text, expected) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("abc 5s", 5000),
        ("5s abc", 5000),
        ("1.5m", 0),
        ("-5s 10s", 10000),
        ("90", 0),
        ("1m30", 0),
        ("1x 2s", 2000),
        ("1x2s", 2000),
    ],
)
def test_parse_ignores_malformed_chunks(text, expected) -> None:
    assert parse_duration(text) == expected


def test_format_duration() -> None:
    assert format_duration(90000) == "1m 30s"
    assert format_duration(0) == "0s"
    assert format_duration(86_400_250) == "1d 250ms"


def test_huge_amounts_parse_past_the_maximum() -> None:
    assert parse_duration("365d") == MAX_DURATION
    assert parse_duration("9" * 320 + "d") > MAX_DURATION
