import pytest

from fitlink.errors import InvalidFormat
from fitlink.sizes import format_size, parse_size


def test_parse_size_suffixes() -> None:
    assert parse_size("7") == 7
    assert parse_size("4096") == 4096
    assert parse_size("1k") == 1024
    assert parse_size("1K") == 1000
    assert parse_size("15M") == 15_000_000
    assert parse_size("15m") == 15_728_640
    assert parse_size("2g") == 2 * 1024**3
    assert parse_size("2G") == 2_000_000_000


def test_parse_size_fractions_are_truncated() -> None:
    assert parse_size("1.5k") == 1536
    assert parse_size("0.0015K") == 1
    assert parse_size("2.5") == 2
    assert parse_size("1.") == 1


def test_parse_size_trims_whitespace() -> None:
    assert parse_size("  15M \n") == 15_000_000


@pytest.mark.parametrize("text", ["", "   ", "M", "abc", "-5", "-1k", "15T", "15MB", "1e999", "inf"])
def test_parse_size_rejects(text: str) -> None:
    with pytest.raises(InvalidFormat):
        parse_size(text)


def test_format_size_thresholds() -> None:
    assert format_size(0) == "0"
    assert format_size(999) == "999"
    assert format_size(1000) == "1.00K"
    assert format_size(1024) == "1.02K"
    assert format_size(15_000_000) == "15.00M"
    assert format_size(15_728_640) == "15.73M"
    assert format_size(4_700_000_000) == "4.70G"


@pytest.mark.parametrize("text", ["15M", "15m", "700K", "2.5g", "123"])
def test_formatted_sizes_parse_back_within_rounding(text: str) -> None:
    value = parse_size(text)
    again = parse_size(format_size(value))
    # two decimals of the displayed unit
    assert abs(again - value) <= max(value // 100, 1)
