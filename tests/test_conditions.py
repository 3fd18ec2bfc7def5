import pytest

from abilities.conditions import UNKNOWN, classify

TABLE = [
    ([0], "Clear Sky", "sun"),
    (range(1, 4), "Partly Cloudy", "cloud-sun"),
    (range(45, 49), "Foggy", "smog"),
    (range(51, 56), "Drizzle", "cloud-rain"),
    (range(61, 66), "Rain", "cloud-showers-heavy"),
    (range(71, 78), "Snow Fall", "snowflake"),
    (range(80, 83), "Rain Showers", "cloud-showers-water"),
    (range(95, 100), "Thunderstorm", "cloud-bolt"),
]

KNOWN = {code for codes, _, _ in TABLE for code in codes}


@pytest.mark.parametrize("codes,description,icon", TABLE)
def test_table_entries(codes, description, icon):
    for code in codes:
        result = classify(code)
        assert (result.description, result.icon) == (description, icon), code


def test_fog_range_is_inclusive():
    assert classify(46).description == "Foggy"
    assert classify(47).description == "Foggy"
    assert classify(44) == UNKNOWN
    assert classify(49) == UNKNOWN


@pytest.mark.parametrize("code", [-100, -1, 4, 10, 44, 50, 56, 60, 66, 70, 78, 79, 83, 94, 100, 1000])
def test_unmatched_codes_are_unknown(code):
    result = classify(code)
    assert result.description == "Unknown"
    assert result.icon == "cloud"


def test_every_code_in_range_maps_somewhere():
    for code in range(-5, 120):
        result = classify(code)
        if code in KNOWN:
            assert result != UNKNOWN
        else:
            assert result == UNKNOWN


def test_deterministic():
    assert [classify(c) for c in range(100)] == [classify(c) for c in range(100)]
