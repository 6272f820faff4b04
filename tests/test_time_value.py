# ============================================================================
# TIME VALUE TESTS
# ============================================================================
# PURPOSE: Verify hh:mm:ss[.fraction] parsing and width-preserving formatting
# ============================================================================
"""
TimeValue Tests

Covers:
1. Direct construction from a raw nanosecond count
2. Parsing, including truncation past nine digits
3. Formatting keeps the parsed fraction width
4. Range and grammar validation
5. datetime.time interop

Run with:
    pytest tests/test_time_value.py -v
"""

from datetime import time

import pytest

from hiveddl.canonical.time_value import TimeValue
from hiveddl.utils.exceptions import MalformedTimeError


# ============================================================================
# CONSTRUCTION
# ============================================================================

def test_constructor_keeps_fields():
    t = TimeValue(12, 13, 14, 1234)

    assert t.hour == 12
    assert t.minute == 13
    assert t.second == 14
    assert t.nanos == 1234


def test_constructor_derives_digits_from_nanos_length():
    assert TimeValue(12, 13, 14, 1234).fraction_digits == 4
    assert TimeValue(12, 13, 14, 0).fraction_digits == 0


def test_zero_nanos_has_no_fraction_width():
    assert TimeValue(1, 2, 3, 0, 5).fraction_digits == 0


def test_zero_width_with_nonzero_nanos_uses_nanos_length():
    t = TimeValue(12, 13, 14, 5, 0)

    assert t.fraction_digits == 1
    assert t.format() == "12:13:14.000000005"


@pytest.mark.parametrize("args", [
    (24, 0, 0),
    (-1, 0, 0),
    (0, 60, 0),
    (0, 0, 60),
    (0, 0, 0, -1),
    (0, 0, 0, 1_000_000_000),
    (0, 0, 0, 1, 10),
    (0, 0, 0, 1, -1),
    ("12", 0, 0),
])
def test_constructor_rejects_out_of_range(args):
    with pytest.raises(MalformedTimeError):
        TimeValue(*args)


# ============================================================================
# PARSE
# ============================================================================

def test_parse_with_fraction():
    t = TimeValue.parse("12:13:14.123400")

    assert (t.hour, t.minute, t.second) == (12, 13, 14)
    assert t.nanos == 123400000
    assert t.fraction_digits == 6


def test_parse_without_fraction():
    t = TimeValue.parse("12:13:14")

    assert (t.hour, t.minute, t.second) == (12, 13, 14)
    assert t.nanos == 0
    assert t.fraction_digits == 0


def test_parse_caps_fraction_at_nine_digits():
    t = TimeValue.parse("12:13:14.12345678910")

    assert t.nanos == 123456789
    assert t.fraction_digits == 9


@pytest.mark.parametrize("text", ["12:13:14.0", "12:13:14.00", "12:13:14.000000000000"])
def test_parse_zero_fraction_is_absent(text):
    t = TimeValue.parse(text)

    assert t.nanos == 0
    assert t.fraction_digits == 0


def test_parse_accepts_single_digit_fields_and_whitespace():
    t = TimeValue.parse(" 1:2:3.5 ")

    assert (t.hour, t.minute, t.second, t.nanos) == (1, 2, 3, 500000000)
    assert str(t) == "01:02:03.5"


@pytest.mark.parametrize("text", [
    "",
    "12:13",
    "12:13:14.",
    "12:13:14.12a",
    "ab:cd:ef",
    "123:13:14",
    "24:00:00",
    "12:60:00",
    "12:13:60",
    "12-13-14",
])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(MalformedTimeError):
        TimeValue.parse(text)


def test_parse_rejects_non_text():
    with pytest.raises(MalformedTimeError):
        TimeValue.parse(121314)


def test_malformed_time_is_a_value_error():
    with pytest.raises(ValueError):
        TimeValue.parse("noon")


# ============================================================================
# FORMAT
# ============================================================================

def test_format_raw_nanos_shows_full_width():
    assert TimeValue(12, 13, 14, 1234).format() == "12:13:14.000001234"


@pytest.mark.parametrize("text,expected", [
    ("12:13:14.1234", "12:13:14.1234"),
    ("12:13:14", "12:13:14"),
    ("12:13:14.0", "12:13:14"),
    ("12:13:14.1000", "12:13:14.1000"),
    ("12:13:14.000123", "12:13:14.000123"),
    ("12:13:14.123400", "12:13:14.123400"),
    ("12:13:14.12345678910", "12:13:14.123456789"),
    ("00:00:00.000000001", "00:00:00.000000001"),
])
def test_parse_then_format_keeps_width(text, expected):
    assert str(TimeValue.parse(text)) == expected


def test_format_never_truncates_below_significant_digits():
    # Width 2 requested, but 123 ms needs three digits
    assert TimeValue(1, 0, 0, 123000000, 2).format() == "01:00:00.123"


def test_format_pads_to_requested_width():
    assert TimeValue(1, 0, 0, 500000000, 4).format() == "01:00:00.5000"


def test_parsed_width_is_part_of_equality():
    assert TimeValue.parse("12:13:14.1") != TimeValue.parse("12:13:14.10")
    assert TimeValue.parse("12:13:14.10") == TimeValue(12, 13, 14, 100000000, 2)


# ============================================================================
# datetime.time INTEROP
# ============================================================================

def test_from_time_with_microseconds():
    t = TimeValue.from_time(time(1, 2, 3, 500000))

    assert t.nanos == 500000000
    assert t.fraction_digits == 6
    assert str(t) == "01:02:03.500000"


def test_from_time_without_microseconds():
    assert str(TimeValue.from_time(time(23, 59, 59))) == "23:59:59"


def test_to_time_drops_sub_microsecond_digits():
    t = TimeValue.parse("12:13:14.123456789")

    assert t.to_time() == time(12, 13, 14, 123456)


def test_total_nanos():
    assert TimeValue(0, 0, 1, 5).total_nanos == 1_000_000_005
    assert TimeValue(1, 1, 1).total_nanos == 3661 * 1_000_000_000
