import math

import pytest

from rtmsgs.timing import (
    NSEC_PER_SEC,
    Duration,
    Time,
    normalize_sec_nsec_signed,
    round_half_away,
)


def _total(sec, nsec):
    return sec * NSEC_PER_SEC + nsec


@pytest.mark.parametrize(
    "sec, nsec",
    [(0, 1_500_000_000), (3, -1), (-2, -3_000_000_001), (7, 5_000_000_001), (1, 42)],
)
def test_normalize_keeps_total_and_bounds(sec, nsec):
    out_sec, out_nsec = normalize_sec_nsec_signed(sec, nsec)
    assert 0 <= out_nsec <= NSEC_PER_SEC
    assert _total(out_sec, out_nsec) == _total(sec, nsec)


def test_normalize_leaves_exactly_one_second():
    assert normalize_sec_nsec_signed(3, 1_000_000_000) == (3, 1_000_000_000)


def test_normalize_negative_borrows():
    assert normalize_sec_nsec_signed(0, -1) == (-1, 999_999_999)


def test_duration_add_preserves_total():
    a = Duration(1, 600_000_000)
    b = Duration(2, 700_000_000)
    result = a + b
    assert _total(result.sec, result.nsec) == _total(1, 600_000_000) + _total(2, 700_000_000)
    assert 0 <= result.nsec <= NSEC_PER_SEC


def test_duration_sub_inverts_add():
    a = Duration(5, 100)
    b = Duration(2, 900_000_000)
    assert (a + b) - b == a


def test_duration_sub_can_go_negative():
    result = Duration(1, 0) - Duration(2, 500)
    assert result.sec < 0
    assert _total(result.sec, result.nsec) == _total(1, 0) - _total(2, 500)


def test_duration_mul_by_one_is_identity():
    d = Duration(4, 250_000_000)
    assert d * 1.0 == d


def test_duration_mul_by_two_matches_sum():
    d = Duration(3, 0)
    assert d * 2.0 == d + d
    assert 2 * d == d + d


def test_duration_mul_by_zero():
    assert Duration(5, 123) * 0.0 == Duration()


def test_duration_mul_rejects_non_number():
    with pytest.raises(TypeError):
        Duration(1, 0) * "x"


def test_time_from_sec_round_trip():
    for t in (0.0, 1.25, 12345.678901, 99.5):
        stamp = Time.from_sec(t)
        assert stamp.sec == math.floor(t)
        assert stamp.to_sec() == pytest.approx(t, abs=1e-6)


def test_time_from_sec_rejects_negative():
    with pytest.raises(ValueError):
        Time.from_sec(-0.5)


def test_time_to_nsec_small_values():
    assert Time(0, 123).to_nsec() == 123
    assert Time(1, 0).to_nsec() == 1_000_000_000


def test_time_to_nsec_wraps_to_32_bits():
    assert Time(4, 0).to_nsec() < 2**32
    assert Time(4, 0).to_nsec() == Time(4, 0).to_nsec() % 2**32


def test_round_half_away_symmetry():
    for value in (0.5, 1.5, 2.4, 2.6, 7.0):
        assert round_half_away(-value) == -round_half_away(value)


def test_round_half_away_whole_numbers_unchanged():
    assert round_half_away(4.0) == 4.0
    assert round_half_away(-9.0) == -9.0


def test_round_half_away_half():
    assert round_half_away(0.5) == 1.0