import pytest

from intervalmetrics.streams.derived import altitude_power_fraction, derive_series
from intervalmetrics.streams.models import (
    DERIVED_CHANNELS,
    NO_DATA,
    RAW_CHANNELS,
    Sample,
    SampleSequence,
)


def test_slice_boundary_rule(make_samples):
    seq = make_samples(10, watts=list(range(100, 110)))
    out = seq.slice(2, 5)
    assert out is not None
    # t=5 is excluded because 5 + 1 > 5
    assert [p.secs for p in out] == [2, 3, 4]
    assert [p.watts for p in out] == [102, 103, 104]
    assert out.rec_interval == seq.rec_interval


def test_slice_respects_rec_interval(make_samples):
    seq = make_samples(20, rec_interval=0.5)
    out = seq.slice(1.0, 3.0)
    assert [p.secs for p in out] == [1.0, 1.5, 2.0, 2.5]


def test_slice_matches_rule_for_every_window(make_samples):
    seq = make_samples(12, watts=150)
    for start in range(0, 12):
        for stop in range(start + 1, 14):
            out = seq.slice(start, stop)
            expected = [p.secs for p in seq if start <= p.secs and p.secs + seq.rec_interval <= stop]
            got = [p.secs for p in out] if out is not None else []
            assert got == expected


def test_slice_copies_raw_and_derived_verbatim(make_samples):
    seq = make_samples(5, watts=[200, None, 220, 230, 240], hr=150, alt=800.0, lrbalance=51.0)
    derive_series(seq)
    seq[2].np = 999.0  # derived values must be copied, never recomputed
    out = seq.slice(0, 5)
    assert len(out) == 5
    for src, dst in zip(seq, out):
        assert dst is not src
        for name in RAW_CHANNELS + DERIVED_CHANNELS + ('secs', 'km'):
            assert getattr(dst, name) == getattr(src, name)
    assert out[1].watts is NO_DATA
    assert out[2].np == 999.0


def test_slice_is_independent_of_parent(make_samples):
    seq = make_samples(5, watts=100)
    out = seq.slice(0, 5)
    out[0].watts = 1
    assert seq[0].watts == 100


def test_slice_empty_cases(make_samples):
    seq = make_samples(10)
    assert seq.slice(20, 30) is None
    assert seq.slice(3, 3.5) is None
    assert SampleSequence().slice(0, 10) is None


def test_interval_begin_index(make_samples):
    seq = make_samples(5)
    assert seq.interval_begin_index(0) == 0
    assert seq.interval_begin_index(2.5) == 3
    assert seq.interval_begin_index(4) == 4
    assert seq.interval_begin_index(4.1) == -1


def test_append_rejects_time_going_backwards():
    seq = SampleSequence()
    seq.append_point(5)
    with pytest.raises(ValueError):
        seq.append_point(4)


def test_rec_interval_must_be_positive():
    with pytest.raises(ValueError):
        SampleSequence(rec_interval=0)


def test_sample_defaults_to_no_data():
    s = Sample(secs=0)
    assert all(getattr(s, name) is NO_DATA for name in RAW_CHANNELS + DERIVED_CHANNELS)


def test_derive_series_np_and_work(make_samples):
    seq = make_samples(4, watts=[100, 200, 300, 400])
    derive_series(seq, window=2)
    assert [p.np for p in seq] == [100, 150, 250, 350]
    assert [p.work for p in seq] == pytest.approx([0.1, 0.3, 0.6, 1.0])


def test_derive_series_apower(make_samples):
    seq = make_samples(3, watts=[200, None, 200], alt=[0.0, 2000.0, 2000.0])
    derive_series(seq)
    assert seq[0].apower == pytest.approx(200 / 0.999)
    assert seq[1].apower is None
    assert seq[2].apower == pytest.approx(200 / altitude_power_fraction(2000.0))
    assert seq[2].apower > seq[0].apower


def test_derive_series_apower_stays_positive_at_extreme_altitude(make_samples):
    seq = make_samples(4, watts=200, alt=[8000.0, 8634.0, 8900.0, 9500.0])
    derive_series(seq)
    ceiling = 200 / altitude_power_fraction(8000.0)
    assert altitude_power_fraction(8634.0) > 0
    assert [p.apower for p in seq] == pytest.approx([ceiling] * 4)
    assert ceiling > 200
