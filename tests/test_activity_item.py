import pytest

from intervalmetrics.activities.item import ActivityItem
from intervalmetrics.intervals.bounds import IntervalBound
from intervalmetrics.intervals.models import IntervalType
from intervalmetrics.streams.derived import derive_series


def _item(make_samples, registry, athlete, bounds=()):
    seq = make_samples(120, watts=[150] * 60 + [300] * 60, kph=36.0)
    derive_series(seq)
    return ActivityItem(11, registry, samples=seq, athlete=athlete, bounds=list(bounds))


def test_build_intervals_links_bounds(make_samples, registry, athlete):
    bounds = [
        IntervalBound(activity_id=11, name="a", start=0, stop=60),
        IntervalBound(activity_id=11, name="b", start=60, stop=120),
    ]
    item = _item(make_samples, registry, athlete, bounds)
    system = item.add_interval("peak", 100, 110, type=IntervalType.PEAK_POWER)

    records = item.build_intervals()
    assert len(records) == 3
    assert records[0] is system
    user = records[1:]
    assert [r.bound_index for r in user] == [0, 1]
    assert [r.name for r in user] == ["a", "b"]
    assert all(r.type == IntervalType.USER for r in user)
    assert user[0].value_for("average_power") == 150
    assert user[1].value_for("average_power") == 300
    assert user[1].start_km == pytest.approx(0.6)
    assert user[1].owner is item

    # rebuilding replaces the user intervals instead of duplicating them
    assert len(item.build_intervals()) == 3


def test_add_interval_sets_distance_bounds(make_samples, registry, athlete):
    item = _item(make_samples, registry, athlete)
    record = item.add_interval("mid", 30, 90, color="#00ff00")
    assert record.start_km == pytest.approx(0.3)
    assert record.stop_km == pytest.approx(0.9)
    assert record.color == "#00ff00"
    assert record.bound_index is None
    assert record.display_sequence == 0
    assert item.add_interval("next", 0, 10).display_sequence == 1


def test_distance_at(make_samples, registry, athlete):
    item = _item(make_samples, registry, athlete)
    assert item.distance_at(0) == 0.0
    assert item.distance_at(10) == pytest.approx(0.1)
    assert item.distance_at(10_000) == item.samples[-1].km
    assert ActivityItem(1, registry).distance_at(5) == 0.0


def test_rename_selected(make_samples, registry, athlete):
    bounds = [IntervalBound(activity_id=11, name="a", start=0, stop=60)]
    item = _item(make_samples, registry, athlete, bounds)
    user = item.build_intervals()[0]
    lap = item.add_interval("lap", 0, 30, type=IntervalType.DEVICE)
    other = item.add_interval("other", 30, 60, type=IntervalType.DEVICE)
    user.selected = True
    lap.selected = True

    assert item.rename_selected("repeat") == 2
    assert user.name == "repeat"
    assert lap.name == "repeat"
    assert other.name == "other"
    assert bounds[0].name == "repeat"
    assert item.is_dirty


def test_refresh_intervals_after_samples_change(make_samples, registry, athlete):
    item = _item(make_samples, registry, athlete)
    record = item.add_interval("all", 0, 120)
    assert record.value_for("max_power") == 300

    item.samples = make_samples(120, watts=400)
    item.refresh_intervals()
    assert record.value_for("max_power") == 400


def test_build_intervals_skips_inverted_bound(make_samples, registry, athlete, caplog):
    bounds = [
        IntervalBound(activity_id=11, name="ok", start=0, stop=10),
        IntervalBound(activity_id=11, name="bad", start=15, stop=5),
        IntervalBound(activity_id=11, name="late", start=60, stop=120),
    ]
    item = _item(make_samples, registry, athlete, bounds)

    with caplog.at_level("WARNING", logger="intervalmetrics.activities.item"):
        records = item.build_intervals()

    assert [r.name for r in records] == ["ok", "late"]
    assert [r.bound_index for r in records] == [0, 2]
    assert records[1].value_for("average_power") == 300
    assert "[activity][bad-bound]" in caplog.text
