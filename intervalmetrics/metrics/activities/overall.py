"""Overall 指标（时长/骑行时间/距离/速度）。"""
from typing import Dict

from ..base import MaximumOf, MetricComputator

KM_TO_MILES = 0.621371192


class WorkoutTime(MetricComputator):
    symbol = "workout_time"
    name = "Duration"
    metric_units = "seconds"
    is_time = True

    def reset(self) -> None:
        super().reset()
        self._first = None
        self._last = None

    def consume(self, sample) -> None:
        if self._first is None:
            self._first = sample.secs
        self._last = sample.secs

    def finalize(self, deps: Dict[str, float]) -> None:
        if self._first is not None:
            self._value = self._last - self._first + self.rec_interval


class TimeRiding(MetricComputator):
    """Time with the wheels or the cranks turning."""
    symbol = "time_riding"
    name = "Time Riding"
    metric_units = "seconds"
    is_time = True

    def reset(self) -> None:
        super().reset()
        self._moving = 0

    def consume(self, sample) -> None:
        if (sample.kph or 0) > 0 or (sample.cad or 0) > 0:
            self._moving += 1

    def finalize(self, deps: Dict[str, float]) -> None:
        self._value = self._moving * self.rec_interval


class TotalDistance(MetricComputator):
    symbol = "total_distance"
    name = "Distance"
    metric_units = "km"
    imperial_units = "mi"
    conversion = KM_TO_MILES
    precision = 2

    def reset(self) -> None:
        super().reset()
        self._first = None
        self._last = None

    def consume(self, sample) -> None:
        if self._first is None:
            self._first = sample.km
        self._last = sample.km

    def finalize(self, deps: Dict[str, float]) -> None:
        if self._first is not None:
            self._value = self._last - self._first


class AverageSpeed(MetricComputator):
    symbol = "average_speed"
    name = "Average Speed"
    metric_units = "kph"
    imperial_units = "mph"
    conversion = KM_TO_MILES
    precision = 1
    depends = ("total_distance", "time_riding")

    def finalize(self, deps: Dict[str, float]) -> None:
        secs = deps.get("time_riding", 0.0)
        if secs > 0 and "total_distance" in deps:
            self._value = deps["total_distance"] / secs * 3600.0


class MaxSpeed(MaximumOf):
    symbol = "max_speed"
    name = "Max Speed"
    metric_units = "kph"
    imperial_units = "mph"
    conversion = KM_TO_MILES
    precision = 1
    channel = "kph"


COMPUTATORS = [WorkoutTime, TimeRiding, TotalDistance, AverageSpeed, MaxSpeed]
