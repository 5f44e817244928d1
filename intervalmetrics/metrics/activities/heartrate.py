"""Heart-rate 指标（平均/最大/最小/效率因子/心率分区时间）。"""
from typing import Dict, List

import numpy as np

from ...core.analytics.hr import efficiency_factor, filter_hr_smooth
from ...core.analytics.zones import time_in_zones
from ..base import MetricComputator


class _HeartRateStat(MetricComputator):
    metric_units = "bpm"

    def reset(self) -> None:
        super().reset()
        self._hr: List[float] = []

    def consume(self, sample) -> None:
        self._hr.append(sample.hr)

    def finalize(self, deps: Dict[str, float]) -> None:
        valid = filter_hr_smooth(self._hr)
        if valid:
            self._value = float(self.reduce(np.asarray(valid, dtype=float)))

    def reduce(self, values: np.ndarray) -> float:
        raise NotImplementedError


class AverageHeartRate(_HeartRateStat):
    symbol = "average_hr"
    name = "Average Heart Rate"

    def reduce(self, values: np.ndarray) -> float:
        return values.mean()


class MaxHeartRate(_HeartRateStat):
    symbol = "max_hr"
    name = "Max Heart Rate"

    def reduce(self, values: np.ndarray) -> float:
        return values.max()


class MinHeartRate(_HeartRateStat):
    symbol = "min_hr"
    name = "Min Heart Rate"

    def reduce(self, values: np.ndarray) -> float:
        return values.min()


class EfficiencyFactor(MetricComputator):
    symbol = "efficiency_factor"
    name = "Efficiency Factor"
    precision = 3
    depends = ("normalized_power", "average_hr")

    def finalize(self, deps: Dict[str, float]) -> None:
        if "normalized_power" in deps and "average_hr" in deps:
            self._value = efficiency_factor(deps["normalized_power"], deps["average_hr"])


class TimeInHrZone(MetricComputator):
    zone = 0
    metric_units = "seconds"
    is_time = True

    def reset(self) -> None:
        super().reset()
        self._hr: List[float] = []

    def consume(self, sample) -> None:
        self._hr.append(sample.hr)

    def finalize(self, deps: Dict[str, float]) -> None:
        zones = self.hr_zones
        if zones is None or not zones.lthr or self.zone >= zones.count:
            return
        times = time_in_zones(self._hr, zones.zone_index, zones.count, self.rec_interval)
        self._value = times[self.zone]


HR_ZONE_COUNT = 5

TIME_IN_HR_ZONES = [
    type(
        f"TimeInHrZone{n + 1}",
        (TimeInHrZone,),
        {"symbol": f"time_in_hr_zone_{n + 1}", "name": f"H{n + 1} Time in Zone", "zone": n},
    )
    for n in range(HR_ZONE_COUNT)
]

COMPUTATORS = [
    AverageHeartRate,
    MaxHeartRate,
    MinHeartRate,
    EfficiencyFactor,
    *TIME_IN_HR_ZONES,
]
