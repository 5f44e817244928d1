"""Power 指标（平均/最大/NP/IF/TSS/VI/做功/海拔功率/功率分区时间）。"""
from typing import Dict, List

from ...core.analytics.power import (
    intensity_factor,
    normalized_power,
    normalized_power_from_rolling,
    training_stress,
    variability_index,
)
from ...core.analytics.zones import time_in_zones
from ..base import AverageOf, MaximumOf, MetricComputator


class AveragePower(AverageOf):
    symbol = "average_power"
    name = "Average Power"
    metric_units = "watts"
    channel = "watts"


class MaxPower(MaximumOf):
    symbol = "max_power"
    name = "Max Power"
    metric_units = "watts"
    channel = "watts"


class TotalWork(MetricComputator):
    symbol = "total_work"
    name = "Work"
    metric_units = "kJ"

    def reset(self) -> None:
        super().reset()
        self._joules = 0.0
        self._seen = False

    def consume(self, sample) -> None:
        if sample.watts is not None:
            self._seen = True
            self._joules += sample.watts * self.rec_interval

    def finalize(self, deps: Dict[str, float]) -> None:
        if self._seen:
            self._value = self._joules / 1000.0


class NormalizedPower(MetricComputator):
    """Uses the parent sequence's rolling np values, so an interval's NP
    carries the 30 s history leading into it. Falls back to rolling the
    slice itself when no np values were derived."""
    symbol = "normalized_power"
    name = "Normalized Power"
    metric_units = "watts"

    def reset(self) -> None:
        super().reset()
        self._rolled: List[float] = []
        self._watts: List[float] = []

    def consume(self, sample) -> None:
        if sample.np is not None:
            self._rolled.append(sample.np)
        self._watts.append(sample.watts)

    def finalize(self, deps: Dict[str, float]) -> None:
        if self._rolled:
            self._value = normalized_power_from_rolling(self._rolled)
        elif any(w is not None for w in self._watts):
            window = max(1, int(round(30 / self.rec_interval)))
            self._value = normalized_power(self._watts, window)


class AverageAPower(AverageOf):
    symbol = "average_apower"
    name = "Altitude Power"
    metric_units = "watts"
    channel = "apower"


class IntensityFactor(MetricComputator):
    symbol = "intensity_factor"
    name = "Intensity Factor"
    precision = 3
    depends = ("normalized_power",)

    def finalize(self, deps: Dict[str, float]) -> None:
        if "normalized_power" in deps and self.zones is not None:
            self._value = intensity_factor(deps["normalized_power"], self.zones.ftp)


class TrainingStress(MetricComputator):
    symbol = "training_stress"
    name = "TSS"
    depends = ("workout_time", "normalized_power")

    def finalize(self, deps: Dict[str, float]) -> None:
        if "normalized_power" in deps and "workout_time" in deps and self.zones is not None:
            self._value = training_stress(deps["workout_time"], deps["normalized_power"], self.zones.ftp)


class VariabilityIndex(MetricComputator):
    symbol = "variability_index"
    name = "Variability Index"
    precision = 3
    depends = ("normalized_power", "average_power")

    def finalize(self, deps: Dict[str, float]) -> None:
        if "normalized_power" in deps and "average_power" in deps:
            self._value = variability_index(deps["normalized_power"], deps["average_power"])


class TimeInPowerZone(MetricComputator):
    zone = 0
    metric_units = "seconds"
    is_time = True

    def reset(self) -> None:
        super().reset()
        self._watts: List[float] = []

    def consume(self, sample) -> None:
        self._watts.append(sample.watts)

    def finalize(self, deps: Dict[str, float]) -> None:
        if self.zones is None or not self.zones.ftp or self.zone >= self.zones.count:
            return
        times = time_in_zones(self._watts, self.zones.zone_index, self.zones.count, self.rec_interval)
        self._value = times[self.zone]


POWER_ZONE_COUNT = 7

TIME_IN_POWER_ZONES = [
    type(
        f"TimeInPowerZone{n + 1}",
        (TimeInPowerZone,),
        {"symbol": f"time_in_power_zone_{n + 1}", "name": f"L{n + 1} Time in Zone", "zone": n},
    )
    for n in range(POWER_ZONE_COUNT)
]

COMPUTATORS = [
    AveragePower,
    MaxPower,
    TotalWork,
    NormalizedPower,
    AverageAPower,
    IntensityFactor,
    TrainingStress,
    VariabilityIndex,
    *TIME_IN_POWER_ZONES,
]
