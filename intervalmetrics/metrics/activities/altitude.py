"""Altitude 指标（累计爬升/下降、最高海拔）。"""
from typing import Dict, List

from ...core.analytics.altitude import elevation_change, filter_altitude
from ..base import MetricComputator

METRES_TO_FEET = 3.2808399


class _AltitudeStat(MetricComputator):
    metric_units = "meters"
    imperial_units = "feet"
    conversion = METRES_TO_FEET

    def reset(self) -> None:
        super().reset()
        self._alt: List[float] = []

    def consume(self, sample) -> None:
        self._alt.append(sample.alt)


class ElevationGain(_AltitudeStat):
    symbol = "elevation_gain"
    name = "Elevation Gain"

    def finalize(self, deps: Dict[str, float]) -> None:
        if any(a is not None for a in self._alt):
            self._value = elevation_change(self._alt)[0]


class ElevationLoss(_AltitudeStat):
    symbol = "elevation_loss"
    name = "Elevation Loss"

    def finalize(self, deps: Dict[str, float]) -> None:
        if any(a is not None for a in self._alt):
            self._value = elevation_change(self._alt)[1]


class MaxAltitude(_AltitudeStat):
    symbol = "max_altitude"
    name = "Max Altitude"

    def finalize(self, deps: Dict[str, float]) -> None:
        valid = filter_altitude(self._alt)
        if valid:
            self._value = max(valid)


COMPUTATORS = [ElevationGain, ElevationLoss, MaxAltitude]
