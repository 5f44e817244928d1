"""踏频与踩踏指标（平均/最大踏频、左右平衡、扭矩效率、踏板平顺度）。"""
from ..base import AverageOf, MaximumOf


class AverageCadence(AverageOf):
    symbol = "average_cad"
    name = "Average Cadence"
    metric_units = "rpm"
    channel = "cad"

    # 停止踩踏的采样不计入平均
    def accept(self, v: float) -> bool:
        return v > 0


class MaxCadence(MaximumOf):
    symbol = "max_cad"
    name = "Max Cadence"
    metric_units = "rpm"
    channel = "cad"


class _PedalAverage(AverageOf):
    metric_units = "%"
    precision = 1

    def accept(self, v: float) -> bool:
        return 0 <= v <= 100


class AverageLRBalance(_PedalAverage):
    symbol = "average_lrbalance"
    name = "Left/Right Balance"
    channel = "lrbalance"


class AverageLTE(_PedalAverage):
    symbol = "average_lte"
    name = "Left Torque Effectiveness"
    channel = "lte"


class AverageRTE(_PedalAverage):
    symbol = "average_rte"
    name = "Right Torque Effectiveness"
    channel = "rte"


class AverageLPS(_PedalAverage):
    symbol = "average_lps"
    name = "Left Pedal Smoothness"
    channel = "lps"


class AverageRPS(_PedalAverage):
    symbol = "average_rps"
    name = "Right Pedal Smoothness"
    channel = "rps"


COMPUTATORS = [
    AverageCadence,
    MaxCadence,
    AverageLRBalance,
    AverageLTE,
    AverageRTE,
    AverageLPS,
    AverageRPS,
]
