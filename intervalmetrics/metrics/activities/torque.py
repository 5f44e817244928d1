"""Torque 指标（平均扭矩），英制换算为 ft·lbf。"""
from ..base import AverageOf

NM_TO_FTLBF = 0.737562149


class AverageTorque(AverageOf):
    symbol = "average_torque"
    name = "Average Torque"
    metric_units = "Nm"
    imperial_units = "ftLb"
    conversion = NM_TO_FTLBF
    precision = 2
    channel = "nm"


COMPUTATORS = [AverageTorque]
