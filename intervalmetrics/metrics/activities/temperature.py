"""Temperature 指标（平均/最高温度），英制换算带偏移量。"""
from ..base import AverageOf, MaximumOf


class _TemperatureStat:
    metric_units = "C"
    imperial_units = "F"
    conversion = 1.8
    conversion_sum = 32.0
    precision = 1
    channel = "temp"


class AverageTemp(_TemperatureStat, AverageOf):
    symbol = "average_temp"
    name = "Average Temp"


class MaxTemp(_TemperatureStat, MaximumOf):
    symbol = "max_temp"
    name = "Max Temp"


COMPUTATORS = [AverageTemp, MaxTemp]
