"""
区间指标目录。

默认注册顺序即稠密下标顺序；依赖其他指标的计算器必须排在其依赖之后
（overall 在 power 之前，power 在 heartrate 之前）。
"""
from .activities import altitude, cadence, heartrate, overall, power, temperature, torque
from .registry import MetricDescriptor, MetricRegistry, convert, format_value

DEFAULT_COMPUTATORS = [
    *overall.COMPUTATORS,
    *power.COMPUTATORS,
    *heartrate.COMPUTATORS,
    *cadence.COMPUTATORS,
    *altitude.COMPUTATORS,
    *temperature.COMPUTATORS,
    *torque.COMPUTATORS,
]


def build_default_registry() -> MetricRegistry:
    """构建默认注册表。进程启动时调用一次，结果在各组件之间只读共享。"""
    return MetricRegistry(DEFAULT_COMPUTATORS)


__all__ = [
    "DEFAULT_COMPUTATORS",
    "MetricDescriptor",
    "MetricRegistry",
    "build_default_registry",
    "convert",
    "format_value",
]
