"""指标计算器基类。

每次计算都会新建计算器实例，调用顺序固定为：
    reset() -> consume(sample)（逐个采样，按时间顺序）-> finalize(deps) -> value()

value() 返回 None 表示本次切片不产出该指标（例如没有对应通道的数据）。
deps 为已完成计算的指标映射（symbol -> value），depends 中列出的指标
在注册顺序上一定排在当前指标之前。
"""
from typing import Any, Dict, List, Optional, Tuple

import numpy as np


class MetricComputator:
    # 描述信息（注册时转成 MetricDescriptor）
    symbol: str = ""
    name: str = ""
    metric_units: str = ""
    imperial_units: str = ""
    conversion: float = 1.0
    conversion_sum: float = 0.0
    precision: int = 0
    is_time: bool = False
    depends: Tuple[str, ...] = ()

    def __init__(self, descriptor, zones: Any = None, hr_zones: Any = None, rec_interval: float = 1.0):
        self.descriptor = descriptor
        self.zones = zones
        self.hr_zones = hr_zones
        self.rec_interval = rec_interval
        self._value: Optional[float] = None

    def index(self) -> int:
        return self.descriptor.index

    def reset(self) -> None:
        self._value = None

    def consume(self, sample) -> None:
        pass

    def finalize(self, deps: Dict[str, float]) -> None:
        pass

    def value(self) -> Optional[float]:
        return self._value


class ChannelComputator(MetricComputator):
    """Collects one sample channel, skipping NO_DATA, and reduces it in finalize."""

    channel: str = ""

    def reset(self) -> None:
        super().reset()
        self._values: List[float] = []

    def accept(self, v: float) -> bool:
        return True

    def consume(self, sample) -> None:
        v = getattr(sample, self.channel)
        if v is not None and self.accept(v):
            self._values.append(v)

    def finalize(self, deps: Dict[str, float]) -> None:
        if self._values:
            self._value = float(self.summarize(np.asarray(self._values, dtype=float)))

    def summarize(self, values: np.ndarray) -> float:
        raise NotImplementedError


class AverageOf(ChannelComputator):
    def summarize(self, values: np.ndarray) -> float:
        return values.mean()


class MaximumOf(ChannelComputator):
    def summarize(self, values: np.ndarray) -> float:
        return values.max()


class MinimumOf(ChannelComputator):
    def summarize(self, values: np.ndarray) -> float:
        return values.min()
