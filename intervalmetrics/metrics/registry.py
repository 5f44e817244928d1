"""指标注册表（MetricRegistry）与单位换算。

注册表在进程启动时按计算器列表构建一次，之后只读：
- 每个指标有唯一 symbol 和稠密下标 index（按注册顺序分配）
- 区间缓存数组的长度恒等于 registry.count
- 可以在多个并发计算之间共享读取，无需加锁

单位换算是纯函数 convert()，不借助任何共享的可变对象。
"""
import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Type

from ..core.analytics.time_utils import format_time
from .base import MetricComputator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricDescriptor:
    symbol: str
    name: str
    index: int
    metric_units: str = ""
    imperial_units: str = ""
    conversion: float = 1.0
    conversion_sum: float = 0.0
    precision: int = 0
    is_time: bool = False


class MetricRegistry:
    def __init__(self, computators: Iterable[Type[MetricComputator]]):
        descriptors: List[MetricDescriptor] = []
        classes: List[Type[MetricComputator]] = []
        by_symbol = {}
        for cls in computators:
            if not issubclass(cls, MetricComputator):
                raise ValueError(f"{cls!r} is not a MetricComputator")
            if not cls.symbol:
                raise ValueError(f"{cls.__name__} has no symbol")
            if cls.symbol in by_symbol:
                raise ValueError(f"duplicate metric symbol: {cls.symbol}")
            missing = [d for d in cls.depends if d not in by_symbol]
            if missing:
                raise ValueError(
                    f"{cls.symbol} depends on {missing} which must be registered before it"
                )
            d = MetricDescriptor(
                symbol=cls.symbol,
                name=cls.name or cls.symbol,
                index=len(descriptors),
                metric_units=cls.metric_units,
                imperial_units=cls.imperial_units or cls.metric_units,
                conversion=cls.conversion,
                conversion_sum=cls.conversion_sum,
                precision=cls.precision,
                is_time=cls.is_time,
            )
            descriptors.append(d)
            classes.append(cls)
            by_symbol[cls.symbol] = d

        self._descriptors: Tuple[MetricDescriptor, ...] = tuple(descriptors)
        self._classes: Tuple[Type[MetricComputator], ...] = tuple(classes)
        self._by_symbol = MappingProxyType(by_symbol)
        logger.debug("[registry][built] metrics=%d", len(self._descriptors))

    @property
    def count(self) -> int:
        return len(self._descriptors)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[MetricDescriptor]:
        return iter(self._descriptors)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._by_symbol

    def descriptor(self, symbol: str) -> Optional[MetricDescriptor]:
        return self._by_symbol.get(symbol)

    def instantiate(self, zones: Any, hr_zones: Any, rec_interval: float) -> List[MetricComputator]:
        """为一次计算新建全部计算器实例（按注册顺序）。"""
        return [
            cls(d, zones=zones, hr_zones=hr_zones, rec_interval=rec_interval)
            for cls, d in zip(self._classes, self._descriptors)
        ]


def convert(descriptor: MetricDescriptor, value: float, use_imperial: bool) -> float:
    """公制值 -> 展示值。use_imperial 为 False 时原样返回。"""
    if not use_imperial:
        return value
    return value * descriptor.conversion + descriptor.conversion_sum


def format_value(descriptor: MetricDescriptor, value: float, use_imperial: bool) -> str:
    """按指标的精度和单位格式化；时长类指标格式化为 h:mm:ss。"""
    if value is None or not math.isfinite(value):
        value = 0.0
    v = convert(descriptor, value, use_imperial)
    if descriptor.is_time:
        return format_time(v)
    text = f"{v:.{descriptor.precision}f}"
    units = descriptor.imperial_units if use_imperial else descriptor.metric_units
    return f"{text} {units}" if units else text
