"""
区间记录（IntervalRecord）：活动中一段有名字、有边界的区域，以及它的指标缓存。

生命周期：
    构造（Populated）-> 边界或采样变化（Stale）-> refresh()（Refreshed）-> ...
refresh() 失败（没有采样数据 / 切片为空）时保持上一次的缓存不变。

所属活动只以弱引用持有；持久化边界记录以下标（bound_index）指向所属活动的 bounds 列表。
"""
import logging
import math
import weakref
from dataclasses import InitVar, dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..config import use_imperial_units
from ..metrics.engine import compute_metrics
from ..metrics.registry import MetricRegistry, convert, format_value

logger = logging.getLogger(__name__)


class IntervalType(str, Enum):
    """区间类型"""
    USER = "user"              # 用户手动创建
    DEVICE = "device"          # 设备记录的圈（lap）
    PEAK_POWER = "peakpower"   # 峰值功率
    PEAK_PACE = "peakpace"     # 峰值配速
    EFFORT = "effort"          # 持续高强度段
    CLIMB = "climb"            # 爬坡
    ZONE = "zone"              # 按分区划分


def _check_bounds(start: float, stop: float, start_km: float, stop_km: float) -> None:
    if start > stop:
        raise ValueError(f"interval start {start} is after stop {stop}")
    if start_km > stop_km:
        raise ValueError(f"interval start_km {start_km} is after stop_km {stop_km}")


@dataclass
class IntervalRecord:
    registry: MetricRegistry = field(repr=False)
    name: str = ""
    start: float = 0.0
    stop: float = 0.0
    start_km: float = 0.0
    stop_km: float = 0.0
    display_sequence: int = 0
    color: str = "#000000"
    type: IntervalType = IntervalType.USER
    selected: bool = False
    bound_index: Optional[int] = None
    activity: InitVar[Optional[object]] = None
    metrics: List[float] = field(init=False, repr=False)
    _owner_ref: Optional[weakref.ref] = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self, activity):
        _check_bounds(self.start, self.stop, self.start_km, self.stop_km)
        self.type = IntervalType(self.type)
        self.metrics = [0.0] * self.registry.count
        self._owner_ref = weakref.ref(activity) if activity is not None else None

    @property
    def owner(self):
        """所属活动（弱引用），已被释放或未关联时返回 None。"""
        return self._owner_ref() if self._owner_ref is not None else None

    def set_from(self, other: "IntervalRecord") -> None:
        """复制另一条区间的全部字段；副本不关联持久化边界，且不处于选中状态。"""
        self.registry = other.registry
        self.name = other.name
        self.start = other.start
        self.stop = other.stop
        self.start_km = other.start_km
        self.stop_km = other.stop_km
        self.display_sequence = other.display_sequence
        self.color = other.color
        self.type = other.type
        self.metrics = list(other.metrics)
        self._owner_ref = other._owner_ref
        self.bound_index = None
        self.selected = False

    def set_bounds(self, name: str, start: float, stop: float, start_km: float, stop_km: float) -> None:
        """更新名称与边界并重新计算指标。

        用户区间且关联了持久化边界时，同时写回 start/stop（不写回距离）并标记活动为 dirty。
        """
        _check_bounds(start, stop, start_km, stop_km)
        self.name = name
        self.start = start
        self.stop = stop
        self.start_km = start_km
        self.stop_km = stop_km

        owner = self.owner
        if self.type == IntervalType.USER and self.bound_index is not None and owner is not None:
            bound = owner.bounds[self.bound_index]
            bound.start = start
            bound.stop = stop
            owner.set_dirty(True)
            logger.debug("[interval][write-through] name=%s start=%s stop=%s", name, start, stop)

        self.refresh()

    def refresh(self) -> None:
        owner = self.owner
        if owner is None or owner.samples is None:
            logger.debug("[interval][refresh-skip] name=%s no sample data", self.name)
            return

        interval_samples = owner.samples.slice(self.start, self.stop)
        if interval_samples is None:
            logger.debug("[interval][refresh-skip] name=%s empty slice [%s, %s)", self.name, self.start, self.stop)
            return

        computed = compute_metrics(
            interval_samples,
            owner.athlete.zones(),
            owner.athlete.hr_zones(),
            self.registry,
        )
        self.store_metrics(computed)

    def store_metrics(self, computed: Dict[str, float]) -> None:
        """清零缓存后按注册表下标写入计算结果；非有限值写为 0。"""
        self.metrics = [0.0] * self.registry.count
        for symbol, value in computed.items():
            d = self.registry.descriptor(symbol)
            if d is None:
                continue
            self.metrics[d.index] = float(value) if math.isfinite(value) else 0.0

    def value_for(self, symbol: str, use_imperial: Optional[bool] = None) -> float:
        """按 symbol 取缓存值；未知指标返回 0。use_imperial 未给出时读取配置。"""
        d = self.registry.descriptor(symbol)
        if d is None:
            return 0.0
        if use_imperial is None:
            use_imperial = use_imperial_units()
        return convert(d, self.metrics[d.index], use_imperial)

    def string_for(self, symbol: str, use_imperial: Optional[bool] = None) -> str:
        d = self.registry.descriptor(symbol)
        if d is None:
            return "-"
        if use_imperial is None:
            use_imperial = use_imperial_units()
        value = self.metrics[d.index]
        if not math.isfinite(value):
            value = 0.0
        return format_value(d, value, use_imperial)
