"""
活动容器（ActivityItem）：持有一个活动的采样序列、运动员配置、持久化区间边界，
以及由这些边界或系统检测生成的 IntervalRecord 列表。

IntervalRecord 只弱引用本对象；区间的生命周期完全由这里的 intervals 列表决定。
"""
import logging
from typing import List, Optional

from ..athletes.schemas import AthleteConfig
from ..intervals.bounds import IntervalBound
from ..intervals.models import IntervalRecord, IntervalType
from ..metrics.registry import MetricRegistry
from ..streams.models import SampleSequence

logger = logging.getLogger(__name__)


class ActivityItem:
    def __init__(
        self,
        activity_id: int,
        registry: MetricRegistry,
        samples: Optional[SampleSequence] = None,
        athlete: Optional[AthleteConfig] = None,
        bounds: Optional[List[IntervalBound]] = None,
    ):
        self.activity_id = activity_id
        self.registry = registry
        self.samples = samples
        self.athlete = athlete or AthleteConfig()
        self.bounds: List[IntervalBound] = list(bounds or [])
        self.intervals: List[IntervalRecord] = []
        self._dirty = False

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def set_dirty(self, flag: bool) -> None:
        self._dirty = flag

    def distance_at(self, secs: float) -> float:
        """第一个 secs >= 给定时间的采样的累计距离；超出末尾取最后一个采样，没有采样返回 0。"""
        if self.samples is None or not len(self.samples):
            return 0.0
        idx = self.samples.interval_begin_index(secs)
        if idx < 0:
            return self.samples[-1].km
        return self.samples[idx].km

    def build_intervals(self) -> List[IntervalRecord]:
        """按持久化边界重建用户区间（保留已有的系统区间）。

        起点晚于终点的边界记录会被跳过并记录警告，不影响其它区间。
        """
        self.intervals = [i for i in self.intervals if i.bound_index is None]
        for n, bound in enumerate(self.bounds):
            if bound.start > bound.stop:
                logger.warning(
                    "[activity][bad-bound] activity_id=%s bound=%d name=%s start=%s stop=%s skipped",
                    self.activity_id, n, bound.name, bound.start, bound.stop,
                )
                continue
            record = IntervalRecord(
                self.registry,
                name=bound.name or "",
                start=bound.start,
                stop=bound.stop,
                start_km=self.distance_at(bound.start),
                stop_km=max(self.distance_at(bound.start), self.distance_at(bound.stop)),
                display_sequence=len(self.intervals),
                type=IntervalType.USER,
                bound_index=n,
                activity=self,
            )
            record.refresh()
            self.intervals.append(record)
        logger.info("[activity][build-intervals] activity_id=%s intervals=%d", self.activity_id, len(self.intervals))
        return self.intervals

    def add_interval(
        self,
        name: str,
        start: float,
        stop: float,
        type: IntervalType = IntervalType.USER,
        color: str = "#000000",
    ) -> IntervalRecord:
        """新增一个不关联持久化边界的区间（例如系统检测结果）并计算指标。"""
        record = IntervalRecord(
            self.registry,
            name=name,
            start=start,
            stop=stop,
            start_km=self.distance_at(start),
            stop_km=max(self.distance_at(start), self.distance_at(stop)),
            display_sequence=len(self.intervals),
            color=color,
            type=type,
            activity=self,
        )
        record.refresh()
        self.intervals.append(record)
        return record

    def selected_intervals(self) -> List[IntervalRecord]:
        return [i for i in self.intervals if i.selected]

    def rename_selected(self, name: str) -> int:
        """批量重命名所有选中的区间，返回被重命名的数量。不触发重新计算。"""
        selected = self.selected_intervals()
        for record in selected:
            record.name = name
            if record.type == IntervalType.USER and record.bound_index is not None:
                self.bounds[record.bound_index].name = name
                self.set_dirty(True)
        return len(selected)

    def refresh_intervals(self) -> None:
        """采样数据变化后重新计算全部区间。"""
        for record in self.intervals:
            record.refresh()
