"""
本文件定义了采样数据相关的数据模型。

包含：
1. Sample - 单个时间点的传感器读数（原始通道 + 派生字段）
2. SampleSequence - 一个活动的有序采样序列，支持按时间定位与区间切片
"""

import logging
from bisect import bisect_left
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field

from ..config import DEFAULT_REC_INTERVAL

logger = logging.getLogger(__name__)

# "无数据" 哨兵值：通道缺失时取该值，而不是省略字段
NO_DATA = None

# 原始通道，切片时逐一原样复制
RAW_CHANNELS = (
    'cad', 'hr', 'kph', 'nm', 'watts', 'alt', 'lon', 'lat', 'headwind',
    'slope', 'temp', 'lrbalance', 'lte', 'rte', 'lps', 'rps',
    'lpco', 'rpco', 'lppb', 'rppb', 'lppe', 'rppe',
    'lpppb', 'rpppb', 'lpppe', 'rpppe',
    'smo2', 'thb', 'rvert', 'rcad', 'rcontact',
)

# 派生字段：由父序列预先计算，切片时复制，不重新计算
DERIVED_CHANNELS = ('np', 'work', 'apower')


class Sample(BaseModel):
    """单个采样点。secs 为活动内时间偏移（秒），km 为累计距离（公里）。"""
    secs     : float           = Field(...)
    km       : float           = Field(default=0.0)
    cad      : Optional[float] = NO_DATA
    hr       : Optional[float] = NO_DATA
    kph      : Optional[float] = NO_DATA
    nm       : Optional[float] = NO_DATA
    watts    : Optional[float] = NO_DATA
    alt      : Optional[float] = NO_DATA
    lon      : Optional[float] = NO_DATA
    lat      : Optional[float] = NO_DATA
    headwind : Optional[float] = NO_DATA
    slope    : Optional[float] = NO_DATA
    temp     : Optional[float] = NO_DATA
    lrbalance: Optional[float] = NO_DATA
    lte      : Optional[float] = NO_DATA
    rte      : Optional[float] = NO_DATA
    lps      : Optional[float] = NO_DATA
    rps      : Optional[float] = NO_DATA
    lpco     : Optional[float] = NO_DATA
    rpco     : Optional[float] = NO_DATA
    lppb     : Optional[float] = NO_DATA
    rppb     : Optional[float] = NO_DATA
    lppe     : Optional[float] = NO_DATA
    rppe     : Optional[float] = NO_DATA
    lpppb    : Optional[float] = NO_DATA
    rpppb    : Optional[float] = NO_DATA
    lpppe    : Optional[float] = NO_DATA
    rpppe    : Optional[float] = NO_DATA
    smo2     : Optional[float] = NO_DATA
    thb      : Optional[float] = NO_DATA
    rvert    : Optional[float] = NO_DATA
    rcad     : Optional[float] = NO_DATA
    rcontact : Optional[float] = NO_DATA

    # 派生字段
    np       : Optional[float] = NO_DATA  # 30s 滚动平均功率
    work     : Optional[float] = NO_DATA  # 累计做功（kJ）
    apower   : Optional[float] = NO_DATA  # 海拔修正后的估算功率


class SampleSequence:
    """一个活动的有序采样序列（按 secs 非递减）。

    对区间引擎而言是只读的：切片会生成新的临时序列，父序列不被修改。
    """

    def __init__(self, rec_interval: float = DEFAULT_REC_INTERVAL, samples: Optional[List[Sample]] = None):
        if rec_interval <= 0:
            raise ValueError(f"rec_interval must be positive, got {rec_interval}")
        self.rec_interval = float(rec_interval)
        self._samples: List[Sample] = []
        self._secs: List[float] = []
        for sample in samples or []:
            self.append(sample)

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def append(self, sample: Sample) -> None:
        if self._secs and sample.secs < self._secs[-1]:
            raise ValueError(
                f"sample time {sample.secs} precedes last sample time {self._secs[-1]}"
            )
        self._samples.append(sample)
        self._secs.append(sample.secs)

    def append_point(self, secs: float, **fields) -> Sample:
        """按字段构建 Sample 并追加，返回新建的采样点。"""
        sample = Sample(secs=secs, **fields)
        self.append(sample)
        return sample

    def interval_begin_index(self, secs: float) -> int:
        """返回第一个 secs >= 给定时间的采样下标，不存在则返回 -1。"""
        idx = bisect_left(self._secs, secs)
        if idx >= len(self._secs):
            return -1
        return idx

    def slice(self, start: float, stop: float) -> Optional["SampleSequence"]:
        """截取 [start, stop) 区间内的采样，生成新的临时序列。

        采样点 t 入选当且仅当 start <= t 且 t + rec_interval <= stop。
        原始通道与派生字段都原样复制（包括 NO_DATA），派生字段不重新计算。
        起点越界或结果为空时返回 None，调用方应保留原有缓存。
        """
        begin = self.interval_begin_index(start)
        if begin < 0:
            logger.debug("[streams][slice-empty] start=%s beyond last sample", start)
            return None

        out = SampleSequence(rec_interval=self.rec_interval)
        for i in range(begin, len(self._samples)):
            p = self._samples[i]
            if p.secs + self.rec_interval > stop:
                break
            raw = {c: getattr(p, c) for c in RAW_CHANNELS}
            sample = out.append_point(p.secs, km=p.km, **raw)

            # 派生字段直接复制
            for c in DERIVED_CHANNELS:
                setattr(sample, c, getattr(p, c))

        if not len(out):
            logger.debug("[streams][slice-empty] start=%s stop=%s selected no samples", start, stop)
            return None
        return out
