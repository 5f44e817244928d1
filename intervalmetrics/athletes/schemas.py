"""
本文件定义了运动员配置相关的 Pydantic 数据模型。

1. PowerZones: 功率分区（按 FTP 比例给出各区下限）
2. HeartRateZones: 心率分区（按 LTHR 比例给出各区下限）
3. AthleteConfig: 运动员配置，负责提供当前的功率/心率分区

分区对象对计算引擎是不透明的，只有具体的指标计算器才会解释它们。
"""

from bisect import bisect_right
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

# Coggan 七区：Z1 < 55% FTP ... Z7 >= 150% FTP
DEFAULT_POWER_BOUNDARIES = [0.0, 0.55, 0.75, 0.90, 1.05, 1.20, 1.50]
# 基于 LTHR 的五区：Z1 < 85% ... Z5 >= 100%
DEFAULT_HR_BOUNDARIES = [0.0, 0.85, 0.90, 0.95, 1.00]


def _check_boundaries(v: List[float]) -> List[float]:
    if not v:
        raise ValueError('boundaries must not be empty')
    if any(b < 0 for b in v):
        raise ValueError('boundaries must be non-negative')
    if any(b2 <= b1 for b1, b2 in zip(v, v[1:])):
        raise ValueError('boundaries must be strictly increasing')
    return v


class PowerZones(BaseModel):
    """功率分区"""
    ftp: Optional[float] = None
    boundaries: List[float] = Field(default_factory=lambda: list(DEFAULT_POWER_BOUNDARIES))

    @field_validator('boundaries')
    @classmethod
    def check_boundaries(cls, v: List[float]) -> List[float]:
        return _check_boundaries(v)

    @property
    def count(self) -> int:
        return len(self.boundaries)

    def zone_index(self, watts: Optional[float]) -> int:
        """返回功率所在的区间下标（0 开始），FTP 未设置或功率无效时返回 -1。"""
        if not self.ftp or self.ftp <= 0 or watts is None or watts < 0:
            return -1
        return bisect_right(self.boundaries, watts / self.ftp) - 1


class HeartRateZones(BaseModel):
    """心率分区"""
    lthr: Optional[float] = None
    boundaries: List[float] = Field(default_factory=lambda: list(DEFAULT_HR_BOUNDARIES))

    @field_validator('boundaries')
    @classmethod
    def check_boundaries(cls, v: List[float]) -> List[float]:
        return _check_boundaries(v)

    @property
    def count(self) -> int:
        return len(self.boundaries)

    def zone_index(self, bpm: Optional[float]) -> int:
        """返回心率所在的区间下标（0 开始），LTHR 未设置或心率无效时返回 -1。"""
        if not self.lthr or self.lthr <= 0 or bpm is None or bpm <= 0:
            return -1
        return bisect_right(self.boundaries, bpm / self.lthr) - 1


class AthleteConfig(BaseModel):
    """运动员配置：FTP、阈值心率以及可选的自定义分区比例"""
    name: str = ""
    ftp: Optional[float] = None
    lthr: Optional[float] = None
    power_boundaries: List[float] = Field(default_factory=lambda: list(DEFAULT_POWER_BOUNDARIES))
    hr_boundaries: List[float] = Field(default_factory=lambda: list(DEFAULT_HR_BOUNDARIES))

    def zones(self) -> PowerZones:
        return PowerZones(ftp=self.ftp, boundaries=self.power_boundaries)

    def hr_zones(self) -> HeartRateZones:
        return HeartRateZones(lthr=self.lthr, boundaries=self.hr_boundaries)
