"""
持久化的区间边界记录（ORM）。

用户自定义区间（IntervalType.USER）编辑边界时，会把新的 start/stop 写回这里，
并把所属活动标记为 dirty；距离边界只保存在内存中的 IntervalRecord 上。
"""

from sqlalchemy import Column, Float, Integer, String

from ..db_base import Base


class IntervalBound(Base):
    """
    区间边界表模型
    - id: 主键
    - activity_id: 所属活动ID
    - name: 区间名称
    - type: 区间类型标签（见 IntervalType）
    - start/stop: 区间起止时间（秒，活动内偏移）
    """
    __tablename__ = 'tb_interval_bound'
    id = Column(Integer, primary_key=True, index=True)
    activity_id = Column(Integer, nullable=False, index=True)
    name = Column(String(64), nullable=False, default="")
    type = Column(String(16), nullable=False, default="user")
    start = Column(Float, nullable=False, default=0.0)
    stop = Column(Float, nullable=False, default=0.0)
