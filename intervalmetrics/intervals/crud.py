# 区间边界的数据操作层（CRUD），通过 SQLAlchemy 的 Session 与数据库交互。
#
# bounds.py 定义"数据长什么样"，这里负责"怎么查、怎么存"。
# IntervalRecord 只会把 start/stop 写到内存中的 IntervalBound 上并标记活动 dirty，
# 真正落库由 save_dirty 完成。

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..activities.item import ActivityItem
from .bounds import IntervalBound
from .models import IntervalType

logger = logging.getLogger(__name__)


def get_bounds(db: Session, activity_id: int) -> List[IntervalBound]:
    """
    获取指定活动的全部区间边界，按开始时间排序
    """
    stmt = (
        select(IntervalBound)
        .where(IntervalBound.activity_id == activity_id)
        .order_by(IntervalBound.start, IntervalBound.id)
    )
    return list(db.execute(stmt).scalars().all())


def create_bound(
    db: Session,
    activity_id: int,
    name: str,
    start: float,
    stop: float,
    type: IntervalType = IntervalType.USER,
) -> IntervalBound:
    """
    创建新的区间边界并返回
    """
    if start > stop:
        raise ValueError(f"interval start {start} is after stop {stop}")
    db_bound = IntervalBound(
        activity_id=activity_id,
        name=name,
        type=IntervalType(type).value,
        start=start,
        stop=stop,
    )
    try:
        db.add(db_bound)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[interval-crud][create-error] activity_id=%s", activity_id)
        raise
    db.refresh(db_bound)
    return db_bound


def save_dirty(db: Session, item: ActivityItem) -> bool:
    """
    活动被标记为 dirty 时，把其区间边界写回数据库并清除 dirty 标记。

    返回：
        是否执行了写入
    """
    if not item.is_dirty:
        return False
    try:
        for bound in item.bounds:
            db.add(bound)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[interval-crud][save-error] activity_id=%s", item.activity_id)
        raise
    item.set_dirty(False)
    logger.info("[interval-crud][save] activity_id=%s bounds=%d", item.activity_id, len(item.bounds))
    return True
