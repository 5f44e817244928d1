"""
区间指标引擎：对活动采样序列的任意子区间计算功率、心率、踏频、速度、海拔等指标。

典型用法：
    from intervalmetrics.logging_config import setup_logging
    from intervalmetrics.metrics import build_default_registry
    from intervalmetrics.activities.item import ActivityItem

    setup_logging()
    item = ActivityItem(activity_id, build_default_registry(), samples=samples, athlete=athlete, bounds=bounds)
    item.build_intervals()

本包只记录日志、不配置日志；宿主应用需在启动时调用一次 setup_logging()。
"""
