"""
日志初始化（Logging Bootstrap）

说明：
- 包内各模块只通过 logging.getLogger(__name__) 记录日志，不自行配置 handler；
- 宿主应用在启动时调用一次 setup_logging()，统一根日志记录器的格式与等级；
- 等级取显式传入的 `level`，否则取 config.LOG_LEVEL（环境变量 LOG_LEVEL，默认 INFO）。

示例：
    from intervalmetrics.logging_config import setup_logging
    setup_logging()          # 按 LOG_LEVEL
    setup_logging("debug")   # 查看 [interval][refresh-skip] 等调试日志
"""

import logging
from typing import Optional

from .config import LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> None:
    """初始化全局日志配置；无法识别的等级名按 INFO 处理。"""
    log_level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
