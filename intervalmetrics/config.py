"""
应用配置中心（Configuration Center）

说明：
- 本模块统一管理区间指标引擎的运行配置（日志、单位制、计算参数）
- 数据库会话由调用方创建并传入 intervals/crud.py，本模块不管理数据库连接
- 配置优先从环境变量中读取，必要时提供安全的默认值

常用环境变量（全部可选）：
1) 日志
   - `LOG_LEVEL`：日志等级，默认 INFO
2) 展示单位
   - `USE_IMPERIAL_UNITS`："true"/"false"，默认 false（公制）
3) 计算参数
   - `NP_WINDOW`：标准化功率滚动窗口（秒），默认 30
   - `DEFAULT_REC_INTERVAL`：采样间隔（秒），默认 1
"""

import os


# 日志（Logging）
# LOG_LEVEL 用于控制 logging 的根等级，详见 logging_config.py
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# NP 滚动窗口，derive_series 计算 np 派生列时使用
NP_WINDOW = int(os.environ.get('NP_WINDOW', '30'))

# 采样间隔（秒），构建 SampleSequence 时未显式给出则使用该值
DEFAULT_REC_INTERVAL = float(os.environ.get('DEFAULT_REC_INTERVAL', '1'))


def use_imperial_units() -> bool:
    """
    是否默认以英制单位展示指标。

    读取环境变量 USE_IMPERIAL_UNITS（不分大小写），未设置时返回 False。
    """
    env_val = os.environ.get('USE_IMPERIAL_UNITS')
    if env_val is None:
        return False
    return env_val.strip().lower() == 'true'
