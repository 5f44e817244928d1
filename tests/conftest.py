"""
pytest配置文件，定义测试环境和共享的测试夹具（fixtures）。

主要功能：
1. 提供内存 SQLite 数据库会话
2. 提供默认指标注册表
3. 提供合成采样序列与运动员配置
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from intervalmetrics.athletes.schemas import AthleteConfig
from intervalmetrics.db_base import Base
from intervalmetrics.intervals.bounds import IntervalBound  # noqa: F401  注册表结构
from intervalmetrics.metrics import build_default_registry
from intervalmetrics.streams.models import SampleSequence


@pytest.fixture
def db_session():
    """提供内存数据库会话，每个测试独立建表"""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def athlete():
    """提供测试用的运动员配置"""
    return AthleteConfig(name="测试用户", ftp=200.0, lthr=160.0)


@pytest.fixture
def make_samples():
    """构建合成采样序列：channels 中的值可以是标量（每个采样相同）或与 n 等长的列表"""
    def _make(n, rec_interval=1.0, kph=None, **channels):
        seq = SampleSequence(rec_interval=rec_interval)
        km = 0.0
        for i in range(n):
            fields = {}
            for name, value in channels.items():
                fields[name] = value[i] if isinstance(value, (list, tuple)) else value
            speed = kph[i] if isinstance(kph, (list, tuple)) else kph
            seq.append_point(i * rec_interval, km=km, kph=speed, **fields)
            km += (speed or 0) * rec_interval / 3600.0
        return seq
    return _make


@pytest.fixture(autouse=True)
def metric_units(monkeypatch):
    """默认按公制展示，避免受本机环境变量影响"""
    monkeypatch.delenv("USE_IMPERIAL_UNITS", raising=False)
