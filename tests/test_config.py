from intervalmetrics import config


def test_use_imperial_units(monkeypatch):
    monkeypatch.delenv("USE_IMPERIAL_UNITS", raising=False)
    assert config.use_imperial_units() is False
    monkeypatch.setenv("USE_IMPERIAL_UNITS", "TRUE")
    assert config.use_imperial_units() is True
    monkeypatch.setenv("USE_IMPERIAL_UNITS", "no")
    assert config.use_imperial_units() is False


def test_setup_logging_defaults_to_configured_level(monkeypatch):
    import logging

    from intervalmetrics import logging_config

    calls = []
    monkeypatch.setattr(logging_config, "LOG_LEVEL", "WARNING")
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    logging_config.setup_logging()
    logging_config.setup_logging("debug")
    logging_config.setup_logging("not-a-level")
    assert [c["level"] for c in calls] == [logging.WARNING, logging.DEBUG, logging.INFO]


def test_value_for_defaults_to_configured_units(monkeypatch, registry):
    from intervalmetrics.intervals.models import IntervalRecord

    record = IntervalRecord(registry)
    record.metrics[registry.descriptor("total_distance").index] = 10.0
    monkeypatch.setenv("USE_IMPERIAL_UNITS", "true")
    assert record.value_for("total_distance") < 10.0
    assert record.string_for("total_distance") == "6.21 mi"
    monkeypatch.setenv("USE_IMPERIAL_UNITS", "false")
    assert record.value_for("total_distance") == 10.0
