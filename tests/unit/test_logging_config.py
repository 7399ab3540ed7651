"""Tests for structlog configuration."""

import json
import logging

import pytest
import yaml
from structlog.testing import capture_logs

from fin_analytics import __version__
from fin_analytics.config import ConfigLoader
from fin_analytics.config.defaults import LoggingParams
from fin_analytics.engine import AnalyticsEngine
from fin_analytics.errors import ConfigurationError
from fin_analytics.logging import configure_from_config, configure_logging, get_component_logger, get_logger


class TestConfigureLogging:
    """Test configure_logging output."""

    def test_json_output(self, caplog):
        caplog.set_level(logging.INFO)
        configure_logging(level="DEBUG", format_json=True)

        get_logger("fin_analytics.tests.json").info("Summary computed", rows=4)

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["event"] == "Summary computed"
        assert payload["rows"] == 4
        assert payload["level"] == "info"
        assert payload["logger"] == "fin_analytics.tests.json"
        assert "timestamp" in payload

    def test_without_timestamp(self, caplog):
        caplog.set_level(logging.INFO)
        configure_logging(format_json=True, include_timestamp=False)

        get_logger("fin_analytics.tests.plain").warning("Range fallback")

        payload = json.loads(caplog.records[-1].getMessage())
        assert "timestamp" not in payload
        assert payload["level"] == "warning"

    def test_extra_processors(self, caplog):
        caplog.set_level(logging.INFO)

        def add_service(logger, method_name, event_dict):
            event_dict["service"] = "analytics"
            return event_dict

        configure_logging(format_json=True, extra_processors=[add_service])
        get_logger("fin_analytics.tests.extra").info("Engine ready")

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["service"] == "analytics"

    def test_level_filtering(self, caplog):
        caplog.set_level(logging.WARNING)
        configure_logging(level="WARNING", format_json=True)

        get_logger("fin_analytics.tests.filtered").info("Hidden")

        assert not [record for record in caplog.records if "Hidden" in record.getMessage()]

    def test_get_logger_is_structlog(self):
        logger = get_logger("fin_analytics.tests.proxy")
        assert hasattr(logger, "bind")

    def test_returns_applied_params(self):
        applied = configure_logging(LoggingParams(level="ERROR"), format_json=True)

        assert applied == LoggingParams(level="ERROR", format_json=True)
        assert logging.getLogger("fin_analytics").level == logging.ERROR

    def test_package_version_stamped(self, caplog):
        caplog.set_level(logging.INFO)
        configure_logging(format_json=True)

        get_logger("fin_analytics.tests.version").info("Stamped")
        get_logger("host_app").warning("Not stamped")

        stamped, foreign = (json.loads(record.getMessage()) for record in caplog.records[-2:])
        assert stamped["fin_analytics_version"] == __version__
        assert "fin_analytics_version" not in foreign

    @pytest.mark.parametrize("overrides", [{"level": "VERBOSE"}, {"format_json": "yes"}])
    def test_invalid_settings_raise(self, overrides):
        with pytest.raises(ConfigurationError) as exc_info:
            configure_logging(**overrides)
        assert len(exc_info.value.errors) == 1


class TestConfigureFromConfig:
    """Test logging driven by the analytics configuration."""

    def test_yaml_logging_section(self, tmp_path, caplog):
        (tmp_path / "analytics.yaml").write_text(
            yaml.safe_dump({"logging": {"level": "WARNING", "format_json": True, "include_timestamp": False}})
        )
        caplog.set_level(logging.DEBUG)

        applied = configure_from_config(ConfigLoader.create(tmp_path).load())
        logger = get_logger("fin_analytics.tests.config")
        logger.info("Below configured level")
        logger.warning("Range fallback", token="14d")

        assert applied.level == "WARNING"
        messages = [record.getMessage() for record in caplog.records]
        assert not [message for message in messages if "Below configured level" in message]
        payload = json.loads(messages[-1])
        assert payload["event"] == "Range fallback"
        assert payload["token"] == "14d"
        assert "timestamp" not in payload

    def test_keyword_overrides_win(self, caplog):
        caplog.set_level(logging.DEBUG)
        config = ConfigLoader.create().load({"logging": {"level": "ERROR"}})

        configure_from_config(config, level="DEBUG", format_json=True)
        get_logger("fin_analytics.tests.override").debug("Visible")

        assert json.loads(caplog.records[-1].getMessage())["event"] == "Visible"

    def test_invalid_yaml_level_rejected(self, tmp_path):
        (tmp_path / "analytics.yaml").write_text(yaml.safe_dump({"logging": {"level": "LOUD"}}))

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load()


class TestComponentLogger:
    """Test component-bound loggers."""

    def test_component_bound(self, caplog):
        caplog.set_level(logging.INFO)
        configure_logging(format_json=True)

        get_component_logger("fin_analytics.tests.component", "normalizer").info("Rows coerced")

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["component"] == "normalizer"
        assert payload["logger"] == "fin_analytics.tests.component"

    def test_engine_events_carry_component(self, tmp_path, quarterly_forecast_rows, reference_now):
        with capture_logs() as logs:
            engine = AnalyticsEngine(config_dir=tmp_path)
            engine.build_view(quarterly_forecast_rows, "30d", reference_now)

        events = {entry["event"]: entry for entry in logs}
        assert events["Analytics engine initialized"]["component"] == "engine"
        assert events["Dashboard view built"]["component"] == "engine"
        assert events["Dashboard view built"]["rows_in_range"] == 1
