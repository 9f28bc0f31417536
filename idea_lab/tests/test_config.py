"""
Tests for configuration and logging setup.
"""
import json
import logging

from idea_lab.config import Config, RubricWeights, get_config, reset_config
from idea_lab.log import JsonFormatter, configure_logging


class TestConfig:
    """Tests for Config defaults and environment handling."""

    def test_default_rubric_weights(self):
        w = RubricWeights()

        assert (w.direct_skill, w.transferable_skill, w.interest, w.audience) == (4, 2, 3, 2)
        assert (w.time_fit, w.growth_fit) == (4, 5)
        assert (w.income_bonus, w.automation_bonus, w.credibility_bonus) == (3, 3, 2)
        assert w.breadth_threshold == 3

    def test_default_top_n(self):
        assert Config().engine.top_n == 3

    def test_singleton(self):
        assert get_config() is get_config()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("IDEA_LAB_CATALOG_PATH", str(tmp_path / "c.json"))
        monkeypatch.setenv("IDEA_LAB_LOG_LEVEL", "debug")
        monkeypatch.setenv("IDEA_LAB_LOG_JSON", "true")
        monkeypatch.setenv("IDEA_LAB_DEBUG_PANEL", "0")
        reset_config()

        config = get_config()

        assert config.catalog.path == tmp_path / "c.json"
        assert config.log_level == "DEBUG"
        assert config.log_json is True
        assert config.enable_debug_panel is False

    def test_blank_catalog_path_means_builtin(self, monkeypatch):
        monkeypatch.setenv("IDEA_LAB_CATALOG_PATH", "  ")
        reset_config()

        assert get_config().catalog.path is None


class TestLogging:
    """Tests for logging setup."""

    def test_json_formatter(self):
        record = logging.LogRecord("idea_lab.engine", logging.INFO, __file__, 1, "ranked %d", (3,), None)

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "idea_lab.engine"
        assert payload["message"] == "ranked 3"
        assert payload["timestamp"].endswith("Z")

    def test_json_formatter_merges_extra_fields(self):
        record = logging.LogRecord("idea_lab.engine", logging.INFO, __file__, 1, "done", (), None)
        record.extra = {"run_id": "abc12345", "matches": ["portfolio-lab"]}

        payload = json.loads(JsonFormatter().format(record))

        assert payload["run_id"] == "abc12345"
        assert payload["matches"] == ["portfolio-lab"]

    def test_configure_logging_is_idempotent(self):
        logger = configure_logging("DEBUG", json_output=True)
        configure_logging("WARNING")

        handlers = [h for h in logger.handlers if getattr(h, "_idea_lab", False)]
        assert len(handlers) == 1
        assert logger.level == logging.WARNING
        assert not isinstance(handlers[0].formatter, JsonFormatter)
