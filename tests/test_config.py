# tests/test_config.py
"""
Settings / Logging / Weight Check Tests
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from neurazor.config import Settings, get_settings
from neurazor.core.logging import configure_logging
from neurazor.models.enumerations import GameKind
from neurazor.scoring.defaults import default_config
from neurazor.scoring.weights import validate_weights


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.VERSION_NAME_PREFIX == "V"
        assert s.DEFAULT_ACTOR_ID == "system"
        assert s.WEIGHT_SUM_TOLERANCE == 0.001
        assert s.LOG_FORMAT == "json"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CACHE_TTL_ACTIVE_VERSION", "60")
        monkeypatch.setenv("CACHE_ENABLED", "false")
        s = Settings(_env_file=None)
        assert s.CACHE_TTL_ACTIVE_VERSION == 60
        assert s.CACHE_ENABLED is False

    def test_prefix_without_digits(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, VERSION_NAME_PREFIX="V2")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="TRACE")

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestLogging:

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_configure(self, fmt):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="DEBUG", LOG_FORMAT=fmt))

        assert logging.getLogger().level == logging.DEBUG
        processors = structlog.get_config()["processors"]
        renderer = processors[-1]
        if fmt == "json":
            assert isinstance(renderer, structlog.processors.JSONRenderer)
        else:
            assert isinstance(renderer, structlog.dev.ConsoleRenderer)

        structlog.reset_defaults()


class TestValidateWeights:

    def test_defaults_clean(self):
        for kind in GameKind:
            assert validate_weights(default_config(kind)) == []

    def test_sum_warning(self):
        config = default_config(GameKind.FACE_NAME_MATCH)
        config.weights.memory = 0.6

        warnings = validate_weights(config)

        assert len(warnings) == 1
        assert warnings[0].game_kind == GameKind.FACE_NAME_MATCH
        assert warnings[0].total == pytest.approx(1.1)
        assert "1.1000" in warnings[0].message

    def test_within_tolerance(self):
        config = default_config(GameKind.FACE_NAME_MATCH)
        config.weights.memory = 0.5005
        assert validate_weights(config) == []

    def test_negative_weight(self):
        config = default_config(GameKind.CREATIVE_USES)
        config.weights.creativity = 1.2
        config.weights.speed = -0.2

        warnings = validate_weights(config)

        assert len(warnings) == 1
        assert "speed" in warnings[0].message

    def test_nan_weight(self):
        config = default_config(GameKind.FACE_NAME_MATCH)
        config.weights.memory = float("nan")

        messages = [w.message for w in validate_weights(config)]

        assert len(messages) == 2
        assert messages[0] == "Weights sum to nan, expected 1.0"
        assert "memory is not a number" in messages[1]

    def test_custom_tolerance(self):
        config = default_config(GameKind.FACE_NAME_MATCH)
        config.weights.memory = 0.55
        assert validate_weights(config, tolerance=0.1) == []

    def test_weights_never_normalised(self):
        config = default_config(GameKind.FACE_NAME_MATCH)
        config.weights.memory = 0.6
        validate_weights(config)
        assert config.weights.memory == 0.6
