"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from blackjack.main import init_logging


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        """Test defaults with no environment overrides."""
        with patch.dict(os.environ, {}, clear=True):
            from config import GameConfig

            config = GameConfig()

            assert config.starting_credit == 100
            assert config.dealer_stand_threshold == 17
            assert config.seed is None

    def test_reads_environment(self):
        env = {
            "BLACKJACK_STARTING_CREDIT": "500",
            "BLACKJACK_DEALER_THRESHOLD": "18",
            "BLACKJACK_SEED": "1234",
        }
        with patch.dict(os.environ, env):
            from config import GameConfig

            config = GameConfig()

            assert config.starting_credit == 500
            assert config.dealer_stand_threshold == 18
            assert config.seed == 1234

    def test_blank_seed_is_none(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "  "}):
            from config import _parse_seed

            assert _parse_seed() is None

    def test_invalid_number_raises(self):
        with patch.dict(os.environ, {"BLACKJACK_STARTING_CREDIT": "lots"}):
            from config import GameConfig

            with pytest.raises(ValueError):
                GameConfig()

    def test_config_is_frozen(self):
        from config import GameConfig

        config = GameConfig()

        with pytest.raises(AttributeError):
            config.starting_credit = 1


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_debug_default_false(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is False
            assert config.log_file is None

    def test_debug_from_environment(self):
        with patch.dict(os.environ, {"DEBUG": "TRUE", "BLACKJACK_LOG_FILE": "game.log"}):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is True
            assert config.log_file == "game.log"

    def test_nested_game_config(self):
        with patch.dict(os.environ, {"BLACKJACK_STARTING_CREDIT": "42"}):
            from config import AppConfig

            assert AppConfig().game.starting_credit == 42

    def test_global_instance_exists(self):
        from config import AppConfig, config

        assert isinstance(config, AppConfig)


class TestInitLogging:
    """Tests for logging setup."""

    def test_log_file(self, tmp_path):
        import logging

        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        log_file = tmp_path / "game.log"
        try:
            init_logging(debug=True, filename=str(log_file))
            logging.getLogger("blackjack.test").debug("dealt")
            for handler in root.handlers:
                handler.flush()

            assert root.level == logging.DEBUG
            assert "DEBUG - dealt" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_reinit_closes_previous_handlers(self, tmp_path):
        import logging

        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            init_logging(filename=str(tmp_path / "first.log"))
            first = root.handlers[0]

            init_logging(filename=str(tmp_path / "second.log"))

            assert first not in root.handlers
            assert first.stream is None
            assert len(root.handlers) == 1
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
