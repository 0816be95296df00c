"""Tests for configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from twofold import TwofoldConfig, catching, get_config, init
from twofold._logging import add_log_hook
from twofold._config import _config_from_env, _env_flag


class TestTwofoldConfig:
    """Tests for the TwofoldConfig dataclass."""

    def test_default_values(self) -> None:
        config = TwofoldConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.log_faults is False

    def test_config_is_frozen(self) -> None:
        config = TwofoldConfig()
        with pytest.raises(AttributeError):
            config.log_faults = True  # type: ignore[misc]


class TestEnvFlag:
    """Tests for _env_flag()."""

    @pytest.mark.parametrize('raw', ['1', 'true', 'YES', ' on '])
    def test_truthy(self, raw: str) -> None:
        with patch.dict(os.environ, {'TWOFOLD_TEST_FLAG': raw}):
            assert _env_flag('TWOFOLD_TEST_FLAG', False) is True

    @pytest.mark.parametrize('raw', ['0', 'false', 'No', 'off'])
    def test_falsy(self, raw: str) -> None:
        with patch.dict(os.environ, {'TWOFOLD_TEST_FLAG': raw}):
            assert _env_flag('TWOFOLD_TEST_FLAG', True) is False

    def test_unset_uses_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _env_flag('TWOFOLD_TEST_FLAG', True) is True

    def test_unknown_uses_default(self) -> None:
        with patch.dict(os.environ, {'TWOFOLD_TEST_FLAG': 'maybe'}):
            assert _env_flag('TWOFOLD_TEST_FLAG', False) is False


class TestConfigFromEnv:
    """Tests for reading configuration from the environment."""

    def test_reads_all_variables(self) -> None:
        env = {
            'TWOFOLD_LOG_LEVEL': 'WARNING',
            'TWOFOLD_JSON_LOGS': 'false',
            'TWOFOLD_LOG_FAULTS': 'true',
        }
        with patch.dict(os.environ, env, clear=True):
            assert _config_from_env() == TwofoldConfig(log_level='WARNING', json_logs=False, log_faults=True)

    def test_empty_environment(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _config_from_env() == TwofoldConfig()


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_without_init(self) -> None:
        """get_config() never fails before init()."""
        with patch.dict(os.environ, {'TWOFOLD_LOG_FAULTS': '1'}, clear=True):
            assert get_config().log_faults is True

    def test_environment_read_once_before_init(self) -> None:
        """An invalid flag warns once, not on every captured fault."""
        events: list[str] = []
        add_log_hook(lambda event_dict: events.append(event_dict['event']))
        with patch.dict(os.environ, {'TWOFOLD_LOG_FAULTS': 'maybe'}):
            catching(lambda: 1 / 0)
            catching(lambda: 1 / 0)
            assert get_config() is get_config()

        assert events.count('unknown_env_flag') == 1

    def test_init_replaces_environment_config(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            from_env = get_config()
            config = init(log_faults=True)
        assert get_config() is config
        assert from_env.log_faults is False

    def test_init_sets_config(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init(log_faults=True, json_logs=False)
        assert config == TwofoldConfig(log_level=None, json_logs=False, log_faults=True)
        assert get_config() is config

    def test_explicit_arguments_win_over_env(self) -> None:
        with patch.dict(os.environ, {'TWOFOLD_LOG_FAULTS': 'true'}):
            assert init(log_faults=False).log_faults is False

    def test_init_configures_logging(self) -> None:
        with patch('twofold._config.configure_logging') as configure:
            init(log_level='DEBUG', json_logs=False)
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_init_without_level_leaves_logging_alone(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch('twofold._config.configure_logging') as configure:
            init()
        configure.assert_not_called()
