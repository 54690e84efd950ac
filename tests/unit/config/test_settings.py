"""Tests for configuration settings.

Tests the Config class and environment variable handling.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from gearguard.common.config.settings import (
    CacheBackend,
    Config,
    Environment,
    LogLevel,
    get_config,
    reset_config,
)
from gearguard.common.exceptions import ConfigurationError


class TestEnvironment:
    """Tests for Environment enum."""
    
    def test_environment_values(self):
        assert Environment.DEVELOPMENT.value == "development"
        assert Environment.STAGING.value == "staging"
        assert Environment.PRODUCTION.value == "production"


class TestConfig:
    """Tests for Config class."""
    
    def test_default_config(self):
        """Test Config with no environment overrides."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()
        
        assert config.environment == Environment.DEVELOPMENT
        assert config.debug is False
        assert config.log_level == LogLevel.INFO
        assert config.cache_backend == CacheBackend.MEMORY
        assert config.cache_ttl_seconds == 3600
        assert config.cache_key_prefix == ""
        assert config.audit_log_dir == Path("./logs/audit")
        assert config.audit_hash_chain is True
        assert config.assessment_timeout_seconds is None
        assert config.rules_file is None
        assert config.is_development
    
    def test_values_from_env(self):
        env = {
            "GEARGUARD_ENVIRONMENT": "staging",
            "GEARGUARD_LOG_LEVEL": "DEBUG",
            "GEARGUARD_CACHE_BACKEND": "redis",
            "GEARGUARD_REDIS_URL": "redis://cache:6379/0",
            "GEARGUARD_CACHE_TTL_SECONDS": "120",
            "GEARGUARD_CACHE_KEY_PREFIX": "stg",
            "GEARGUARD_AUDIT_HASH_CHAIN": "false",
            "GEARGUARD_ASSESSMENT_TIMEOUT_SECONDS": "2.5",
            "GEARGUARD_RULES_FILE": "config/detection_rules.yaml",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config()
        
        assert config.environment == Environment.STAGING
        assert config.log_level == LogLevel.DEBUG
        assert config.cache_backend == CacheBackend.REDIS
        assert config.redis_url == "redis://cache:6379/0"
        assert config.cache_ttl_seconds == 120
        assert config.cache_key_prefix == "stg"
        assert config.audit_hash_chain is False
        assert config.assessment_timeout_seconds == 2.5
        assert config.rules_file == Path("config/detection_rules.yaml")
    
    def test_production_flag(self):
        with patch.dict(os.environ, {"GEARGUARD_ENVIRONMENT": "production"}, clear=True):
            assert Config().is_production
    
    def test_debug_in_production_warns(self):
        env = {"GEARGUARD_ENVIRONMENT": "production", "GEARGUARD_DEBUG": "true"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.warns(RuntimeWarning):
                Config()


class TestConfigValidation:
    """Invalid settings fail at construction."""
    
    @pytest.mark.parametrize("env", [
        {"GEARGUARD_ENVIRONMENT": "moon"},
        {"GEARGUARD_CACHE_BACKEND": "memcached"},
        {"GEARGUARD_CACHE_TTL_SECONDS": "soon"},
        {"GEARGUARD_CACHE_TTL_SECONDS": "0"},
        {"GEARGUARD_CACHE_BACKEND": "redis"},
        {"GEARGUARD_ASSESSMENT_TIMEOUT_SECONDS": "-1"},
    ])
    def test_invalid_values(self, env):
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigurationError):
                Config()
    
    def test_error_lists_allowed_values(self):
        with patch.dict(os.environ, {"GEARGUARD_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ConfigurationError) as exc_info:
                Config()
        
        assert "DEBUG" in exc_info.value.details["allowed"]


class TestConfigSingleton:
    """Tests for the global configuration helpers."""
    
    def test_get_config_is_cached(self):
        reset_config()
        with patch.dict(os.environ, {}, clear=True):
            assert get_config() is get_config()
        reset_config()
    
    def test_reset_config(self):
        reset_config()
        with patch.dict(os.environ, {}, clear=True):
            first = get_config()
            reset_config()
            assert get_config() is not first
        reset_config()
