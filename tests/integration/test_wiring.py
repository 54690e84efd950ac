"""Integration tests for configuration-driven wiring and the CLI."""

import asyncio
import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import main
from gearguard.cache.store import MemoryCacheStore, RedisCacheStore
from gearguard.common.config.settings import Config, reset_config
from gearguard.common.exceptions import ConfigurationError
from gearguard.factory import create_audit_sink, create_cache_store, create_engine
from gearguard.governance.audit.store import FileAuditSink

from tests.fixtures.marketplace import FakeClock, make_repository, make_user


@pytest.fixture
def config_env(tmp_path):
    """Environment pointing audit output at a temp directory."""
    return {
        "GEARGUARD_AUDIT_LOG_DIR": str(tmp_path / "audit"),
        "GEARGUARD_CACHE_TTL_SECONDS": "600",
    }


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestFactory:
    """Tests for engine construction from Config."""
    
    def test_memory_backend_by_default(self, config_env):
        with patch.dict(os.environ, config_env, clear=True):
            assert isinstance(create_cache_store(Config()), MemoryCacheStore)
    
    def test_redis_backend(self, config_env):
        env = dict(config_env, GEARGUARD_CACHE_BACKEND="redis", GEARGUARD_REDIS_URL="redis://localhost:6379/0")
        with patch.dict(os.environ, env, clear=True):
            assert isinstance(create_cache_store(Config()), RedisCacheStore)
    
    def test_file_audit_sink(self, config_env, tmp_path):
        with patch.dict(os.environ, config_env, clear=True):
            sink = create_audit_sink(Config())
        
        assert isinstance(sink, FileAuditSink)
        assert sink.log_dir == tmp_path / "audit"
    
    def test_engine_writes_audit_file(self, config_env, tmp_path):
        with patch.dict(os.environ, config_env, clear=True):
            engine = create_engine(make_repository(make_user()), config=Config(), clock=FakeClock())
        
        asyncio.run(engine.assess_risk("user_1", "create_booking"))
        
        lines = next((tmp_path / "audit").glob("*.jsonl")).read_text().splitlines()
        assert json.loads(lines[0])["user_id"] == "user_1"
    
    def test_missing_rules_file(self, config_env, tmp_path):
        env = dict(config_env, GEARGUARD_RULES_FILE=str(tmp_path / "nope.yaml"))
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigurationError):
                create_engine(make_repository(), config=Config())


class TestCli:
    """Tests for main.py subcommands."""
    
    def test_device_trust(self, config_env, capsys):
        with patch.dict(os.environ, config_env, clear=True):
            code = main.main(["device-trust", "--ip", "8.8.8.8", "--user-agent", "Mozilla/5.0"])
        
        assert code == 0
        assert json.loads(capsys.readouterr().out)["trust_level"] == "trusted"
    
    def test_check_rules(self, config_env):
        rules_file = Path(__file__).resolve().parents[2] / "config" / "detection_rules.yaml"
        with patch.dict(os.environ, config_env, clear=True):
            assert main.main(["check-rules", str(rules_file)]) == 0
    
    def test_check_rules_invalid(self, config_env, tmp_path):
        rules_file = tmp_path / "bad.yaml"
        rules_file.write_text("listing:\n  max_price_ratio: -1\n")
        with patch.dict(os.environ, config_env, clear=True):
            assert main.main(["check-rules", str(rules_file)]) == 1
