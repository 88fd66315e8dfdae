"""
Tests for the YAML configuration loader.
"""

import pytest

from export_tracker.core.config import Config


@pytest.fixture
def fresh_config(monkeypatch, tmp_path):
    """Write a config file and return a loader bound to it."""
    monkeypatch.setattr(Config, "_instance", None)
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)

    def load(text: str) -> Config:
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv("EXPORT_TRACKER_CONFIG", str(path))
        return Config()

    return load


BASIC = """
general:
  log_level: DEBUG
  log_file: logs/test.log
api:
  port: "8080"
  cors_origins: http://localhost:8501
  reload: "yes"
supabase:
  url: https://file.supabase.co
  anon_key: file-key
"""


class TestConfig:

    def test_nested_get(self, fresh_config):
        config = fresh_config(BASIC)
        assert config.get('general', 'log_level') == 'DEBUG'
        assert config.get('general', 'missing', default='x') == 'x'
        assert config.get('nothing', 'here') is None

    def test_typed_getters(self, fresh_config):
        config = fresh_config(BASIC)
        assert config.get_int('api', 'port') == 8080
        assert config.get_bool('api', 'reload') is True
        assert config.get_list('api', 'cors_origins') == ['http://localhost:8501']
        assert config.get_float('defaults', 'exchange_rate', default=84.0) == 84.0

    def test_singleton(self, fresh_config):
        config = fresh_config(BASIC)
        assert Config() is config

    def test_log_path_relative_to_project_root(self, fresh_config):
        config = fresh_config(BASIC)
        assert config.log_path == config.project_root / "logs/test.log"

    def test_supabase_from_file(self, fresh_config):
        config = fresh_config(BASIC)
        assert config.supabase_url == "https://file.supabase.co"
        assert config.supabase_key == "file-key"
        assert config.supabase_configured

    def test_environment_overrides_file(self, fresh_config, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
        config = fresh_config(BASIC)
        assert config.supabase_url == "https://env.supabase.co"

    def test_not_configured_without_key(self, fresh_config):
        config = fresh_config("general: {}\napi: {}\nsupabase:\n  url: https://x.supabase.co\n")
        assert not config.supabase_configured
        assert config.api_base_url == 'http://localhost:8000/api'

    def test_missing_sections(self, fresh_config):
        with pytest.raises(ValueError, match="Missing required config sections"):
            fresh_config("general:\n  log_level: INFO\n")

    def test_missing_file(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "_instance", None)
        monkeypatch.setenv("EXPORT_TRACKER_CONFIG", str(tmp_path / "absent.yaml"))
        with pytest.raises(FileNotFoundError):
            Config()
