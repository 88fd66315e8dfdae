"""
Tests for the command-line entry point.
"""

from argparse import Namespace
from unittest.mock import MagicMock

import pytest

import cli
from export_tracker.core import database as database_module
from export_tracker.core.config import Config
from export_tracker.core.database import Database, DataServiceError


@pytest.fixture
def config(monkeypatch, tmp_path):
    monkeypatch.setattr(Config, "_instance", None)
    path = tmp_path / "config.yaml"
    path.write_text(
        "general:\n  log_level: INFO\napi:\n  host: 127.0.0.1\n  port: 9100\n",
        encoding="utf-8"
    )
    monkeypatch.setenv("EXPORT_TRACKER_CONFIG", str(path))
    return Config()


class TestServerAddress:
    """Bind address for the serve command."""

    def test_defaults_come_from_config(self, config):
        args = Namespace(host=None, port=None, reload=False)
        assert cli.server_address(args, config) == ("127.0.0.1", 9100)

    def test_command_line_overrides_config(self, config):
        args = Namespace(host="0.0.0.0", port=8080, reload=False)
        assert cli.server_address(args, config) == ("0.0.0.0", 8080)

    def test_missing_api_keys_use_builtin_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "_instance", None)
        path = tmp_path / "config.yaml"
        path.write_text("general:\n  log_level: INFO\napi:\n  base_url: http://x/api\n", encoding="utf-8")
        monkeypatch.setenv("EXPORT_TRACKER_CONFIG", str(path))

        args = Namespace(host=None, port=None, reload=False)
        assert cli.server_address(args, Config()) == ("0.0.0.0", 8000)


class TestStatsCommand:
    """The stats command over a working and a failing backend."""

    def test_prints_stats(self, monkeypatch, db, capsys):
        monkeypatch.setattr(cli, "_init", lambda: None)
        monkeypatch.setattr(database_module, "_db_instance", db)

        cli.cmd_stats(Namespace())

        out = capsys.readouterr().out
        assert "[STATS] Backend: demo" in out
        assert "Total orders:" in out

    def test_backend_failure_exits_cleanly(self, monkeypatch, capsys):
        backend = MagicMock()
        backend.name = "supabase"
        backend.list.side_effect = DataServiceError("Failed to fetch payments: connection refused")
        monkeypatch.setattr(cli, "_init", lambda: None)
        monkeypatch.setattr(database_module, "_db_instance", Database(backend))

        with pytest.raises(SystemExit) as exc:
            cli.cmd_stats(Namespace())

        assert exc.value.code == 1
        assert "[ERROR] Failed to fetch payments" in capsys.readouterr().out
