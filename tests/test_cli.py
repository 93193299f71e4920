"""Tests for configuration and the command line."""

import json

import pytest
from typer.testing import CliRunner

from unotable.cli import app
from unotable.config import DEFAULT_STATS_FILE, Settings
from unotable.engine import AllDiscardMode
from unotable.errors import ConfigError

runner = CliRunner()


def test_settings_defaults():
    settings = Settings.from_env({})
    assert settings.stats_file == DEFAULT_STATS_FILE
    assert settings.all_discard is None
    assert settings.seed is None


def test_settings_from_env():
    settings = Settings.from_env(
        {"UNO_STATS_FILE": "x.json", "UNO_ALL_DISCARD": "Color", "UNO_SEED": "7"}
    )
    assert settings.stats_file == "x.json"
    assert settings.all_discard == AllDiscardMode.COLOR_GATED
    assert settings.seed == 7


@pytest.mark.parametrize("env", [{"UNO_ALL_DISCARD": "sometimes"}, {"UNO_SEED": "abc"}])
def test_settings_reject_bad_values(env):
    with pytest.raises(ConfigError):
        Settings.from_env(env)


def test_stats_command_for_new_player(tmp_path):
    result = runner.invoke(app, ["stats", "Ann", "--stats-file", str(tmp_path / "s.json")])
    assert result.exit_code == 0
    assert "Games played: 0" in result.output


def test_stats_command_shows_history(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({
        "Ann": {
            "name": "Ann",
            "played_games": 2,
            "wins": 1,
            "losses": 1,
            "history": [
                {"date": "2026-10-18", "result": "win"},
                {"date": "2026-10-19", "result": "loss"},
            ],
        }
    }))
    result = runner.invoke(app, ["stats", "Ann", "--stats-file", str(path)])
    assert result.exit_code == 0
    assert "Wins: 1" in result.output
    assert "2026-10-19: loss" in result.output


def test_stats_command_corrupt_file(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[1, 2")
    result = runner.invoke(app, ["stats", "Ann", "--stats-file", str(path)])
    assert result.exit_code == 1


def test_simulate_command():
    result = runner.invoke(app, ["simulate", "--games", "2", "--seed", "3"])
    assert result.exit_code == 0
    assert "Simulation results:" in result.output
