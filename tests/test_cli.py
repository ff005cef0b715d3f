from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from gamepresence.cli import app
from gamepresence.config import Config
from gamepresence.constants import CONFIG_DIR_ENV

runner = CliRunner()


def _invoke(config_path: Path, *args: str, user_input: str | None = None):
    return runner.invoke(
        app, ["--config-file", str(config_path), "config", *args], input=user_input
    )


def test_config_path(config_path: Path) -> None:
    result = _invoke(config_path, "path")
    assert result.exit_code == 0
    assert result.output.strip() == str(config_path)


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    result = runner.invoke(app, ["config", "path"])
    assert result.exit_code == 0
    assert result.output.strip() == str(tmp_path / "config.json")


def test_config_show_creates_defaults(config_path: Path) -> None:
    result = _invoke(config_path, "show")
    assert result.exit_code == 0
    assert Config.from_json(result.output) == Config.default()
    assert config_path.is_file()


def test_config_show_yaml(config_path: Path, steam_config: Config) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(steam_config.to_json(), encoding="utf-8")

    result = _invoke(config_path, "show", "--format", "yaml")

    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    assert data["services"]["steam"]["data"]["id"] == "1"
    assert data["activity"]["servicePriorities"] == []


def test_config_validate_ok(config_path: Path, steam_config: Config) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(steam_config.to_json(), encoding="utf-8")

    result = _invoke(config_path, "validate")

    assert result.exit_code == 0
    assert "Config valid" in result.output
    assert "Enabled services: steam" in result.output


def test_config_validate_reports_problem(config_path: Path) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{"services": {"steam": {"enabled": true}}}', encoding="utf-8")

    result = _invoke(config_path, "validate")

    assert result.exit_code == 1
    assert "services.steam.data" in result.output


def test_config_reset(config_path: Path, steam_config: Config) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(steam_config.to_json(), encoding="utf-8")

    result = _invoke(config_path, "reset", "--yes")

    assert result.exit_code == 0
    assert Config.from_json(config_path.read_text(encoding="utf-8")) == Config.default()


def test_config_reset_can_be_declined(config_path: Path, steam_config: Config) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(steam_config.to_json(), encoding="utf-8")

    result = _invoke(config_path, "reset", user_input="n\n")

    assert result.exit_code == 1
    assert Config.from_json(config_path.read_text(encoding="utf-8")) == steam_config


def test_unwritable_location(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = _invoke(blocker / "config.json", "show")

    assert result.exit_code == 1
    assert "Unable to read settings" in result.output
