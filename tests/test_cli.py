"""Test CLI functionality."""

import pytest
import yaml
from click.testing import CliRunner
from unittest.mock import patch

from cmsconfig.cli import cli
from cmsconfig.config import Settings
from cmsconfig.document import build_config


@pytest.fixture
def runner():
    with patch("cmsconfig.cli.setup_log"):
        yield CliRunner()


def test_render_prints_yaml(runner):
    result = runner.invoke(cli, ["render"], obj={})

    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == build_config(Settings())


def test_render_to_file(runner, tmp_path):
    output = tmp_path / "config.yml"

    result = runner.invoke(cli, ["render", "--output", str(output)], obj={})

    assert result.exit_code == 0
    assert yaml.safe_load(output.read_text(encoding="utf-8")) == build_config(Settings())


def test_render_with_config_file(runner, tmp_path):
    config_file = tmp_path / "cmsconfig.toml"
    config_file.write_text('locale = "en"\n', encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config_file), "render"], obj={})

    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["locale"] == "en"


def test_render_missing_config_file(runner):
    result = runner.invoke(cli, ["--config", "/nonexistent/cmsconfig.toml", "render"], obj={})

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_serve_uses_settings(runner, monkeypatch):
    monkeypatch.setenv("CMSCONFIG_WEB__PORT", "8123")

    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(cli, ["serve", "--host", "0.0.0.0"], obj={})

    assert result.exit_code == 0
    mock_run.assert_called_once()
    _, kwargs = mock_run.call_args
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 8123
