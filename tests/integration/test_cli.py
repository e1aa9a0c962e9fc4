"""Integration tests for the rsb command line."""

import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from rsb import __version__
from rsb.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    """The CLI points loguru at the runner's streams; reset afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("RSB_LOG_LEVEL", "RSB_LOGS_PATH", "RSB_INLINE_CSS", "RSB_TITLE_DATE"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.integration
@pytest.mark.parametrize("command", ["generate", "gen"])
def test_generate(fixtures_path, monkeypatch, command):
    monkeypatch.setenv("RSB_TITLE_DATE", "2024-05-01")

    result = runner.invoke(app, ["--log-level", "ERROR", command, str(fixtures_path / "resume.yaml")])

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("<!DOCTYPE html>")
    assert "<title>Ada Lovelace - 2024-05-01</title>" in result.stdout


@pytest.mark.integration
@pytest.mark.parametrize("command", ["validate", "check"])
def test_validate(fixtures_path, command):
    path = fixtures_path / "resume.json5"

    result = runner.invoke(app, ["--log-level", "ERROR", command, str(path)])

    assert result.exit_code == 0, result.output
    assert f"✓ {path} is valid" in result.stdout


@pytest.mark.integration
@pytest.mark.parametrize(
    "command, name, message",
    [
        ("validate", "resume.docx", "Unrecognized file type: docx"),
        ("validate", "invalid_date.yaml", "education[0].endDate"),
        ("generate", "wrong_shape.json", "education[0].courses"),
        ("generate", "missing.yaml", "Failed to generate"),
    ],
)
def test_failures_exit_nonzero(fixtures_path, command, name, message):
    result = runner.invoke(app, ["--log-level", "ERROR", command, str(fixtures_path / name)])

    assert result.exit_code == 1
    assert "ERROR:" in result.output
    assert message in result.output


@pytest.mark.integration
def test_config_file_disables_css(fixtures_path, tmp_path):
    config = tmp_path / "rsb.yaml"
    config.write_text("render:\n  inline_css: false\n", encoding="utf-8")

    result = runner.invoke(
        app, ["--log-level", "ERROR", "--config", str(config), "generate", str(fixtures_path / "resume.ron")]
    )

    assert result.exit_code == 0, result.output
    assert "<style>" not in result.stdout


@pytest.mark.integration
def test_bad_config_file(fixtures_path, tmp_path):
    result = runner.invoke(
        app, ["--config", str(tmp_path / "missing.yaml"), "validate", str(fixtures_path / "resume.yaml")]
    )

    assert result.exit_code == 1
    assert "Config file not found" in result.output


@pytest.mark.integration
def test_invalid_log_level(fixtures_path):
    result = runner.invoke(app, ["--log-level", "LOUD", "validate", str(fixtures_path / "resume.yaml")])

    assert result.exit_code == 1
    assert "Invalid log level 'LOUD'" in result.output


@pytest.mark.integration
def test_log_dir_receives_debug_log(fixtures_path, tmp_path):
    log_dir = tmp_path / "logs"

    result = runner.invoke(
        app,
        ["--log-level", "ERROR", "--log-dir", str(log_dir), "validate", str(fixtures_path / "resume.yaml")],
    )

    assert result.exit_code == 0, result.output
    # Closes the file sink
    logger.remove()
    log_text = (log_dir / "validate.log").read_text(encoding="utf-8")
    assert "[schema] Loading resume.yaml as yaml" in log_text
    assert "found data:" in log_text


@pytest.mark.integration
def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"rsb {__version__}" in result.stdout


@pytest.mark.integration
def test_deeply_nested_input_exits_cleanly(tmp_path):
    path = tmp_path / "deep.ron"
    path.write_text("(basics: " + "[" * 5000 + "]" * 5000 + ")", encoding="utf-8")

    result = runner.invoke(app, ["--log-level", "ERROR", "validate", str(path)])

    assert result.exit_code == 1
    assert "nested too deeply" in result.output
