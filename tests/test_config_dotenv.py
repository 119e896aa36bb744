from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_report_rich import cli as cli_module
from lib_report_rich import config as report_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    report_config._reset_dotenv_state_for_testing()
    yield
    report_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values into the process environment."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("REPORT_LOG_LEVEL=DEBUG\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("REPORT_LOG_LEVEL", raising=False)

    loaded = report_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["REPORT_LOG_LEVEL"] == "DEBUG"

    os.environ.pop("REPORT_LOG_LEVEL", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("REPORT_LOG_LEVEL=DEBUG\n")
    monkeypatch.setenv("REPORT_LOG_LEVEL", "ERROR")

    result = report_config.enable_dotenv(search_from=tmp_path)

    assert result == (tmp_path / ".env").resolve()
    assert os.environ["REPORT_LOG_LEVEL"] == "ERROR"


def test_enable_dotenv_caches_first_location(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("REPORT_FORCE_COLOR=0\n")
    (second / ".env").write_text("REPORT_FORCE_COLOR=1\n")
    monkeypatch.delenv("REPORT_FORCE_COLOR", raising=False)

    assert report_config.enable_dotenv(search_from=first) == (first / ".env").resolve()
    assert report_config.enable_dotenv(search_from=second) == (first / ".env").resolve()

    os.environ.pop("REPORT_FORCE_COLOR", None)


def test_enable_dotenv_returns_none_without_file(tmp_path: Path) -> None:
    isolated = tmp_path / "a" / "b"
    isolated.mkdir(parents=True)

    found = report_config.enable_dotenv(search_from=isolated)

    assert found is None or not str(found).startswith(str(tmp_path))


@pytest.mark.parametrize(
    ("explicit", "env_value", "expected"),
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, "off", False),
        (None, "maybe", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert report_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_reporter_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("REPORT_FORCE_COLOR", "REPORT_NO_COLOR", "REPORT_LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)

    assert report_config.ReporterSettings.from_env() == report_config.ReporterSettings()


def test_reporter_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_FORCE_COLOR", "yes")
    monkeypatch.setenv("REPORT_NO_COLOR", "0")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("REPORT_LOG_LEVEL", " info ")

    settings = report_config.ReporterSettings.from_env()

    assert settings == report_config.ReporterSettings(force_color=True, no_color=False, log_level="INFO")


def test_reporter_settings_honour_no_color_convention(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REPORT_NO_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")

    assert report_config.ReporterSettings.from_env().no_color is True


def test_reporter_settings_reject_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_LOG_LEVEL", "loud")

    with pytest.raises(ValueError, match="REPORT_LOG_LEVEL"):
        report_config.ReporterSettings.from_env()


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(report_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(report_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {report_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {report_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
