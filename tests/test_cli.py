"""CLI 测试"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from news_bus.infrastructure.config import get_container, get_settings, reset_container
from news_bus.presentation.cli import cli


@pytest.fixture(autouse=True)
def isolated(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """隔离配置，并避免 loguru 绑定到 CliRunner 的临时输出流"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("news_bus.presentation.cli.app.setup_logger", lambda **kwargs: None)
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.mark.integration
def test_demo_runs_end_to_end() -> None:
    result = CliRunner().invoke(cli, ["demo", "--reads", "3", "--title", "Cup final"])

    assert result.exit_code == 0, result.output
    assert "Cup final" in result.output
    assert "published" in result.output
    assert "deleted" in result.output


@pytest.mark.integration
def test_demo_runs_on_process_container() -> None:
    """demo 使用进程级容器，结束后关闭通道并重置容器"""
    container = get_container()
    channel = container.channel

    result = CliRunner().invoke(cli, ["demo", "--reads", "1"])

    assert result.exit_code == 0, result.output
    assert channel.closed
    assert get_container() is not container


@pytest.mark.unit
def test_demo_rejects_unknown_domain() -> None:
    result = CliRunner().invoke(cli, ["demo", "--domain", "weather"])
    assert result.exit_code != 0


@pytest.mark.unit
def test_config_command(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEWS_BUS_CHANNEL__MAX_WORKERS", "5")

    result = CliRunner().invoke(cli, ["config"])

    assert result.exit_code == 0, result.output
    assert "channel.max_workers" in result.output
    assert "5" in result.output


@pytest.mark.unit
def test_invalid_config_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEWS_BUS_LOG_LEVEL", "LOUD")

    result = CliRunner().invoke(cli, ["config"])

    assert result.exit_code == 2


@pytest.mark.unit
def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "news-bus" in result.output
