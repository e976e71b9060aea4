"""Tests for logging configuration and async main bootstrap."""

from __future__ import annotations

import importlib
from types import SimpleNamespace

import httpx
import pytest
import structlog

from moviebot import main as main_module
from moviebot.config import RecommenderSettings
from moviebot.logging import configure_logging
from moviebot.services.sessions import SearchSessionRegistry


@pytest.mark.parametrize(
    "module_name",
    [
        "moviebot.bot.utils.rendering",
        "moviebot.bot.utils.telegram",
        "moviebot.domain.models",
        "moviebot.services.search",
        "moviebot.services.sessions",
        "moviebot.utils.retry",
    ],
)
def test_plain_directories_import_as_namespace_packages(module_name):
    module = importlib.import_module(module_name)
    package = importlib.import_module(module_name.rpartition(".")[0])

    assert module.__name__ == module_name
    assert getattr(package, "__file__", None) is None


def test_configure_logging_outputs_json(capsys):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_configure_logging_filters_below_named_level(capsys):
    configure_logging("warning")
    logger = structlog.get_logger()
    logger.info("quiet_event")
    logger.warning("loud_event", query="Inception")
    out = capsys.readouterr().out
    assert "quiet_event" not in out
    assert '"event": "loud_event"' in out
    configure_logging()


def test_configure_logging_console_renderer_is_not_json(capsys):
    configure_logging("INFO", json_output=False)
    structlog.get_logger().info("console_event", query="Inception")
    out = capsys.readouterr().out
    assert "console_event" in out
    assert "query=Inception" in out
    assert not out.lstrip().startswith("{")
    configure_logging()


class DummyToken:
    def __init__(self, value: str) -> None:
        self.value = value

    def get_secret_value(self) -> str:
        return self.value


class DummyDispatcher:
    def __init__(self) -> None:
        self.included = []
        self.message_middlewares = []
        self.registered_error_handlers = []
        self.started = False
        self.message = SimpleNamespace(middleware=self.message_middlewares.append)
        self.errors = SimpleNamespace(register=self.registered_error_handlers.append)

    def include_router(self, router):
        self.included.append(router)

    async def start_polling(self, bot, **kwargs):
        self.started = True
        self.bot = bot
        self.start_kwargs = kwargs


@pytest.mark.asyncio
async def test_main_bootstrap(monkeypatch):
    settings = SimpleNamespace(
        telegram_proxy=None,
        telegram_token=DummyToken("token"),
        environment="test",
        default_language="en",
        log_level="DEBUG",
        log_json=False,
        recommender=RecommenderSettings(base_url="http://recommender.test", max_sessions=3),
    )
    bot_calls = {}

    def fake_bot(*args, **kwargs):
        bot_calls["kwargs"] = kwargs
        return SimpleNamespace()

    dummy_dispatcher = DummyDispatcher()
    dummy_monitor = SimpleNamespace(handle_error=object())

    logging_calls = []
    monkeypatch.setattr(
        main_module,
        "configure_logging",
        lambda level, **kwargs: logging_calls.append((level, kwargs)),
    )
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "Bot", fake_bot)
    monkeypatch.setattr(main_module, "Dispatcher", lambda: dummy_dispatcher)
    monkeypatch.setattr(main_module, "ThrottleMiddleware", lambda s: ("throttle", s))
    monkeypatch.setattr(main_module, "ErrorMonitor", lambda settings: dummy_monitor)
    monkeypatch.setattr(main_module, "setup_routers", lambda: "router")

    await main_module.main()

    assert logging_calls == [("DEBUG", {"json_output": False})]
    assert bot_calls["kwargs"]["token"] == "token"
    assert bot_calls["kwargs"]["session"] is None
    assert dummy_dispatcher.started is True
    assert dummy_dispatcher.included == ["router"]
    assert dummy_dispatcher.registered_error_handlers == [dummy_monitor.handle_error]
    assert dummy_dispatcher.message_middlewares == [("throttle", settings)]
    search_sessions = dummy_dispatcher.start_kwargs["search_sessions"]
    assert isinstance(search_sessions, SearchSessionRegistry)
    recommendation_client = search_sessions.get(1)._client
    assert recommendation_client.endpoint_url == "http://recommender.test/api/recommend"
    assert recommendation_client._client.timeout == httpx.Timeout(None)
