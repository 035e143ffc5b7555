import logging
from unittest import mock
import dudu_http_client
from dudu_http_client import DEFAULT_SETTINGS, DEFAULT_URL
def test_defaults_are_plain_constants():
    assert DEFAULT_SETTINGS["default_url"] == DEFAULT_URL
    assert isinstance(DEFAULT_SETTINGS["poll_interval_ms"], int)
    assert logging.getLevelName(DEFAULT_SETTINGS["log_level"]) == logging.INFO
def test_main_starts_the_app_with_defaults(monkeypatch):
    app_cls = mock.Mock()
    monkeypatch.setattr(dudu_http_client, "HttpClientApp", app_cls)
    monkeypatch.setattr(dudu_http_client.logging, "basicConfig", mock.Mock())
    dudu_http_client.main()
    app_cls.assert_called_once_with()
    app_cls.return_value.mainloop.assert_called_once_with()
    dudu_http_client.logging.basicConfig.assert_called_once_with(
        level="INFO", format=dudu_http_client.LOG_FORMAT,
    )
