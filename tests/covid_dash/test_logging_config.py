from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from covid_dash.logging_config import configure_logging


def test_configure_logging_plain_replaces_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        configure_logging(level=logging.DEBUG, force_format="plain")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_configure_logging_json_from_env(monkeypatch):
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    monkeypatch.setenv("COVID_DASH_LOG_FORMAT", "json")
    try:
        configure_logging()

        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
