"""Tests for log level precedence in configure_logging."""

import logging
from unittest.mock import patch

import pytest

from asdbctl.logging_setup import configure_logging


@pytest.fixture
def basic_config(monkeypatch):
    monkeypatch.delenv("ASDBCTL_LOG_LEVEL", raising=False)
    with patch("asdbctl.logging_setup.logging.basicConfig") as basic_config:
        yield basic_config


def _level(basic_config):
    return basic_config.call_args.kwargs["level"]


def test_default_is_warning(basic_config):
    configure_logging()
    assert _level(basic_config) == logging.WARNING
    assert basic_config.call_args.kwargs["force"] is True


def test_custom_default(basic_config):
    configure_logging(default="INFO")
    assert _level(basic_config) == logging.INFO


@pytest.mark.parametrize("verbosity, level", [(1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)])
def test_verbosity(basic_config, verbosity, level):
    configure_logging(verbosity=verbosity)
    assert _level(basic_config) == level


def test_env_var(basic_config, monkeypatch):
    monkeypatch.setenv("ASDBCTL_LOG_LEVEL", "error")
    configure_logging()
    assert _level(basic_config) == logging.ERROR


def test_verbosity_beats_env(basic_config, monkeypatch):
    monkeypatch.setenv("ASDBCTL_LOG_LEVEL", "ERROR")
    configure_logging(verbosity=1)
    assert _level(basic_config) == logging.INFO


def test_cli_level_beats_everything(basic_config, monkeypatch):
    monkeypatch.setenv("ASDBCTL_LOG_LEVEL", "ERROR")
    configure_logging(cli_level="debug", verbosity=1)
    assert _level(basic_config) == logging.DEBUG


@pytest.mark.parametrize("name", ["loud", "BASIC_FORMAT"])
def test_unknown_level_falls_back(basic_config, name):
    configure_logging(cli_level=name)
    assert _level(basic_config) == logging.WARNING
