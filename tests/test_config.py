# (c) Copyright Datacraft, 2026
"""Tests for settings and logging configuration."""
import logging

import httpx
import pytest

from airscan import ESCLSettings, configure_logging

LOGGING_YAML = """
version: 1
disable_existing_loggers: false
formatters:
  plain:
    format: "%(levelname)s %(name)s %(message)s"
handlers:
  console:
    class: logging.StreamHandler
    formatter: plain
loggers:
  airscan:
    level: DEBUG
    handlers: [console]
"""


def test_default_settings(monkeypatch):
	monkeypatch.delenv("ESCL_REQUEST_TIMEOUT", raising=False)
	settings = ESCLSettings(_env_file=None)
	assert settings.request_timeout == 100
	assert settings.connect_timeout == 100
	assert settings.read_timeout == 100
	assert settings.verify_tls is True
	assert settings.follow_redirects is False
	assert settings.user_agent.startswith("airscan-client/")


def test_settings_from_environment(monkeypatch):
	monkeypatch.setenv("ESCL_REQUEST_TIMEOUT", "15")
	monkeypatch.setenv("ESCL_VERIFY_TLS", "false")
	settings = ESCLSettings(_env_file=None)
	assert settings.request_timeout == 15
	assert settings.verify_tls is False


def test_timeout_must_be_positive():
	with pytest.raises(ValueError):
		ESCLSettings(_env_file=None, read_timeout=0)


@pytest.mark.asyncio
async def test_build_http_client():
	settings = ESCLSettings(_env_file=None, connect_timeout=3, user_agent="test-agent")
	client = settings.build_http_client()
	try:
		assert isinstance(client, httpx.AsyncClient)
		assert client.timeout.connect == 3
		assert client.timeout.read == 100
		assert client.headers["User-Agent"] == "test-agent"
		assert client.follow_redirects is False
	finally:
		await client.aclose()


def test_configure_logging_from_file(tmp_path):
	path = tmp_path / "logging.yaml"
	path.write_text(LOGGING_YAML)

	assert configure_logging(path) is True
	assert logging.getLogger("airscan").level == logging.DEBUG


def test_configure_logging_missing_file(tmp_path):
	assert configure_logging(tmp_path / "missing.yaml") is False
