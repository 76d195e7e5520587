# (c) Copyright Datacraft, 2026
"""Shared fixtures for the airscan tests."""
from pathlib import Path
from typing import Callable

import httpx
import pytest

from airscan import ESCLRequestClient

RESOURCES = Path(__file__).parent / "resources"

BASE_URL = "http://192.168.1.20/eSCL/"


def read_resource(*parts: str) -> bytes:
	return RESOURCES.joinpath(*parts).read_bytes()


@pytest.fixture
def resource() -> Callable[..., bytes]:
	"""Return the bytes of a file under tests/resources."""
	return read_resource


@pytest.fixture
def make_client():
	"""Factory building a client on top of an httpx.MockTransport handler."""
	def _make_client(handler) -> ESCLRequestClient:
		http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
		return ESCLRequestClient(BASE_URL, http_client=http_client)

	return _make_client


class RecordingHandler:
	"""MockTransport handler replying with queued responses and recording requests."""

	def __init__(self, *responses: httpx.Response):
		self.responses = list(responses)
		self.requests: list[httpx.Request] = []

	def __call__(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		if len(self.responses) == 1:
			return self.responses[0]
		return self.responses.pop(0)


@pytest.fixture
def recording_handler():
	return RecordingHandler
