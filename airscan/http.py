# (c) Copyright Datacraft, 2026
"""HTTP call outcomes and transport error mapping."""
import logging
import ssl
from dataclasses import dataclass, field
from typing import Union

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpCallSuccess:
	body: bytes
	response: httpx.Response = field(repr=False, compare=False)

	@property
	def text(self) -> str:
		return self.response.text


@dataclass(frozen=True)
class HttpError:
	"""Client (4xx) or server (5xx) error status."""
	code: int
	error_body: str | None = None


@dataclass(frozen=True)
class NetworkError:
	"""Connectivity problems, timeouts and other IO failures."""
	exception: Exception


@dataclass(frozen=True)
class UnknownError:
	exception: Exception


@dataclass(frozen=True)
class UntrustedCertificate:
	cause: str | None = None


HttpCallError = Union[HttpError, NetworkError, UnknownError, UntrustedCertificate]
HttpCallResult = Union[HttpCallSuccess, HttpCallError]


def _exception_chain(exc: BaseException):
	seen = set()
	current: BaseException | None = exc
	while current is not None and id(current) not in seen:
		seen.add(id(current))
		yield current
		current = current.__cause__ or current.__context__


def map_transport_error(exc: Exception) -> HttpCallError:
	"""Translate an exception raised while performing a request."""
	for link in _exception_chain(exc):
		if isinstance(link, ssl.SSLCertVerificationError):
			return UntrustedCertificate(str(link))

	if isinstance(exc, httpx.HTTPStatusError):
		return HttpError(exc.response.status_code, _error_body(exc.response))
	if isinstance(exc, (httpx.TransportError, OSError)):
		return NetworkError(exc)
	return UnknownError(exc)


def _error_body(response: httpx.Response) -> str | None:
	try:
		return response.text
	except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
		return None


async def safe_request(
	client: httpx.AsyncClient,
	method: str,
	url: str,
	*,
	expect_success: bool = True,
	**kwargs,
) -> HttpCallResult:
	"""Perform one request and never raise.

	With ``expect_success`` a non 2xx status becomes ``HttpError``; without it
	the response is handed back whatever its status.
	"""
	logger.debug("%s %s", method, url)
	try:
		response = await client.request(method, url, **kwargs)
		if expect_success:
			response.raise_for_status()
	except Exception as e:
		error = map_transport_error(e)
		if isinstance(error, HttpError):
			logger.debug("%s %s returned %s", method, url, error.code)
		else:
			logger.warning("%s %s failed: %s", method, url, error)
		return error

	return HttpCallSuccess(response.content, response)
