# (c) Copyright Datacraft, 2026
"""eSCL (AirScan) protocol client."""
import logging
import xml.etree.ElementTree as ET
from typing import Callable

import httpx

from .config import ESCLSettings, get_settings
from .exceptions import ESCLXmlError
from .http import HttpCallSuccess, HttpError, safe_request
from .job import ScanJob
from .models import ScanImageInfo, ScannerCapabilities, ScannerStatus, ScanSettings
from .results import (
	CapabilitiesMalformed,
	CapabilitiesRetrieved,
	ContentTypeMissing,
	CouldNotBuildJobUrl,
	CreateJobResult,
	DeleteJobResult,
	ImageInfoMalformed,
	ImageInfoRetrieved,
	InternalBug,
	InvalidJobUri,
	JobCreated,
	JobDeleted,
	JobUrlBuildingFailed,
	NextPageResult,
	NoFurtherPages,
	NoLocationGiven,
	PageRetrieved,
	RequestFailure,
	ScanImageInfoResult,
	ScannedPage,
	ScannerCapabilitiesResult,
	ScannerStatusResult,
	StatusMalformed,
	StatusRetrieved,
)
from .xmlcodec import Decoded, ESCLXml

logger = logging.getLogger(__name__)

ACCEPT_ANY = {'Accept': '*/*'}

# failures of a 2xx body that mean the device sent something we can't read
MALFORMED_ERRORS = (ESCLXmlError, ET.ParseError, ValueError)


class ESCLRequestClient:
	"""
	Client for the eSCL scanning protocol.

	``base_url`` is the device URL plus the ``rs`` TXT record announced
	over mDNS, e.g. ``http://192.168.1.20/eSCL/``. Every operation returns
	one of the outcome types from ``airscan.results`` and never raises.
	"""

	def __init__(
		self,
		base_url: str | httpx.URL,
		http_client: httpx.AsyncClient | None = None,
		settings: ESCLSettings | None = None,
	):
		url = str(base_url)
		if not url.endswith('/'):
			url += '/'
		self.base_url = httpx.URL(url)
		self.root_url = self.base_url.copy_with(path='/')

		self._owns_client = http_client is None
		if http_client is None:
			http_client = (settings or get_settings()).build_http_client()
		self._client = http_client

	def __repr__(self):
		return f"ESCLRequestClient(base_url='{self.base_url}')"

	async def aclose(self):
		"""Close the HTTP client if this instance created it."""
		if self._owns_client:
			await self._client.aclose()

	async def __aenter__(self):
		return self

	async def __aexit__(self, *args):
		await self.aclose()

	def _decode(self, record_type: type, success: HttpCallSuccess, malformed: Callable):
		text = success.text
		try:
			return ESCLXml.decode(record_type, success.body)
		except MALFORMED_ERRORS as e:
			logger.warning(f"{record_type.__name__} document is malformed: {e}")
			return malformed(text, e)
		except Exception as e:
			logger.exception(f"Unexpected error decoding {record_type.__name__}")
			return InternalBug(e)

	def _job_url(self, job_uri: str) -> httpx.URL:
		if not job_uri.endswith('/'):
			job_uri += '/'
		return self.root_url.copy_with(path=job_uri)

	async def get_scanner_capabilities(self) -> ScannerCapabilitiesResult:
		"""Fetch the device's ScannerCapabilities document."""
		response = await safe_request(
			self._client, 'GET', f"{self.base_url}ScannerCapabilities", headers=ACCEPT_ANY,
		)
		if not isinstance(response, HttpCallSuccess):
			return RequestFailure(response)

		decoded = self._decode(ScannerCapabilities, response, CapabilitiesMalformed)
		if not isinstance(decoded, Decoded):
			return decoded
		return CapabilitiesRetrieved(decoded.value, decoded.unknown_inputs)

	async def get_scanner_status(self) -> ScannerStatusResult:
		"""Fetch the device's current ScannerStatus document."""
		response = await safe_request(
			self._client, 'GET', f"{self.base_url}ScannerStatus", headers=ACCEPT_ANY,
		)
		if not isinstance(response, HttpCallSuccess):
			return RequestFailure(response)

		decoded = self._decode(ScannerStatus, response, StatusMalformed)
		if not isinstance(decoded, Decoded):
			return decoded
		return StatusRetrieved(decoded.value, decoded.unknown_inputs)

	async def create_job(self, scan_settings: ScanSettings) -> CreateJobResult:
		"""
		Post a scan job.

		On success the result holds a ``ScanJob`` bound to the path given
		by the Location header, always ending in ``/``.
		"""
		try:
			request_data = ESCLXml.encode(scan_settings)
		except Exception as e:
			logger.exception("Could not encode scan settings")
			return InternalBug(e)

		response = await safe_request(
			self._client,
			'POST',
			f"{self.base_url}ScanJobs",
			headers={**ACCEPT_ANY, 'Content-Type': 'text/xml'},
			content=request_data.encode('utf-8'),
		)
		if not isinstance(response, HttpCallSuccess):
			return RequestFailure(response)

		location = response.response.headers.get('Location')
		if location is None:
			logger.warning("Scanner created a job but sent no Location header")
			return NoLocationGiven()

		try:
			job_path = self.base_url.join(location).path
		except Exception as e:
			logger.warning(f"Invalid job location {location!r}: {e}")
			return JobUrlBuildingFailed(e)

		if not job_path.endswith('/'):
			job_path += '/'
		logger.debug(f"Created scan job {job_path}")
		return JobCreated(ScanJob(job_path, self, scan_settings))

	async def delete_job(self, job_uri: str) -> DeleteJobResult:
		"""Cancel the job at ``job_uri`` (e.g. ``/eSCL/ScanJobs/893e6fcd``)."""
		try:
			url = self.root_url.copy_with(path=job_uri.removesuffix('/'))
		except Exception as e:
			return CouldNotBuildJobUrl(e)

		response = await safe_request(self._client, 'DELETE', str(url), headers=ACCEPT_ANY)
		if not isinstance(response, HttpCallSuccess):
			return RequestFailure(response)
		return JobDeleted()

	async def retrieve_next_page_for_job(self, job_uri: str) -> NextPageResult:
		"""
		Fetch the next page of a job.

		A 404 means the job has no further pages. Use the page data right
		away, the device may reuse its buffer.
		"""
		try:
			job_url = self._job_url(job_uri)
		except Exception as e:
			return InvalidJobUri(e)

		response = await safe_request(
			self._client, 'GET', f"{job_url}NextDocument", expect_success=False, headers=ACCEPT_ANY,
		)
		if not isinstance(response, HttpCallSuccess):
			return RequestFailure(response)

		http_response = response.response
		status = http_response.status_code
		if status == httpx.codes.NOT_FOUND:
			logger.debug(f"No further pages for {job_uri}")
			return NoFurtherPages()
		if not http_response.is_success:
			return RequestFailure(HttpError(status, response.text))

		content_type = http_response.headers.get('Content-Type')
		if content_type is None:
			return ContentTypeMissing(status, response.text)

		return PageRetrieved(
			ScannedPage(
				content_type=content_type,
				data=response.body,
				content_location=http_response.headers.get('Content-Location'),
				support_range_header=http_response.headers.get('Accept-Ranges', 'none') == 'bytes',
			)
		)

	async def retrieve_scan_image_info_for_job(self, job_uri: str) -> ScanImageInfoResult:
		"""Fetch the ScanImageInfo of the page retrieved last."""
		try:
			job_url = self._job_url(job_uri)
		except Exception as e:
			return InvalidJobUri(e)

		response = await safe_request(
			self._client, 'GET', f"{job_url}ScanImageInfo", headers=ACCEPT_ANY,
		)
		if not isinstance(response, HttpCallSuccess):
			return RequestFailure(response)

		decoded = self._decode(ScanImageInfo, response, ImageInfoMalformed)
		if not isinstance(decoded, Decoded):
			return decoded
		return ImageInfoRetrieved(decoded.value, decoded.unknown_inputs)
