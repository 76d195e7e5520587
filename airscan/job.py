# (c) Copyright Datacraft, 2026
"""Handle for a job created on the scanner."""
from typing import TYPE_CHECKING

from .models import JobInfo, ScanSettings
from .results import (
	DeleteJobResult,
	JobDeleted,
	NextPageResult,
	ScanImageInfoResult,
	StatusRetrieved,
)

if TYPE_CHECKING:
	from .client import ESCLRequestClient


class ScanJob:
	"""
	A scan job bound to its URI on the device.

	``is_cancelled`` only reflects cancellations made through this handle;
	poll ``get_job_status`` for the device's view of the job.
	"""

	def __init__(self, job_uri: str, escl_client: "ESCLRequestClient", scan_settings: ScanSettings):
		if not job_uri.endswith('/'):
			job_uri += '/'
		self.job_uri = job_uri
		self.escl_client = escl_client
		self.scan_settings = scan_settings
		self._is_cancelled = False

	@property
	def is_cancelled(self) -> bool:
		return self._is_cancelled

	async def cancel(self) -> DeleteJobResult:
		result = await self.escl_client.delete_job(self.job_uri)
		if isinstance(result, JobDeleted):
			self._is_cancelled = True
		return result

	async def get_job_status(self) -> JobInfo | None:
		"""Current JobInfo of this job, or None if the device does not list it."""
		result = await self.escl_client.get_scanner_status()
		if not isinstance(result, StatusRetrieved):
			return None
		return result.scanner_status.find_job(self.job_uri)

	async def retrieve_next_page(self) -> NextPageResult:
		return await self.escl_client.retrieve_next_page_for_job(self.job_uri)

	async def get_scan_image_info_for_retrieved_page(self) -> ScanImageInfoResult:
		return await self.escl_client.retrieve_scan_image_info_for_job(self.job_uri)

	def __repr__(self):
		return (
			f"ScanJob(job_uri='{self.job_uri}', is_cancelled={self._is_cancelled}, "
			f"scan_settings={self.scan_settings!r}, escl_client={self.escl_client!r})"
		)
