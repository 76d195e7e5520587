# (c) Copyright Datacraft, 2026
"""Outcome types of the protocol client operations.

Each operation returns one member of a closed set of frozen dataclasses,
named by the ``*Result`` aliases below, so callers can ``match`` on them
exhaustively.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .http import HttpCallError
from .models import ScanImageInfo, ScannerCapabilities, ScannerStatus
from .xmlcodec import UnknownInput

if TYPE_CHECKING:
	from .job import ScanJob


@dataclass(frozen=True)
class RequestFailure:
	error: HttpCallError


@dataclass(frozen=True)
class InternalBug:
	"""A failure nobody anticipated. It is logged, never raised."""
	exception: Exception


# --- getScannerCapabilities ---

@dataclass(frozen=True)
class CapabilitiesRetrieved:
	scanner_capabilities: ScannerCapabilities
	unknown_inputs: tuple[UnknownInput, ...] = ()


@dataclass(frozen=True)
class CapabilitiesMalformed:
	content: str
	exception: Exception


ScannerCapabilitiesResult = Union[CapabilitiesRetrieved, RequestFailure, CapabilitiesMalformed, InternalBug]


# --- getScannerStatus ---

@dataclass(frozen=True)
class StatusRetrieved:
	scanner_status: ScannerStatus
	unknown_inputs: tuple[UnknownInput, ...] = ()


@dataclass(frozen=True)
class StatusMalformed:
	xml_string: str
	exception: Exception


ScannerStatusResult = Union[StatusRetrieved, RequestFailure, StatusMalformed, InternalBug]


# --- createJob ---

@dataclass(frozen=True)
class JobCreated:
	scan_job: "ScanJob"


@dataclass(frozen=True)
class JobUrlBuildingFailed:
	exception: Exception


@dataclass(frozen=True)
class NoLocationGiven:
	pass


CreateJobResult = Union[JobCreated, RequestFailure, JobUrlBuildingFailed, NoLocationGiven, InternalBug]


# --- deleteJob ---

@dataclass(frozen=True)
class JobDeleted:
	pass


@dataclass(frozen=True)
class CouldNotBuildJobUrl:
	exception: Exception


DeleteJobResult = Union[JobDeleted, CouldNotBuildJobUrl, RequestFailure]


# --- retrieveNextPage ---

@dataclass(frozen=True)
class ScannedPage:
	content_type: str
	data: bytes = field(repr=False)
	content_location: str | None = None
	support_range_header: bool = False

	def __repr__(self):
		return (
			f"ScannedPage(content_type={self.content_type!r}, "
			f"content_location={self.content_location!r}, "
			f"data_size={len(self.data)}, "
			f"support_range_header={self.support_range_header})"
		)


@dataclass(frozen=True)
class PageRetrieved:
	page: ScannedPage


@dataclass(frozen=True)
class NoFurtherPages:
	pass


@dataclass(frozen=True)
class InvalidJobUri:
	exception: Exception


@dataclass(frozen=True)
class ContentTypeMissing:
	response_code: int
	body: str


NextPageResult = Union[PageRetrieved, NoFurtherPages, InvalidJobUri, RequestFailure, ContentTypeMissing]


# --- retrieveScanImageInfo ---

@dataclass(frozen=True)
class ImageInfoRetrieved:
	scan_image_info: ScanImageInfo
	unknown_inputs: tuple[UnknownInput, ...] = ()


@dataclass(frozen=True)
class ImageInfoMalformed:
	xml_string: str
	exception: Exception


ScanImageInfoResult = Union[ImageInfoRetrieved, InvalidJobUri, RequestFailure, ImageInfoMalformed, InternalBug]
