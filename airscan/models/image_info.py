# (c) Copyright Datacraft, 2026
"""Per page metadata (``scan:ScanImageInfo``)."""
import uuid
from dataclasses import dataclass

from ..xmlcodec.binding import BOOL, UINT, UUID, Value, pwg, scan


@dataclass(frozen=True)
class ScanImageInfo:
	job_uri: str
	job_uuid: uuid.UUID
	actual_width: int
	actual_height: int
	actual_bytes_per_line: int
	blank_page_detected: bool | None = None

	XML_ROOT = scan('ScanImageInfo')
	XML_FIELDS = (
		Value('job_uri', pwg('JobUri'), required=True),
		Value('job_uuid', pwg('JobUuid'), required=True, codec=UUID),
		Value('actual_width', scan('ActualWidth'), required=True, codec=UINT),
		Value('actual_height', scan('ActualHeight'), required=True, codec=UINT),
		Value('actual_bytes_per_line', scan('ActualBytesPerLine'), required=True, codec=UINT),
		Value('blank_page_detected', scan('BlankPageDetected'), codec=BOOL),
	)
