# (c) Copyright Datacraft, 2026
"""Tests for ScannerStatus and ScanImageInfo documents."""
import uuid
import xml.etree.ElementTree as ET

import pytest

from airscan import ESCLXml, Known, Unknown, XmlStructureError
from airscan.models import AdfState, JobInfo, JobState, ScanImageInfo, ScannerState, ScannerStatus


def test_decode_idle_status(resource):
	status = ESCLXml.decode(ScannerStatus, resource("status", "example1.xml")).value
	assert status == ScannerStatus(
		version="2.62",
		state=ScannerState.Idle,
		jobs=(),
		adf_state=Known(AdfState.ScannerAdfEmpty),
	)


def test_decode_status_with_jobs(resource):
	status = ESCLXml.decode(ScannerStatus, resource("status", "example2.xml")).value

	assert status.state == ScannerState.Processing
	assert status.adf_state is None
	assert len(status.jobs) == 2

	running = status.jobs[0]
	assert running.job_uri == "/eSCL/ScanJobs/893e6fcd-487f-4056-a8c9-a87709b85daf"
	assert running.age == 12
	assert running.images_to_transfer == 1
	assert running.job_state == JobState.Processing
	assert running.job_state_reasons == ("JobScanning",)
	assert not running.is_terminal

	done = status.jobs[1]
	assert done.transfer_retry_count == 0
	assert done.images_to_transfer is None
	assert done.is_terminal


def test_find_job_ignores_trailing_slash(resource):
	status = ESCLXml.decode(ScannerStatus, resource("status", "example2.xml")).value
	assert status.find_job("/eSCL/ScanJobs/893e6fcd-487f-4056-a8c9-a87709b85daf/") is status.jobs[0]
	assert status.find_job("/eSCL/ScanJobs/123") is status.jobs[1]
	assert status.find_job("/eSCL/ScanJobs/999/") is None


def test_unknown_adf_state_is_preserved():
	document = (
		'<scan:ScannerStatus xmlns:scan="http://schemas.hp.com/imaging/escl/2011/05/03" '
		'xmlns:pwg="http://www.pwg.org/schemas/2010/12/sm">'
		'<pwg:Version>2.63</pwg:Version><pwg:State>Idle</pwg:State>'
		'<scan:AdfState>ScannerAdfPaperJamAgain</scan:AdfState>'
		'</scan:ScannerStatus>'
	)
	status = ESCLXml.decode(ScannerStatus, document).value
	assert status.adf_state == Unknown("ScannerAdfPaperJamAgain")


def test_unknown_scanner_state_is_rejected():
	document = (
		'<scan:ScannerStatus xmlns:scan="http://schemas.hp.com/imaging/escl/2011/05/03" '
		'xmlns:pwg="http://www.pwg.org/schemas/2010/12/sm">'
		'<pwg:Version>2.63</pwg:Version><pwg:State>Sleeping</pwg:State>'
		'</scan:ScannerStatus>'
	)
	with pytest.raises(ValueError):
		ESCLXml.decode(ScannerStatus, document)


def test_wrong_root_element_is_rejected(resource):
	with pytest.raises(XmlStructureError, match="scan:ScannerStatus"):
		ESCLXml.decode(ScannerStatus, resource("image_info", "example1.xml"))


def test_truncated_document_is_rejected():
	with pytest.raises(ET.ParseError):
		ESCLXml.decode(ScannerStatus, b"<scan:ScannerStatus xmlns:scan=\"x\"><pwg:Version>")


def test_status_survives_encode_decode():
	status = ScannerStatus(
		version="2.63",
		state=ScannerState.Processing,
		jobs=(
			JobInfo(
				job_uri="/eSCL/ScanJobs/1",
				job_uuid="1",
				age=10,
				images_completed=1,
				job_state=JobState.Pending,
			),
		),
	)
	assert ESCLXml.decode(ScannerStatus, ESCLXml.encode(status)).value == status


def test_decode_image_info(resource):
	info = ESCLXml.decode(ScanImageInfo, resource("image_info", "example1.xml")).value
	assert info == ScanImageInfo(
		job_uri="/eSCL/ScanJobs/893e6fcd-487f-4056-a8c9-a87709b85daf",
		job_uuid=uuid.UUID("893e6fcd-487f-4056-a8c9-a87709b85daf"),
		actual_width=2550,
		actual_height=3508,
		actual_bytes_per_line=7650,
		blank_page_detected=False,
	)
