# (c) Copyright Datacraft, 2026
"""Scanner status models (``scan:ScannerStatus``)."""
from dataclasses import dataclass
from enum import Enum

from ..enum_or_raw import EnumOrRaw
from ..xmlcodec.binding import EnumCodec, EnumOrRawCodec, ListOf, UINT, Value, pwg, scan


class ScannerState(str, Enum):
	Idle = 'Idle'
	Processing = 'Processing'  # busy with a job or other activity
	Testing = 'Testing'  # calibrating
	Stopped = 'Stopped'  # error condition
	Down = 'Down'  # unavailable


class AdfState(str, Enum):
	"""State of the document feeder; anything but processing needs attention."""
	ScannerAdfProcessing = 'ScannerAdfProcessing'
	ScannerAdfEmpty = 'ScannerAdfEmpty'
	ScannerAdfJam = 'ScannerAdfJam'
	ScannerAdfLoaded = 'ScannerAdfLoaded'
	ScannerAdfMispick = 'ScannerAdfMispick'
	ScannerAdfHatchOpen = 'ScannerAdfHatchOpen'
	ScannerAdfDuplexPageTooShort = 'ScannerAdfDuplexPageTooShort'
	ScannerAdfDuplexPageTooLong = 'ScannerAdfDuplexPageTooLong'
	ScannerAdfMultipickDetected = 'ScannerAdfMultipickDetected'
	ScannerAdfInputTrayFailed = 'ScannerAdfInputTrayFailed'
	ScannerAdfInputTrayOverloaded = 'ScannerAdfInputTrayOverloaded'


class JobState(str, Enum):
	Canceled = 'Canceled'  # end state, see the job state reasons
	Aborted = 'Aborted'  # end state, device, communication or security error
	Completed = 'Completed'
	Pending = 'Pending'  # scan engine is being prepared
	Processing = 'Processing'  # scan data is being transmitted


TERMINAL_JOB_STATES = frozenset({JobState.Canceled, JobState.Aborted, JobState.Completed})


@dataclass(frozen=True)
class JobInfo:
	"""One job as reported in the device status.

	``age`` is the number of seconds since the job info was last updated,
	relative to the time of the status request.
	"""
	job_uri: str
	job_uuid: str
	age: int
	images_completed: int
	job_state: JobState
	images_to_transfer: int | None = None
	transfer_retry_count: int | None = None
	job_state_reasons: tuple[str, ...] | None = None

	XML_FIELDS = (
		Value('job_uri', pwg('JobUri'), required=True),
		Value('job_uuid', pwg('JobUuid'), required=True),
		Value('age', scan('Age'), required=True, codec=UINT),
		Value('images_completed', pwg('ImagesCompleted'), required=True, codec=UINT),
		Value('images_to_transfer', pwg('ImagesToTransfer'), codec=UINT),
		Value('transfer_retry_count', scan('TransferRetryCount'), codec=UINT),
		Value('job_state', pwg('JobState'), required=True, codec=EnumCodec(JobState)),
		ListOf('job_state_reasons', pwg('JobStateReasons'), item=pwg('JobStateReason')),
	)

	@property
	def is_terminal(self) -> bool:
		return self.job_state in TERMINAL_JOB_STATES


@dataclass(frozen=True)
class ScannerStatus:
	version: str
	state: ScannerState
	jobs: tuple[JobInfo, ...] = ()
	adf_state: EnumOrRaw[AdfState] | None = None

	XML_ROOT = scan('ScannerStatus')
	XML_FIELDS = (
		Value('version', pwg('Version'), required=True),
		Value('state', pwg('State'), required=True, codec=EnumCodec(ScannerState)),
		ListOf('jobs', scan('Jobs'), item=scan('JobInfo'), record=JobInfo),
		Value('adf_state', scan('AdfState'), codec=EnumOrRawCodec(AdfState)),
	)

	def find_job(self, job_uri: str) -> JobInfo | None:
		"""Look up a job by URI, ignoring a trailing slash on either side."""
		wanted = job_uri.rstrip('/')
		for job in self.jobs:
			if job.job_uri.rstrip('/') == wanted:
				return job
		return None
