# (c) Copyright Datacraft, 2026
"""Scanner capabilities models (``scan:ScannerCapabilities``)."""
import uuid
from dataclasses import dataclass
from enum import Enum

from ..enum_or_raw import EnumOrRaw
from ..length_units import ThreeHundredthsOfInch
from ..xmlcodec.binding import (
	INT,
	LENGTH,
	UINT,
	UUID,
	Custom,
	EnumOrRawCodec,
	ListOf,
	Record,
	Value,
	pwg,
	scan,
)
from .document_formats import DocumentFormats, DocumentFormatsCodec


class ScanIntent(str, Enum):
	"""What the scan is optimized for."""
	Document = 'Document'
	TextAndGraphic = 'TextAndGraphic'
	Photo = 'Photo'
	Preview = 'Preview'  # fast output
	Object = 'Object'  # three dimensional objects
	BusinessCard = 'BusinessCard'


class ContentType(str, Enum):
	Photo = 'Photo'
	Text = 'Text'
	TextAndPhoto = 'TextAndPhoto'
	LineArt = 'LineArt'
	Magazine = 'Magazine'
	Halftone = 'Halftone'
	Auto = 'Auto'
	Thru = 'Thru'


class CcdChannel(str, Enum):
	Red = 'Red'
	Green = 'Green'
	Blue = 'Blue'
	NTSC = 'NTSC'  # weighted for photos
	GrayCcd = 'GrayCcd'  # dedicated gray array
	GrayCcdEmulated = 'GrayCcdEmulated'  # 1/3 R, 1/3 G, 1/3 B


class ColorMode(str, Enum):
	BlackAndWhite1 = 'BlackAndWhite1'
	Grayscale8 = 'Grayscale8'
	Grayscale16 = 'Grayscale16'
	RGB24 = 'RGB24'
	RGB48 = 'RGB48'
	AutoColorDetection = 'AutoColorDetection'


class AdfOption(str, Enum):
	DetectPaperLoaded = 'DetectPaperLoaded'
	SelectSinglePage = 'SelectSinglePage'
	Duplex = 'Duplex'
	MultipickDetection = 'MultipickDetection'


class Edge(str, Enum):
	TopEdge = 'TopEdge'
	BottomEdge = 'BottomEdge'
	LeftEdge = 'LeftEdge'
	RightEdge = 'RightEdge'


class InputSource(str, Enum):
	Platen = 'Platen'  # flatbed glass
	Feeder = 'Feeder'
	Camera = 'Camera'


@dataclass(frozen=True)
class DiscreteResolution:
	x_resolution: int
	y_resolution: int

	XML_FIELDS = (
		Value('x_resolution', scan('XResolution'), required=True, codec=UINT),
		Value('y_resolution', scan('YResolution'), required=True, codec=UINT),
	)


@dataclass(frozen=True)
class SupportedResolutions:
	discrete_resolutions: tuple[DiscreteResolution, ...] = ()

	XML_FIELDS = (
		ListOf(
			'discrete_resolutions',
			scan('DiscreteResolutions'),
			item=scan('DiscreteResolution'),
			record=DiscreteResolution,
		),
	)


@dataclass(frozen=True)
class SettingProfile:
	color_modes: tuple[EnumOrRaw[ColorMode], ...]
	document_formats: DocumentFormats
	supported_resolutions: SupportedResolutions
	content_types: tuple[EnumOrRaw[ContentType], ...] | None = None
	color_spaces: tuple[str, ...] | None = None
	ccd_channels: tuple[EnumOrRaw[CcdChannel], ...] | None = None
	binary_renderings: tuple[str, ...] | None = None

	XML_FIELDS = (
		ListOf(
			'color_modes',
			scan('ColorModes'),
			required=True,
			item=scan('ColorMode'),
			codec=EnumOrRawCodec(ColorMode),
		),
		ListOf(
			'content_types',
			scan('ContentTypes'),
			item=pwg('ContentType'),
			codec=EnumOrRawCodec(ContentType),
		),
		Custom('document_formats', scan('DocumentFormats'), required=True, codec=DocumentFormatsCodec()),
		Record('supported_resolutions', scan('SupportedResolutions'), required=True, record=SupportedResolutions),
		ListOf('color_spaces', scan('ColorSpaces'), item=scan('ColorSpace')),
		ListOf(
			'ccd_channels',
			scan('CcdChannels'),
			item=scan('CcdChannel'),
			codec=EnumOrRawCodec(CcdChannel),
		),
		ListOf('binary_renderings', scan('BinaryRenderings'), item=scan('BinaryRendering')),
	)


@dataclass(frozen=True)
class InputSourceCaps:
	min_width: ThreeHundredthsOfInch
	max_width: ThreeHundredthsOfInch
	min_height: ThreeHundredthsOfInch
	max_height: ThreeHundredthsOfInch
	setting_profiles: tuple[SettingProfile, ...]
	max_scan_regions: int | None = None
	max_optical_x_resolution: int | None = None
	max_optical_y_resolution: int | None = None
	risky_left_margin: ThreeHundredthsOfInch | None = None
	risky_right_margin: ThreeHundredthsOfInch | None = None
	risky_top_margin: ThreeHundredthsOfInch | None = None
	risky_bottom_margin: ThreeHundredthsOfInch | None = None
	max_physical_width: ThreeHundredthsOfInch | None = None
	max_physical_height: ThreeHundredthsOfInch | None = None
	supported_intents: tuple[EnumOrRaw[ScanIntent], ...] = ()
	edge_auto_detection: tuple[EnumOrRaw[Edge], ...] = ()

	XML_FIELDS = (
		Value('min_width', scan('MinWidth'), required=True, codec=LENGTH),
		Value('max_width', scan('MaxWidth'), required=True, codec=LENGTH),
		Value('min_height', scan('MinHeight'), required=True, codec=LENGTH),
		Value('max_height', scan('MaxHeight'), required=True, codec=LENGTH),
		Value('max_scan_regions', scan('MaxScanRegions'), codec=UINT),
		Value('max_optical_x_resolution', scan('MaxOpticalXResolution'), codec=UINT),
		Value('max_optical_y_resolution', scan('MaxOpticalYResolution'), codec=UINT),
		Value('risky_left_margin', scan('RiskyLeftMargin'), codec=LENGTH),
		Value('risky_right_margin', scan('RiskyRightMargin'), codec=LENGTH),
		Value('risky_top_margin', scan('RiskyTopMargin'), codec=LENGTH),
		Value('risky_bottom_margin', scan('RiskyBottomMargin'), codec=LENGTH),
		Value('max_physical_width', scan('MaxPhysicalWidth'), codec=LENGTH),
		Value('max_physical_height', scan('MaxPhysicalHeight'), codec=LENGTH),
		ListOf(
			'setting_profiles',
			scan('SettingProfiles'),
			required=True,
			item=scan('SettingProfile'),
			record=SettingProfile,
		),
		ListOf(
			'supported_intents',
			scan('SupportedIntents'),
			item=scan('Intent'),
			codec=EnumOrRawCodec(ScanIntent),
		),
		ListOf(
			'edge_auto_detection',
			scan('EdgeAutoDetection'),
			item=scan('SupportedEdge'),
			codec=EnumOrRawCodec(Edge),
		),
	)


@dataclass(frozen=True)
class Platen:
	input_source_caps: InputSourceCaps

	XML_FIELDS = (
		Record('input_source_caps', scan('PlatenInputCaps'), required=True, record=InputSourceCaps),
	)


@dataclass(frozen=True)
class Adf:
	simplex_caps: InputSourceCaps
	duplex_caps: InputSourceCaps | None = None
	feeder_capacity: int | None = None
	adf_options: tuple[EnumOrRaw[AdfOption], ...] = ()

	XML_FIELDS = (
		Record('simplex_caps', scan('AdfSimplexInputCaps'), required=True, record=InputSourceCaps),
		Record('duplex_caps', scan('AdfDuplexInputCaps'), record=InputSourceCaps),
		Value('feeder_capacity', scan('FeederCapacity'), codec=UINT),
		ListOf(
			'adf_options',
			scan('AdfOptions'),
			item=scan('AdfOption'),
			codec=EnumOrRawCodec(AdfOption),
		),
	)


@dataclass(frozen=True)
class Certification:
	name: str
	version: str

	XML_FIELDS = (
		Value('name', scan('Name'), required=True),
		Value('version', scan('Version'), required=True),
	)


@dataclass(frozen=True)
class SharpenSupport:
	min: int
	max: int
	step: int
	normal: int | None = None

	XML_FIELDS = (
		Value('min', scan('Min'), required=True, codec=INT),
		Value('max', scan('Max'), required=True, codec=INT),
		Value('normal', scan('Normal'), codec=INT),
		Value('step', scan('Step'), required=True, codec=INT),
	)


@dataclass(frozen=True)
class CompressionFactorSupport:
	min: int
	max: int
	normal: int
	step: int

	XML_FIELDS = (
		Value('min', scan('Min'), required=True, codec=INT),
		Value('max', scan('Max'), required=True, codec=INT),
		Value('normal', scan('Normal'), required=True, codec=INT),
		Value('step', scan('Step'), required=True, codec=INT),
	)


@dataclass(frozen=True)
class StoredJobRequestSupport:
	max_stored_job_requests: int
	timeout_in_seconds: int

	XML_FIELDS = (
		Value('max_stored_job_requests', scan('MaxStoredjobRequests'), required=True, codec=UINT),
		Value('timeout_in_seconds', scan('TimeoutInSeconds'), required=True, codec=UINT),
	)


@dataclass(frozen=True)
class ScannerCapabilities:
	"""Static limits and options reported by the device.

	``device_uuid`` matches the ``UUID`` TXT record announced over mDNS.
	"""
	interface_version: str
	make_and_model: str
	serial_number: str
	manufacturer: str | None = None
	device_uuid: uuid.UUID | None = None
	admin_uri: str | None = None
	icon_uri: str | None = None
	certifications: tuple[Certification, ...] | None = None
	platen: Platen | None = None
	adf: Adf | None = None
	supported_media_types: tuple[str, ...] | None = None
	sharpen_support: SharpenSupport | None = None
	compression_factor_support: CompressionFactorSupport | None = None
	stored_job_request_support: StoredJobRequestSupport | None = None

	XML_ROOT = scan('ScannerCapabilities')
	XML_FIELDS = (
		Value('interface_version', pwg('Version'), required=True),
		Value('make_and_model', pwg('MakeAndModel'), required=True),
		Value('manufacturer', scan('Manufacturer')),
		Value('device_uuid', scan('UUID'), codec=UUID),
		Value('serial_number', pwg('SerialNumber'), required=True),
		Value('admin_uri', scan('AdminURI')),
		Value('icon_uri', scan('IconURI')),
		ListOf('certifications', scan('Certifications'), item=scan('Certification'), record=Certification),
		Record('platen', scan('Platen'), record=Platen),
		Record('adf', scan('Adf'), record=Adf),
		ListOf('supported_media_types', scan('SupportedMediaTypes'), item=scan('MediaType')),
		Record('sharpen_support', scan('SharpenSupport'), record=SharpenSupport),
		Record('compression_factor_support', scan('CompressionFactorSupport'), record=CompressionFactorSupport),
		Record('stored_job_request_support', scan('StoredJobRequestSupport'), record=StoredJobRequestSupport),
	)

	def input_source_options(self) -> list[InputSource]:
		"""Input sources this device reports capabilities for."""
		options = []
		if self.platen is not None:
			options.append(InputSource.Platen)
		if self.adf is not None:
			options.append(InputSource.Feeder)
		return options

	def input_source_caps(self, source: InputSource, duplex: bool = False) -> InputSourceCaps:
		"""Return the capability block for ``source``.

		Raises LookupError when the device does not report one.
		"""
		if source == InputSource.Platen:
			if self.platen is None:
				raise LookupError("scanner has no platen")
			return self.platen.input_source_caps
		if source == InputSource.Feeder:
			if self.adf is None:
				raise LookupError("scanner has no document feeder")
			if not duplex:
				return self.adf.simplex_caps
			if self.adf.duplex_caps is None:
				raise LookupError("document feeder does not support duplex scanning")
			return self.adf.duplex_caps
		raise LookupError(f"no capabilities reported for input source {source.value}")
