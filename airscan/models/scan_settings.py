# (c) Copyright Datacraft, 2026
"""Scan job request (``scan:ScanSettings``) and scan region helpers."""
from dataclasses import dataclass
from enum import Enum

from ..enum_or_raw import EnumOrRaw
from ..length_units import LengthUnit, ThreeHundredthsOfInch
from ..xmlcodec.binding import (
	BOOL,
	LENGTH,
	UINT,
	Attribute,
	Constant,
	EnumCodec,
	EnumOrRawCodec,
	ListOf,
	Record,
	Value,
	pwg,
	scan,
)
from .capabilities import CcdChannel, ColorMode, ContentType, InputSource, InputSourceCaps, ScanIntent

CONTENT_REGION_UNITS = 'escl:ThreeHundredthsOfInches'

# used for ScanRegionLength.MAX when no capabilities are at hand
DEFAULT_MAX_LENGTH = ThreeHundredthsOfInch(30000)


class BinaryRendering(str, Enum):
	Halftone = 'Halftone'
	Threshold = 'Threshold'


class FeedDirection(str, Enum):
	LongEdgeFeed = 'LongEdgeFeed'
	ShortEdgeFeed = 'ShortEdgeFeed'


@dataclass(frozen=True)
class ScanRegion:
	height: ThreeHundredthsOfInch
	width: ThreeHundredthsOfInch
	x_offset: ThreeHundredthsOfInch
	y_offset: ThreeHundredthsOfInch

	XML_FIELDS = (
		Value('height', pwg('Height'), required=True, codec=LENGTH),
		Value('width', pwg('Width'), required=True, codec=LENGTH),
		Value('x_offset', pwg('XOffset'), required=True, codec=LENGTH),
		Value('y_offset', pwg('YOffset'), required=True, codec=LENGTH),
		Constant(None, pwg('ContentRegionUnits'), text=CONTENT_REGION_UNITS),
	)


@dataclass(frozen=True)
class ScanRegions:
	regions: tuple[ScanRegion, ...]
	must_honor: bool = True

	XML_FIELDS = (
		Attribute('must_honor', pwg('MustHonor'), codec=BOOL),
		ListOf('regions', pwg('ScanRegion'), required=True, record=ScanRegion, wrapped=False),
	)


class ScanRegionLength(Enum):
	"""Placeholder for the largest length the input source allows."""
	MAX = 'max'


class ScanRegionBuilder:
	"""Builds a single region ``ScanRegions``.

	Width and height default to the maximum of ``input_source_caps`` (or
	30000 device units without capabilities); offsets default to zero.
	"""

	def __init__(self, input_source_caps: InputSourceCaps | None = None):
		self.input_source_caps = input_source_caps
		self._width: LengthUnit | ScanRegionLength = ScanRegionLength.MAX
		self._height: LengthUnit | ScanRegionLength = ScanRegionLength.MAX
		self.x_offset: LengthUnit = ThreeHundredthsOfInch(0)
		self.y_offset: LengthUnit = ThreeHundredthsOfInch(0)

	@property
	def max_width(self) -> ThreeHundredthsOfInch:
		if self.input_source_caps is None:
			return DEFAULT_MAX_LENGTH
		return self.input_source_caps.max_width

	@property
	def max_height(self) -> ThreeHundredthsOfInch:
		if self.input_source_caps is None:
			return DEFAULT_MAX_LENGTH
		return self.input_source_caps.max_height

	@property
	def width(self) -> ThreeHundredthsOfInch:
		return self._resolve(self._width, self.max_width)

	@width.setter
	def width(self, value: LengthUnit | ScanRegionLength):
		self._width = value

	@property
	def height(self) -> ThreeHundredthsOfInch:
		return self._resolve(self._height, self.max_height)

	@height.setter
	def height(self, value: LengthUnit | ScanRegionLength):
		self._height = value

	def max_size(self) -> "ScanRegionBuilder":
		self._width = ScanRegionLength.MAX
		self._height = ScanRegionLength.MAX
		return self

	def build(self) -> ScanRegions:
		region = ScanRegion(
			height=self.height,
			width=self.width,
			x_offset=self.x_offset.to_three_hundredths_of_inch(),
			y_offset=self.y_offset.to_three_hundredths_of_inch(),
		)
		return ScanRegions((region,))

	@staticmethod
	def _resolve(value: LengthUnit | ScanRegionLength, maximum: LengthUnit) -> ThreeHundredthsOfInch:
		if value is ScanRegionLength.MAX:
			return maximum.to_three_hundredths_of_inch()
		return value.to_three_hundredths_of_inch()


def scan_region(
	input_source_caps: InputSourceCaps | None = None,
	width: LengthUnit | ScanRegionLength = ScanRegionLength.MAX,
	height: LengthUnit | ScanRegionLength = ScanRegionLength.MAX,
	x_offset: LengthUnit | None = None,
	y_offset: LengthUnit | None = None,
) -> ScanRegions:
	builder = ScanRegionBuilder(input_source_caps)
	builder.width = width
	builder.height = height
	if x_offset is not None:
		builder.x_offset = x_offset
	if y_offset is not None:
		builder.y_offset = y_offset
	return builder.build()


@dataclass(frozen=True)
class ScanSettings:
	"""A scan job request. Every field but ``version`` may be omitted.

	Resolutions are in DPI. ``context_id`` is opaque data relayed by the
	client.
	"""
	version: str
	intent: EnumOrRaw[ScanIntent] | None = None
	scan_regions: ScanRegions | None = None
	document_format: str | None = None
	document_format_ext: str | None = None
	content_type: EnumOrRaw[ContentType] | None = None
	input_source: InputSource | None = None
	x_resolution: int | None = None
	y_resolution: int | None = None
	color_mode: EnumOrRaw[ColorMode] | None = None
	color_space: str | None = None
	media_type: str | None = None
	ccd_channel: EnumOrRaw[CcdChannel] | None = None
	binary_rendering: BinaryRendering | None = None
	duplex: bool | None = None
	number_of_pages: int | None = None
	brightness: int | None = None
	compression_factor: int | None = None
	contrast: int | None = None
	gamma: int | None = None
	highlight: int | None = None
	noise_removal: int | None = None
	shadow: int | None = None
	sharpen: int | None = None
	threshold: int | None = None
	context_id: str | None = None
	blank_page_detection: bool | None = None
	feed_direction: FeedDirection | None = None
	blank_page_detection_and_removal: bool | None = None

	XML_ROOT = scan('ScanSettings')
	XML_FIELDS = (
		Value('version', pwg('Version'), required=True),
		Value('intent', scan('Intent'), codec=EnumOrRawCodec(ScanIntent)),
		Record('scan_regions', pwg('ScanRegions'), record=ScanRegions),
		Value('document_format', pwg('DocumentFormat')),
		Value('document_format_ext', scan('DocumentFormatExt')),
		Value('content_type', pwg('ContentType'), codec=EnumOrRawCodec(ContentType)),
		Value('input_source', pwg('InputSource'), codec=EnumCodec(InputSource)),
		Value('x_resolution', scan('XResolution'), codec=UINT),
		Value('y_resolution', scan('YResolution'), codec=UINT),
		Value('color_mode', scan('ColorMode'), codec=EnumOrRawCodec(ColorMode)),
		Value('color_space', scan('ColorSpace')),
		Value('media_type', scan('MediaType')),
		Value('ccd_channel', scan('CcdChannel'), codec=EnumOrRawCodec(CcdChannel)),
		Value('binary_rendering', scan('BinaryRendering'), codec=EnumCodec(BinaryRendering)),
		Value('duplex', scan('Duplex'), codec=BOOL),
		Value('number_of_pages', scan('NumberOfPages'), codec=UINT),
		Value('brightness', scan('Brightness'), codec=UINT),
		Value('compression_factor', scan('CompressionFactor'), codec=UINT),
		Value('contrast', scan('Contrast'), codec=UINT),
		Value('gamma', scan('Gamma'), codec=UINT),
		Value('highlight', scan('Highlight'), codec=UINT),
		Value('noise_removal', scan('NoiseRemoval'), codec=UINT),
		Value('shadow', scan('Shadow'), codec=UINT),
		Value('sharpen', scan('Sharpen'), codec=UINT),
		Value('threshold', scan('Threshold'), codec=UINT),
		Value('context_id', scan('ContextID')),
		Value('blank_page_detection', scan('BlankPageDetection'), codec=BOOL),
		Value('feed_direction', scan('FeedDirection'), codec=EnumCodec(FeedDirection)),
		Value('blank_page_detection_and_removal', scan('BlankPageDetectionAndRemoval'), codec=BOOL),
	)
