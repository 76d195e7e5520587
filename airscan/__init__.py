# (c) Copyright Datacraft, 2026
"""Client library for the eSCL (Apple AirScan) scanning protocol."""
from .client import ESCLRequestClient
from .config import ESCLSettings, get_settings
from .enum_or_raw import EnumOrRaw, Known, Unknown
from .exceptions import ESCLError, ESCLXmlError, MissingElementError, XmlStructureError
from .job import ScanJob
from .length_units import (
	DeviceUnits,
	Inches,
	LengthUnit,
	Millimeters,
	Points,
	ThreeHundredthsOfInch,
	inches,
	millimeters,
	points,
	three_hundredths_of_inch,
)
from .log import configure_logging
from .version import __version__
from .xmlcodec import Decoded, ESCLXml

__all__ = [
	'Decoded',
	'DeviceUnits',
	'ESCLError',
	'ESCLRequestClient',
	'ESCLSettings',
	'ESCLXml',
	'ESCLXmlError',
	'EnumOrRaw',
	'Inches',
	'Known',
	'LengthUnit',
	'Millimeters',
	'MissingElementError',
	'Points',
	'ScanJob',
	'ThreeHundredthsOfInch',
	'Unknown',
	'XmlStructureError',
	'__version__',
	'configure_logging',
	'get_settings',
	'inches',
	'millimeters',
	'points',
	'three_hundredths_of_inch',
]
