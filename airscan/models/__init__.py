# (c) Copyright Datacraft, 2026
"""eSCL domain models."""
from .capabilities import (
	Adf,
	AdfOption,
	CcdChannel,
	Certification,
	ColorMode,
	CompressionFactorSupport,
	ContentType,
	DiscreteResolution,
	Edge,
	InputSource,
	InputSourceCaps,
	Platen,
	ScanIntent,
	ScannerCapabilities,
	SettingProfile,
	SharpenSupport,
	StoredJobRequestSupport,
	SupportedResolutions,
)
from .document_formats import DocumentFormats, DocumentFormatsCodec
from .image_info import ScanImageInfo
from .scan_settings import (
	BinaryRendering,
	FeedDirection,
	ScanRegion,
	ScanRegionBuilder,
	ScanRegionLength,
	ScanRegions,
	ScanSettings,
	scan_region,
)
from .status import AdfState, JobInfo, JobState, ScannerState, ScannerStatus

__all__ = [
	'Adf',
	'AdfOption',
	'AdfState',
	'BinaryRendering',
	'CcdChannel',
	'Certification',
	'ColorMode',
	'CompressionFactorSupport',
	'ContentType',
	'DiscreteResolution',
	'DocumentFormats',
	'DocumentFormatsCodec',
	'Edge',
	'FeedDirection',
	'InputSource',
	'InputSourceCaps',
	'JobInfo',
	'JobState',
	'Platen',
	'ScanImageInfo',
	'ScanIntent',
	'ScanRegion',
	'ScanRegionBuilder',
	'ScanRegionLength',
	'ScanRegions',
	'ScanSettings',
	'ScannerCapabilities',
	'ScannerState',
	'ScannerStatus',
	'SettingProfile',
	'SharpenSupport',
	'StoredJobRequestSupport',
	'SupportedResolutions',
	'scan_region',
]
