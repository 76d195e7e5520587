# (c) Copyright Datacraft, 2026
"""Tests for decoding ScannerCapabilities documents."""
import uuid

import pytest

from airscan import ESCLXml, Known, MissingElementError, ThreeHundredthsOfInch, Unknown
from airscan.models import (
	AdfOption,
	ColorMode,
	ContentType,
	DiscreteResolution,
	Edge,
	InputSource,
	ScanIntent,
	ScannerCapabilities,
)
from airscan.xmlcodec.binding import InputKind


def test_decode_brother_capabilities(resource):
	decoded = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "brother.xml"))
	caps = decoded.value

	assert caps.interface_version == "2.62"
	assert caps.make_and_model == "Brother DS-940DW"
	assert caps.serial_number == "E79931K1N123456"
	assert caps.manufacturer == "Brother"
	assert caps.device_uuid == uuid.UUID("e3248000-80ce-11db-8000-30055c123456")
	assert caps.icon_uri == "http://192.168.1.20/icons/device-icons-128.png"
	assert decoded.unknown_inputs == ()

	platen = caps.platen.input_source_caps
	assert platen.max_width == ThreeHundredthsOfInch(2550)
	assert platen.max_height == ThreeHundredthsOfInch(3508)
	assert platen.max_scan_regions == 1
	assert platen.max_optical_x_resolution == 600
	assert platen.risky_left_margin == ThreeHundredthsOfInch(0)

	profile = platen.setting_profiles[0]
	assert profile.color_modes == (
		Known(ColorMode.BlackAndWhite1),
		Known(ColorMode.Grayscale8),
		Known(ColorMode.RGB24),
	)
	assert profile.content_types == (
		Known(ContentType.Photo),
		Known(ContentType.Text),
		Known(ContentType.TextAndPhoto),
	)
	assert profile.document_formats.document_formats == ("application/pdf", "image/jpeg")
	assert profile.document_formats.document_format_ext == ("application/pdf", "image/jpeg")
	assert profile.supported_resolutions.discrete_resolutions == (
		DiscreteResolution(100, 100),
		DiscreteResolution(300, 300),
		DiscreteResolution(600, 600),
	)
	assert profile.color_spaces == ("sRGB",)
	assert profile.ccd_channels is None

	assert platen.supported_intents == (
		Known(ScanIntent.Document),
		Known(ScanIntent.TextAndGraphic),
		Known(ScanIntent.Photo),
		Known(ScanIntent.Preview),
		Unknown("Fax"),
	)


def test_decode_adf_block(resource):
	caps = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "brother.xml")).value

	assert caps.adf.feeder_capacity == 20
	assert caps.adf.duplex_caps is None
	assert caps.adf.adf_options == (Known(AdfOption.DetectPaperLoaded), Known(AdfOption.SelectSinglePage))
	simplex = caps.adf.simplex_caps
	assert simplex.max_height == ThreeHundredthsOfInch(4200)
	assert simplex.edge_auto_detection == (Known(Edge.TopEdge), Known(Edge.LeftEdge))
	assert simplex.setting_profiles[0].content_types is None
	assert simplex.setting_profiles[0].document_formats.document_formats == ()


def test_decode_support_blocks(resource):
	caps = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "brother.xml")).value

	assert caps.sharpen_support.min == -5
	assert caps.sharpen_support.normal is None
	assert caps.compression_factor_support.normal == 50
	assert caps.stored_job_request_support is None


def test_legacy_intent_tag_decodes_like_current_tag(resource):
	decoded = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "kyocera.xml"))
	platen = decoded.value.platen.input_source_caps

	assert platen.supported_intents == (Known(ScanIntent.Document), Known(ScanIntent.Photo))
	assert decoded.unknown_inputs == ()


def test_scan_prefixed_content_type_is_accepted(resource):
	decoded = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "canon.xml"))
	profile = decoded.value.platen.input_source_caps.setting_profiles[0]

	assert profile.content_types == (
		Known(ContentType.Photo),
		Known(ContentType.Text),
		Unknown("Comic"),
	)
	assert decoded.unknown_inputs == ()


def test_unknown_element_is_recorded_and_skipped(resource):
	decoded = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "unknown_element.xml"))

	assert decoded.value.make_and_model == "HP Color LaserJet MFP M283fdw"
	assert decoded.value.platen.input_source_caps.max_width == ThreeHundredthsOfInch(2550)
	assert len(decoded.unknown_inputs) == 1
	unknown = decoded.unknown_inputs[0]
	assert unknown.kind == InputKind.ELEMENT
	assert unknown.descriptor == "ScannerCapabilities"
	assert unknown.name == "scan:eSCLConfigCap"
	assert "pwg:MakeAndModel" in unknown.candidates


def test_missing_required_element_fails():
	document = (
		'<scan:ScannerCapabilities xmlns:scan="http://schemas.hp.com/imaging/escl/2011/05/03" '
		'xmlns:pwg="http://www.pwg.org/schemas/2010/12/sm">'
		'<pwg:Version>2.63</pwg:Version>'
		'<pwg:MakeAndModel>Test</pwg:MakeAndModel>'
		'</scan:ScannerCapabilities>'
	)
	with pytest.raises(MissingElementError, match="pwg:SerialNumber"):
		ESCLXml.decode(ScannerCapabilities, document)


def test_input_source_caps_lookup(resource):
	caps = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "brother.xml")).value

	assert caps.input_source_options() == [InputSource.Platen, InputSource.Feeder]
	assert caps.input_source_caps(InputSource.Platen) is caps.platen.input_source_caps
	assert caps.input_source_caps(InputSource.Feeder) is caps.adf.simplex_caps
	with pytest.raises(LookupError):
		caps.input_source_caps(InputSource.Feeder, duplex=True)
	with pytest.raises(LookupError):
		caps.input_source_caps(InputSource.Camera)


def test_capabilities_survive_encode_decode(resource):
	caps = ESCLXml.decode(ScannerCapabilities, resource("capabilities", "brother.xml")).value
	assert ESCLXml.decode(ScannerCapabilities, ESCLXml.encode(caps)).value == caps
