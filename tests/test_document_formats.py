# (c) Copyright Datacraft, 2026
"""Tests for the DocumentFormats element codec."""
import io

import pytest

from airscan import XmlStructureError
from airscan.models import DocumentFormats, DocumentFormatsCodec
from airscan.xmlcodec import QuirkFilteringReader, XmlStreamReader, scan
from airscan.xmlcodec.binding import DecodeContext, XmlWriter

NAMESPACES = (
	'xmlns:scan="http://schemas.hp.com/imaging/escl/2011/05/03" '
	'xmlns:pwg="http://www.pwg.org/schemas/2010/12/sm"'
)


def decode(body: str) -> DocumentFormats:
	document = f"<scan:DocumentFormats {NAMESPACES}>{body}</scan:DocumentFormats>"
	events = iter(QuirkFilteringReader(XmlStreamReader(document)))
	start = next(events)
	return DocumentFormatsCodec().decode(start, events, DecodeContext())


def test_interleaved_formats_are_split_by_element():
	formats = decode(
		"<pwg:DocumentFormat>application/pdf</pwg:DocumentFormat>"
		"<scan:DocumentFormatExt>application/pdf</scan:DocumentFormatExt>"
		"<pwg:DocumentFormat>image/jpeg</pwg:DocumentFormat>"
		"<scan:DocumentFormatExt>image/png</scan:DocumentFormatExt>"
	)
	assert formats.document_formats == ("application/pdf", "image/jpeg")
	assert formats.document_format_ext == ("application/pdf", "image/png")
	assert formats.all_formats == ("application/pdf", "image/png", "image/jpeg")


def test_extended_list_alone_is_accepted():
	formats = decode("<scan:DocumentFormatExt>image/jpeg</scan:DocumentFormatExt>")
	assert formats == DocumentFormats((), ("image/jpeg",))


def test_empty_element():
	assert decode("") == DocumentFormats()


def test_nested_element_is_rejected():
	with pytest.raises(XmlStructureError) as exc_info:
		decode("<pwg:DocumentFormat><scan:Inner>x</scan:Inner></pwg:DocumentFormat>")
	assert exc_info.value.tag == "scan:Inner"
	assert "/scan:DocumentFormats/pwg:DocumentFormat/scan:Inner" in exc_info.value.position


def test_unexpected_child_is_rejected():
	with pytest.raises(XmlStructureError) as exc_info:
		decode("<scan:ColorMode>RGB24</scan:ColorMode>")
	assert exc_info.value.tag == "scan:ColorMode"


def test_duplicate_container_is_rejected():
	with pytest.raises(XmlStructureError, match="duplicate"):
		decode("<scan:DocumentFormats></scan:DocumentFormats>")


def test_text_outside_child_is_rejected():
	with pytest.raises(XmlStructureError):
		decode("image/jpeg")


def test_encode_writes_both_lists():
	out = io.StringIO()
	writer = XmlWriter(out)
	DocumentFormatsCodec().encode(
		writer,
		DocumentFormats(("image/jpeg",), ("application/pdf",)),
		scan("DocumentFormats"),
	)
	assert out.getvalue() == (
		f"<scan:DocumentFormats {NAMESPACES}>"
		"<pwg:DocumentFormat>image/jpeg</pwg:DocumentFormat>"
		"<scan:DocumentFormatExt>application/pdf</scan:DocumentFormatExt>"
		"</scan:DocumentFormats>"
	)
