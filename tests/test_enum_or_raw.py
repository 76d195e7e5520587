# (c) Copyright Datacraft, 2026
"""Tests for forward compatible enumerations."""
import pytest

from airscan import Known, Unknown
from airscan.enum_or_raw import decode_enum_or_raw, encode_enum_or_raw, known_or_none
from airscan.models import ColorMode, ContentType, ScanIntent


@pytest.mark.parametrize("member", list(ScanIntent) + list(ColorMode) + list(ContentType))
def test_known_members_survive_encode_decode(member):
	encoded = encode_enum_or_raw(Known(member))
	assert encoded == member.name
	assert decode_enum_or_raw(type(member), encoded) == Known(member)


def test_unknown_value_is_preserved():
	value = decode_enum_or_raw(ScanIntent, "Fax")
	assert value == Unknown("Fax")
	assert value.as_string() == "Fax"
	assert encode_enum_or_raw(value) == "Fax"


def test_legacy_prefix_is_stripped():
	assert decode_enum_or_raw(ColorMode, "scan:RGB24") == Known(ColorMode.RGB24)


def test_unknown_value_keeps_legacy_prefix():
	assert decode_enum_or_raw(ColorMode, "scan:CMYK32") == Unknown("scan:CMYK32")


def test_match_is_case_sensitive():
	assert decode_enum_or_raw(ColorMode, "rgb24") == Unknown("rgb24")


def test_plain_member_encodes_to_its_name():
	assert encode_enum_or_raw(ScanIntent.Photo) == "Photo"


def test_known_or_none():
	assert known_or_none(Known(ScanIntent.Document)) is ScanIntent.Document
	assert known_or_none(Unknown("Fax")) is None
	assert known_or_none(None) is None
