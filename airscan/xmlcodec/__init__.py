# (c) Copyright Datacraft, 2026
"""XML codec for eSCL documents.

Decoding runs ``XmlStreamReader`` -> ``QuirkFilteringReader`` -> record
bindings. Encoding writes records through ``XmlWriter``.
"""
import io
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..exceptions import XmlStructureError
from .binding import (
	DecodeContext,
	QName,
	UnknownInput,
	XmlWriter,
	decode_record,
	encode_record,
	pwg,
	scan,
)
from .quirks import QuirkFilteringReader
from .reader import EventType, XmlEvent, XmlStreamReader

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class Decoded(Generic[T]):
	"""A decoded record and the unknown input met while decoding it."""
	value: T
	unknown_inputs: tuple[UnknownInput, ...] = ()


class ESCLXml:
	"""Entry points for decoding and encoding eSCL records."""

	@staticmethod
	def decode(record_type: type[T], source: str | bytes) -> Decoded[T]:
		root_name: QName = record_type.XML_ROOT
		ctx = DecodeContext()
		events = iter(QuirkFilteringReader(XmlStreamReader(source)))

		root = next(events)
		if root.type != EventType.START_ELEMENT:
			raise XmlStructureError("document has no root element", None, root.position)
		if (root.namespace, root.local_name) != (root_name.namespace, root_name.local_name):
			raise XmlStructureError(
				f"expected root element {root_name}, found {root.qualified_name}",
				root.qualified_name,
				root.position,
			)

		value = decode_record(record_type, root, events, ctx)

		for event in events:
			if event.type == EventType.END_DOCUMENT:
				break
			raise XmlStructureError(
				f"unexpected content after {root_name}",
				event.qualified_name,
				event.position,
			)

		if ctx.unknown:
			logger.debug("Decoded %s with %d unknown input(s)", record_type.__name__, len(ctx.unknown))
		return Decoded(value, tuple(ctx.unknown))

	@staticmethod
	def encode(value, xml_declaration: bool = True) -> str:
		out = io.StringIO()
		writer = XmlWriter(out)
		if xml_declaration:
			writer.start_document()
		encode_record(writer, value, type(value).XML_ROOT)
		writer.end_document()
		return out.getvalue()


__all__ = [
	'Decoded',
	'ESCLXml',
	'EventType',
	'QName',
	'QuirkFilteringReader',
	'UnknownInput',
	'XmlEvent',
	'XmlStreamReader',
	'pwg',
	'scan',
]
