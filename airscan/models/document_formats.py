# (c) Copyright Datacraft, 2026
"""DocumentFormats: the legacy and extended format lists of a setting profile.

Legacy documents interleave ``pwg:DocumentFormat`` and
``scan:DocumentFormatExt`` children freely, so this element is handled by a
hand-written codec instead of the declarative bindings.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ..exceptions import XmlStructureError
from ..xmlcodec.binding import DecodeContext, QName, XmlWriter, pwg, scan
from ..xmlcodec.reader import EventType, XmlEvent

DOCUMENT_FORMAT = pwg('DocumentFormat')
DOCUMENT_FORMAT_EXT = scan('DocumentFormatExt')


@dataclass(frozen=True)
class DocumentFormats:
	document_formats: tuple[str, ...] = ()
	document_format_ext: tuple[str, ...] = ()

	@property
	def all_formats(self) -> tuple[str, ...]:
		"""Every advertised MIME type, extended list first, without duplicates."""
		return tuple(dict.fromkeys(self.document_format_ext + self.document_formats))


class FormatKind(str, Enum):
	LEGACY = 'legacy'
	EXT = 'ext'


class DocumentFormatsCodec:
	"""Element codec for ``scan:DocumentFormats``."""

	def decode(self, start: XmlEvent, events: Iterator[XmlEvent], ctx: DecodeContext) -> DocumentFormats:
		if start.local_name != 'DocumentFormats':
			raise XmlStructureError(
				f"expected a DocumentFormats element, got {start.qualified_name}",
				start.qualified_name,
				start.position,
			)

		legacy: list[str] = []
		ext: list[str] = []
		depth = 0
		current: FormatKind | None = None

		for event in events:
			if event.type == EventType.START_ELEMENT:
				depth += 1
				if depth > 1:
					raise XmlStructureError(
						f"unexpected depth {depth} in DocumentFormats",
						event.qualified_name,
						event.position,
					)
				if event.local_name == 'DocumentFormat':
					current = FormatKind.LEGACY
				elif event.local_name == 'DocumentFormatExt':
					current = FormatKind.EXT
				elif event.local_name == 'DocumentFormats':
					raise XmlStructureError(
						"duplicate DocumentFormats element",
						event.qualified_name,
						event.position,
					)
				else:
					raise XmlStructureError(
						f"unexpected element {event.qualified_name} in DocumentFormats",
						event.qualified_name,
						event.position,
					)
			elif event.type == EventType.END_ELEMENT:
				if depth == 0:
					if event.local_name != 'DocumentFormats':
						raise XmlStructureError(
							f"unexpected end of {event.qualified_name} in DocumentFormats",
							event.qualified_name,
							event.position,
						)
					return DocumentFormats(tuple(legacy), tuple(ext))
				current = None
				depth -= 1
			elif event.type == EventType.TEXT:
				if current is FormatKind.LEGACY:
					legacy.append(event.text)
				elif current is FormatKind.EXT:
					ext.append(event.text)
				else:
					raise XmlStructureError(
						"text outside of a DocumentFormat element",
						event.qualified_name,
						event.position,
					)
			elif event.type == EventType.END_DOCUMENT:
				raise XmlStructureError(
					"document ended inside DocumentFormats",
					start.qualified_name,
					event.position,
				)

		raise XmlStructureError("token stream ended inside DocumentFormats", start.qualified_name, start.position)

	def encode(self, writer: XmlWriter, value: DocumentFormats, name: QName) -> None:
		writer.start_element(name)
		for document_format in value.document_formats:
			writer.leaf(DOCUMENT_FORMAT, document_format)
		for document_format in value.document_format_ext:
			writer.leaf(DOCUMENT_FORMAT_EXT, document_format)
		writer.end_element(name)
