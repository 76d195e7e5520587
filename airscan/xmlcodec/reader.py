# (c) Copyright Datacraft, 2026
"""Pull-style token reader over ElementTree.

``XmlStreamReader`` turns a document into a flat stream of ``XmlEvent``
tokens (element start/end, text, end of document). Every iteration re-parses
the source, so a reader can be walked any number of times.
"""
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class EventType(str, Enum):
	START_ELEMENT = 'start_element'
	END_ELEMENT = 'end_element'
	TEXT = 'text'
	END_DOCUMENT = 'end_document'


@dataclass(frozen=True)
class XmlAttribute:
	namespace: str
	local_name: str
	value: str


@dataclass(frozen=True)
class XmlEvent:
	"""One token of an XML document.

	``depth`` is the nesting level of the element the token belongs to
	(the root element has depth 1). ``position`` describes where the token
	was read, for error messages.
	"""
	type: EventType
	namespace: str = ''
	local_name: str = ''
	prefix: str = ''
	attributes: tuple[XmlAttribute, ...] = field(default=())
	text: str = ''
	depth: int = 0
	position: str = ''

	@property
	def qualified_name(self) -> str:
		if self.prefix:
			return f"{self.prefix}:{self.local_name}"
		return self.local_name


def split_tag(tag: str) -> tuple[str, str]:
	"""Split an ElementTree ``{uri}local`` tag into (uri, local)."""
	if tag.startswith('{'):
		uri, _, local = tag[1:].partition('}')
		return uri, local
	return '', tag


class XmlStreamReader:
	"""Iterable token stream over an XML document."""

	def __init__(self, source: str | bytes):
		self._source = source

	def __iter__(self) -> Iterator[XmlEvent]:
		parser = ET.XMLPullParser(events=('start', 'end', 'start-ns', 'end-ns'))
		parser.feed(self._source)
		parser.close()

		# prefix declarations in scope, innermost last
		scopes: list[dict[str, str]] = []
		pending: dict[str, str] = {}
		path: list[str] = []
		count = 0

		for kind, payload in parser.read_events():
			if kind == 'start-ns':
				prefix, uri = payload
				pending[uri] = prefix
				continue
			if kind == 'end-ns':
				continue

			count += 1
			uri, local = split_tag(payload.tag)

			if kind == 'start':
				scopes.append(pending)
				pending = {}
				prefix = self._lookup_prefix(scopes, uri)
				path.append(f"{prefix}:{local}" if prefix else local)
				attributes = tuple(
					XmlAttribute(*split_tag(name), value)
					for name, value in payload.attrib.items()
				)
				yield XmlEvent(
					EventType.START_ELEMENT,
					namespace=uri,
					local_name=local,
					prefix=prefix,
					attributes=attributes,
					depth=len(path),
					position=self._position(count, path),
				)
			else:
				prefix = self._lookup_prefix(scopes, uri)
				text = payload.text
				if text is not None and text.strip():
					yield XmlEvent(
						EventType.TEXT,
						namespace=uri,
						local_name=local,
						prefix=prefix,
						text=text.strip(),
						depth=len(path),
						position=self._position(count, path),
					)
				yield XmlEvent(
					EventType.END_ELEMENT,
					namespace=uri,
					local_name=local,
					prefix=prefix,
					depth=len(path),
					position=self._position(count, path),
				)
				path.pop()
				scopes.pop()
				# release the subtree, only the current branch is ever needed
				payload.clear()

		yield XmlEvent(EventType.END_DOCUMENT, position=f"event {count + 1} at end of document")

	@staticmethod
	def _lookup_prefix(scopes: list[dict[str, str]], uri: str) -> str:
		if not uri:
			return ''
		for scope in reversed(scopes):
			if uri in scope:
				return scope[uri]
		return ''

	@staticmethod
	def _position(count: int, path: list[str]) -> str:
		return f"event {count} at /{'/'.join(path)}"
