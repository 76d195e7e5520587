# (c) Copyright Datacraft, 2026
"""Declarative element/attribute bindings for eSCL records.

A record is a frozen dataclass carrying an ``XML_FIELDS`` tuple. Each entry
binds one dataclass field to a namespace qualified element or attribute.
Decoding accepts children in any order; encoding writes them in the order of
``XML_FIELDS``. Elements and attributes that no binding claims are reported
to the ``DecodeContext`` and skipped.
"""
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Protocol
from xml.sax.saxutils import XMLGenerator

from ..enum_or_raw import decode_enum_or_raw, encode_enum_or_raw
from ..exceptions import MissingElementError, XmlStructureError
from ..length_units import LengthUnit, ThreeHundredthsOfInch
from ..namespaces import NS_PWG, NS_SCAN, PREFIXES
from .reader import EventType, XmlEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QName:
	namespace: str
	local_name: str

	@property
	def prefix(self) -> str:
		return PREFIXES.get(self.namespace, '')

	def __str__(self):
		if self.prefix:
			return f"{self.prefix}:{self.local_name}"
		return self.local_name


def scan(local_name: str) -> QName:
	return QName(NS_SCAN, local_name)


def pwg(local_name: str) -> QName:
	return QName(NS_PWG, local_name)


class InputKind(str, Enum):
	ELEMENT = 'element'
	ATTRIBUTE = 'attribute'
	TEXT = 'text'


@dataclass(frozen=True)
class UnknownInput:
	"""An element, attribute or text node no binding expected."""
	kind: InputKind
	descriptor: str
	name: str | None
	candidates: tuple[str, ...]

	def __str__(self):
		return f"UnknownInput({self.kind.value}, {self.name})"


class DecodeContext:
	"""Collects unknown input seen during a single decode call."""

	def __init__(self):
		self.unknown: list[UnknownInput] = []

	def report(self, kind: InputKind, descriptor: str, name: str | None, candidates: tuple[str, ...]):
		logger.debug("Ignoring unknown %s %s in %s", kind.value, name, descriptor)
		self.unknown.append(UnknownInput(kind, descriptor, name, candidates))


# --- Text value codecs ---

class ValueCodec(Protocol):
	def decode(self, text: str) -> Any: ...

	def encode(self, value: Any) -> str: ...


class StringCodec:
	def decode(self, text: str) -> str:
		return text

	def encode(self, value: str) -> str:
		return value


class IntCodec:
	"""Integer text; unsigned unless ``signed`` is set."""

	def __init__(self, signed: bool = False):
		self.signed = signed

	def decode(self, text: str) -> int:
		value = int(text.strip())
		if not self.signed and value < 0:
			raise ValueError(f"expected an unsigned integer, got {text!r}")
		return value

	def encode(self, value: int) -> str:
		return str(value)


class BoolCodec:
	def decode(self, text: str) -> bool:
		normalized = text.strip().lower()
		if normalized in ('true', '1'):
			return True
		if normalized in ('false', '0'):
			return False
		raise ValueError(f"expected a boolean, got {text!r}")

	def encode(self, value: bool) -> str:
		return 'true' if value else 'false'


class UuidCodec:
	def decode(self, text: str) -> uuid.UUID:
		return uuid.UUID(text.strip())

	def encode(self, value: uuid.UUID) -> str:
		return str(value)


class LengthCodec:
	"""Lengths travel as device units (1/300 inch)."""

	def decode(self, text: str) -> ThreeHundredthsOfInch:
		return ThreeHundredthsOfInch(int(text.strip()))

	def encode(self, value: LengthUnit) -> str:
		return str(value.to_three_hundredths_of_inch().value)


class EnumCodec:
	"""Strict enumeration: unknown names fail the decode."""

	def __init__(self, enum_cls: type[Enum]):
		self.enum_cls = enum_cls

	def decode(self, text: str) -> Enum:
		member = self.enum_cls.__members__.get(text.strip())
		if member is None:
			raise ValueError(f"{text!r} is not a valid {self.enum_cls.__name__}")
		return member

	def encode(self, value: Enum) -> str:
		return value.name


class EnumOrRawCodec:
	def __init__(self, enum_cls: type[Enum]):
		self.enum_cls = enum_cls

	def decode(self, text: str):
		return decode_enum_or_raw(self.enum_cls, text.strip())

	def encode(self, value) -> str:
		return encode_enum_or_raw(value)


STRING = StringCodec()
UINT = IntCodec()
INT = IntCodec(signed=True)
BOOL = BoolCodec()
UUID = UuidCodec()
LENGTH = LengthCodec()


# --- Bindings ---

@dataclass(frozen=True)
class Binding:
	field: str | None
	name: QName
	required: bool = False


@dataclass(frozen=True)
class Value(Binding):
	"""Child element holding a single text value."""
	codec: ValueCodec = STRING


@dataclass(frozen=True)
class Attribute(Binding):
	codec: ValueCodec = STRING


@dataclass(frozen=True)
class Record(Binding):
	"""Child element decoded as a nested record."""
	record: type | None = None


@dataclass(frozen=True)
class ListOf(Binding):
	"""Repeated child elements, optionally inside a wrapper element.

	With ``wrapped`` set, ``name`` is the wrapper and ``item`` the repeated
	child; otherwise ``name`` itself repeats. Items are text values decoded
	with ``codec`` or, when ``record`` is set, nested records.
	"""
	item: QName | None = None
	codec: ValueCodec = STRING
	record: type | None = None
	wrapped: bool = True


@dataclass(frozen=True)
class Constant(Binding):
	"""Fixed text element written on every encode and accepted on decode."""
	text: str = ''


class ElementCodec(Protocol):
	def decode(self, start: XmlEvent, events: Iterator[XmlEvent], ctx: DecodeContext) -> Any: ...

	def encode(self, writer: "XmlWriter", value: Any, name: QName) -> None: ...


@dataclass(frozen=True)
class Custom(Binding):
	"""Child element handled by a hand-written codec."""
	codec: ElementCodec | None = None


# --- Decoding ---

def _key(namespace: str, local_name: str) -> tuple[str, str]:
	return namespace, local_name


def _descriptor(cls: type) -> str:
	return cls.__name__


def skip_element(start: XmlEvent, events: Iterator[XmlEvent]) -> None:
	"""Consume tokens up to and including the end tag of ``start``."""
	for event in events:
		if event.type == EventType.END_ELEMENT and event.depth == start.depth:
			return
		if event.type == EventType.END_DOCUMENT:
			raise XmlStructureError(
				f"document ended inside {start.qualified_name}",
				start.qualified_name,
				event.position,
			)
	raise XmlStructureError(f"token stream ended inside {start.qualified_name}", start.qualified_name, start.position)


def read_text(start: XmlEvent, events: Iterator[XmlEvent], ctx: DecodeContext, descriptor: str) -> str:
	"""Read the text content of a leaf element, consuming its end tag."""
	parts = []
	for event in events:
		if event.type == EventType.TEXT and event.depth == start.depth:
			parts.append(event.text)
		elif event.type == EventType.START_ELEMENT:
			ctx.report(InputKind.ELEMENT, descriptor, event.qualified_name, ())
			skip_element(event, events)
		elif event.type == EventType.END_ELEMENT and event.depth == start.depth:
			return ''.join(parts)
		elif event.type == EventType.END_DOCUMENT:
			raise XmlStructureError(
				f"document ended inside {start.qualified_name}",
				start.qualified_name,
				event.position,
			)
	raise XmlStructureError(f"token stream ended inside {start.qualified_name}", start.qualified_name, start.position)


def _decode_list(binding: ListOf, start: XmlEvent, events: Iterator[XmlEvent], ctx: DecodeContext, descriptor: str) -> list:
	items = []
	for event in events:
		if event.type == EventType.END_ELEMENT and event.depth == start.depth:
			return items
		if event.type == EventType.END_DOCUMENT:
			raise XmlStructureError(
				f"document ended inside {start.qualified_name}",
				start.qualified_name,
				event.position,
			)
		if event.type == EventType.TEXT:
			ctx.report(InputKind.TEXT, descriptor, start.qualified_name, (str(binding.item),))
			continue
		if event.type != EventType.START_ELEMENT:
			continue
		if _key(event.namespace, event.local_name) != _key(binding.item.namespace, binding.item.local_name):
			ctx.report(InputKind.ELEMENT, descriptor, event.qualified_name, (str(binding.item),))
			skip_element(event, events)
			continue
		items.append(_decode_item(binding, event, events, ctx, descriptor))
	raise XmlStructureError(f"token stream ended inside {start.qualified_name}", start.qualified_name, start.position)


def _decode_item(binding: ListOf, event: XmlEvent, events: Iterator[XmlEvent], ctx: DecodeContext, descriptor: str):
	if binding.record is not None:
		return decode_record(binding.record, event, events, ctx)
	return binding.codec.decode(read_text(event, events, ctx, descriptor))


def decode_record(cls: type, start: XmlEvent, events: Iterator[XmlEvent], ctx: DecodeContext):
	"""Decode the element opened by ``start`` into an instance of ``cls``.

	Consumes tokens up to and including the matching end tag.
	"""
	descriptor = _descriptor(cls)
	bindings: tuple[Binding, ...] = cls.XML_FIELDS
	elements: dict[tuple[str, str], Binding] = {}
	attributes: dict[str, Attribute] = {}
	for binding in bindings:
		if isinstance(binding, Attribute):
			attributes[binding.name.local_name] = binding
		else:
			elements[_key(binding.name.namespace, binding.name.local_name)] = binding
	expected = tuple(str(b.name) for b in bindings if not isinstance(b, Attribute))

	values: dict[str, Any] = {}
	seen: set[Binding] = set()

	for attribute in start.attributes:
		binding = attributes.get(attribute.local_name)
		if binding is None:
			ctx.report(InputKind.ATTRIBUTE, descriptor, attribute.local_name, tuple(attributes))
			continue
		values[binding.field] = binding.codec.decode(attribute.value)
		seen.add(binding)

	for event in events:
		if event.type == EventType.END_ELEMENT and event.depth == start.depth:
			break
		if event.type == EventType.END_DOCUMENT:
			raise XmlStructureError(
				f"document ended inside {start.qualified_name}",
				start.qualified_name,
				event.position,
			)
		if event.type == EventType.TEXT:
			ctx.report(InputKind.TEXT, descriptor, start.qualified_name, expected)
			continue
		if event.type != EventType.START_ELEMENT:
			continue

		binding = elements.get(_key(event.namespace, event.local_name))
		if binding is None:
			ctx.report(InputKind.ELEMENT, descriptor, event.qualified_name, expected)
			skip_element(event, events)
			continue

		seen.add(binding)
		if isinstance(binding, Value):
			values[binding.field] = binding.codec.decode(read_text(event, events, ctx, descriptor))
		elif isinstance(binding, Record):
			values[binding.field] = decode_record(binding.record, event, events, ctx)
		elif isinstance(binding, ListOf):
			if binding.wrapped:
				values[binding.field] = tuple(_decode_list(binding, event, events, ctx, descriptor))
			else:
				items = values.get(binding.field, ())
				values[binding.field] = items + (_decode_item(binding, event, events, ctx, descriptor),)
		elif isinstance(binding, Custom):
			values[binding.field] = binding.codec.decode(event, events, ctx)
		elif isinstance(binding, Constant):
			read_text(event, events, ctx, descriptor)
		else:
			skip_element(event, events)
	else:
		raise XmlStructureError(f"token stream ended inside {start.qualified_name}", start.qualified_name, start.position)

	for binding in bindings:
		if binding.required and binding not in seen and not isinstance(binding, Constant):
			raise MissingElementError(descriptor, str(binding.name))

	return cls(**values)


# --- Encoding ---

class XmlWriter:
	"""Namespace aware streaming writer."""

	def __init__(self, out):
		self._generator = XMLGenerator(out, encoding='utf-8', short_empty_elements=False)
		self._declared = False

	def start_document(self) -> None:
		self._generator.startDocument()

	def end_document(self) -> None:
		self._generator.endDocument()

	def start_element(self, name: QName, attributes: dict[QName, str] | None = None) -> None:
		if not self._declared:
			# both prefixes are declared on the root element
			self._generator.startPrefixMapping('scan', NS_SCAN)
			self._generator.startPrefixMapping('pwg', NS_PWG)
			self._declared = True
		attrs = {
			(attr_name.namespace or None, attr_name.local_name): value
			for attr_name, value in (attributes or {}).items()
		}
		self._generator.startElementNS((name.namespace, name.local_name), None, attrs)

	def end_element(self, name: QName) -> None:
		self._generator.endElementNS((name.namespace, name.local_name), None)

	def text(self, content: str) -> None:
		self._generator.characters(content)

	def leaf(self, name: QName, content: str) -> None:
		self.start_element(name)
		self.text(content)
		self.end_element(name)


def encode_record(writer: XmlWriter, value: Any, name: QName) -> None:
	"""Write ``value`` as the element ``name`` following its ``XML_FIELDS``."""
	bindings: tuple[Binding, ...] = type(value).XML_FIELDS
	attributes = {}
	for binding in bindings:
		if isinstance(binding, Attribute):
			attr_value = getattr(value, binding.field)
			if attr_value is not None:
				attributes[binding.name] = binding.codec.encode(attr_value)

	writer.start_element(name, attributes)
	for binding in bindings:
		if isinstance(binding, Attribute):
			continue
		if isinstance(binding, Constant):
			writer.leaf(binding.name, binding.text)
			continue

		field_value = getattr(value, binding.field)
		if field_value is None:
			continue
		if isinstance(binding, Value):
			writer.leaf(binding.name, binding.codec.encode(field_value))
		elif isinstance(binding, Record):
			encode_record(writer, field_value, binding.name)
		elif isinstance(binding, ListOf):
			_encode_list(writer, binding, field_value)
		elif isinstance(binding, Custom):
			binding.codec.encode(writer, field_value, binding.name)
	writer.end_element(name)


def _encode_list(writer: XmlWriter, binding: ListOf, items) -> None:
	if not items and not binding.required:
		return
	if binding.wrapped:
		writer.start_element(binding.name)
	item_name = binding.item if binding.wrapped else binding.name
	for item in items:
		if binding.record is not None:
			encode_record(writer, item, item_name)
		else:
			writer.leaf(item_name, binding.codec.encode(item))
	if binding.wrapped:
		writer.end_element(binding.name)
