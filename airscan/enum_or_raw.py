# (c) Copyright Datacraft, 2026
"""Forward compatible enumerations.

Scanners report enumeration values that are newer than (or simply absent from)
the published schema. ``EnumOrRaw`` keeps such values instead of failing:
a recognized value decodes to ``Known(member)``, anything else to
``Unknown(raw)`` holding the original text.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

E = TypeVar('E', bound=Enum)

# Brother firmware prefixes some enumeration values with the namespace prefix
LEGACY_PREFIX = 'scan:'


@dataclass(frozen=True)
class Known(Generic[E]):
	value: E

	def as_string(self) -> str:
		return self.value.name


@dataclass(frozen=True)
class Unknown(Generic[E]):
	raw: str

	def as_string(self) -> str:
		return self.raw


EnumOrRaw = Union[Known[E], Unknown[E]]


def decode_enum_or_raw(enum_cls: type[E], raw: str) -> EnumOrRaw[E]:
	"""Match ``raw`` against the member names of ``enum_cls``.

	A leading ``scan:`` is stripped before matching. On a miss the original,
	unstripped string is preserved.
	"""
	cleaned = raw.removeprefix(LEGACY_PREFIX)
	member = enum_cls.__members__.get(cleaned)
	if member is not None:
		return Known(member)
	return Unknown(raw)


def encode_enum_or_raw(value: EnumOrRaw | Enum) -> str:
	# plain members are accepted for convenience
	if isinstance(value, Enum):
		return value.name
	return value.as_string()


def known_or_none(value: EnumOrRaw[E] | None) -> E | None:
	"""Return the enum member of a ``Known`` value, else None."""
	if isinstance(value, Known):
		return value.value
	return None
