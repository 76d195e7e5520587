# (c) Copyright Datacraft, 2026
"""Physical length units used by eSCL capabilities and settings.

eSCL expresses every length in three hundredths of an inch ("device units").
All units convert into each other; conversions into device units round half up.
Two lengths compare equal when they normalize to the same number of device units.
"""
import math
from dataclasses import dataclass

MILLIMETERS_PER_INCH = 25.4
POINTS_PER_INCH = 72.0
THREE_HUNDREDTHS_INCHES_PER_INCH = 300.0
THREE_HUNDREDTHS_INCHES_PER_MM = THREE_HUNDREDTHS_INCHES_PER_INCH / MILLIMETERS_PER_INCH


def _round_half_up(value: float) -> int:
	return int(math.floor(value + 0.5))


class LengthUnit:
	"""Base class of all length units."""

	__slots__ = ()

	def to_inches(self) -> "Inches":
		raise NotImplementedError

	def to_millimeters(self) -> "Millimeters":
		raise NotImplementedError

	def to_points(self) -> "Points":
		raise NotImplementedError

	def to_three_hundredths_of_inch(self) -> "ThreeHundredthsOfInch":
		raise NotImplementedError

	def equals_length(self, other: "LengthUnit | None") -> bool:
		if other is None:
			return False
		return self.to_three_hundredths_of_inch().value == other.to_three_hundredths_of_inch().value

	def __eq__(self, other):
		if not isinstance(other, LengthUnit):
			return NotImplemented
		return self.equals_length(other)

	def __hash__(self):
		return hash(self.to_three_hundredths_of_inch().value)


@dataclass(frozen=True, eq=False)
class Inches(LengthUnit):
	value: float

	def to_inches(self) -> "Inches":
		return self

	def to_millimeters(self) -> "Millimeters":
		return Millimeters(self.value * MILLIMETERS_PER_INCH)

	def to_points(self) -> "Points":
		return Points(self.value * POINTS_PER_INCH)

	def to_three_hundredths_of_inch(self) -> "ThreeHundredthsOfInch":
		return ThreeHundredthsOfInch(_round_half_up(self.value * THREE_HUNDREDTHS_INCHES_PER_INCH))


@dataclass(frozen=True, eq=False)
class Millimeters(LengthUnit):
	value: float

	def to_inches(self) -> Inches:
		return Inches(self.value / MILLIMETERS_PER_INCH)

	def to_millimeters(self) -> "Millimeters":
		return self

	def to_points(self) -> "Points":
		return self.to_inches().to_points()

	def to_three_hundredths_of_inch(self) -> "ThreeHundredthsOfInch":
		return ThreeHundredthsOfInch(_round_half_up(self.value * THREE_HUNDREDTHS_INCHES_PER_MM))


@dataclass(frozen=True, eq=False)
class ThreeHundredthsOfInch(LengthUnit):
	"""The native eSCL length unit (1/300 inch)."""
	value: int

	def __post_init__(self):
		if not isinstance(self.value, int) or isinstance(self.value, bool):
			raise TypeError(f"device units must be an integer, got {self.value!r}")
		if self.value < 0:
			raise ValueError(f"device units must not be negative, got {self.value}")

	def to_inches(self) -> Inches:
		return Inches(self.value / THREE_HUNDREDTHS_INCHES_PER_INCH)

	def to_millimeters(self) -> Millimeters:
		return Millimeters(self.value / THREE_HUNDREDTHS_INCHES_PER_MM)

	def to_points(self) -> "Points":
		return self.to_inches().to_points()

	def to_three_hundredths_of_inch(self) -> "ThreeHundredthsOfInch":
		return self


DeviceUnits = ThreeHundredthsOfInch


@dataclass(frozen=True, eq=False)
class Points(LengthUnit):
	value: float

	def to_inches(self) -> Inches:
		return Inches(self.value / POINTS_PER_INCH)

	def to_millimeters(self) -> Millimeters:
		return self.to_inches().to_millimeters()

	def to_points(self) -> "Points":
		return self

	def to_three_hundredths_of_inch(self) -> ThreeHundredthsOfInch:
		return self.to_inches().to_three_hundredths_of_inch()


def inches(value: float) -> Inches:
	return Inches(float(value))


def millimeters(value: float) -> Millimeters:
	return Millimeters(float(value))


def points(value: float) -> Points:
	return Points(float(value))


def three_hundredths_of_inch(value: int) -> ThreeHundredthsOfInch:
	return ThreeHundredthsOfInch(int(value))
