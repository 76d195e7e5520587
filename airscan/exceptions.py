# (c) Copyright Datacraft, 2026
"""Exceptions raised by the eSCL codec layer."""


class ESCLError(Exception):
	"""Base exception for the airscan library."""


class ESCLXmlError(ESCLError):
	"""Raised when an eSCL XML document cannot be decoded."""


class XmlStructureError(ESCLXmlError):
	"""Raised when the element structure of a document is invalid."""

	def __init__(self, message: str, tag: str | None = None, position: str | None = None):
		self.tag = tag
		self.position = position
		if position:
			message = f"{message} ({position})"
		super().__init__(message)


class MissingElementError(ESCLXmlError):
	"""Raised when a required child element is absent."""

	def __init__(self, descriptor: str, name: str):
		self.descriptor = descriptor
		self.name = name
		super().__init__(f"{descriptor}: required element {name} not found")
