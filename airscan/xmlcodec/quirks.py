# (c) Copyright Datacraft, 2026
"""Normalization of known vendor deviations from the eSCL schema.

The filter sits between the token reader and the model bindings and rewrites
element names the moment they are read. Rules are keyed on the element's
local name only and hold no state, so every pass over a document is
rewritten identically.
"""
import logging
from dataclasses import replace
from typing import Iterable, Iterator

from ..namespaces import NS_PWG, NS_SCAN
from .reader import EventType, XmlEvent

logger = logging.getLogger(__name__)

# Canon MF628Cw reports scan:ContentType instead of pwg:ContentType
PREFIX_OVERRIDES = {
	'ContentType': 'pwg',
}

NAMESPACE_OVERRIDES = {
	'ContentType': NS_PWG,
}

# Kyocera ECOSYS M5521cdn and UTAX P-C3567i list SupportedIntent children
# inside SupportedIntents
LOCAL_NAME_RENAMES = {
	'SupportedIntent': 'Intent',
}

KNOWN_NAMESPACES = (NS_SCAN, NS_PWG)


class QuirkFilteringReader:
	"""Token stream wrapper applying the vendor quirk rules."""

	def __init__(self, reader: Iterable[XmlEvent]):
		self._reader = reader

	def __iter__(self) -> Iterator[XmlEvent]:
		for event in self._reader:
			if event.type == EventType.END_DOCUMENT:
				yield event
			else:
				yield self.filter(event)

	@staticmethod
	def filter(event: XmlEvent) -> XmlEvent:
		local_name = LOCAL_NAME_RENAMES.get(event.local_name, event.local_name)
		prefix = PREFIX_OVERRIDES.get(local_name, event.prefix)
		namespace = NAMESPACE_OVERRIDES.get(local_name)
		if namespace is None:
			namespace = _normalize_namespace(event.namespace, prefix)

		if (local_name, prefix, namespace) == (event.local_name, event.prefix, event.namespace):
			return event
		return replace(event, local_name=local_name, prefix=prefix, namespace=namespace)


def _normalize_namespace(namespace: str, prefix: str) -> str:
	if namespace in KNOWN_NAMESPACES:
		return namespace
	if prefix == 'pwg':
		return NS_PWG
	return NS_SCAN
