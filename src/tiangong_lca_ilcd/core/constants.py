"""ILCD format constants shared across the reader."""

from __future__ import annotations

XML_NS = "http://www.w3.org/XML/1998/namespace"

# Attribute key produced by ElementTree for ``xml:lang``.
XML_LANG_ATTRIBUTE = f"{{{XML_NS}}}lang"

XML_SUFFIX = ".xml"
