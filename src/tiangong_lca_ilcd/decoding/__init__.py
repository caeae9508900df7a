"""Decoding of ILCD XML documents into data set models."""

from .bindings import Binding, FieldRule
from .pipeline import decode_bytes, decode_element, decode_entry, read_entry
from .schemas import DOCUMENT_BINDINGS, binding_for

__all__ = [
    "Binding",
    "DOCUMENT_BINDINGS",
    "FieldRule",
    "binding_for",
    "decode_bytes",
    "decode_element",
    "decode_entry",
    "read_entry",
]
