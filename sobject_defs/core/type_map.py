"""
type_map.py — Map Salesforce field types to Apex stub types.

Lookup tables only.  ``map_to_stub_type`` never raises: an unknown remote type
degrades to ``Object`` so one new field type cannot fail a whole stub.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

STRING_TYPES: frozenset[str] = frozenset({
    "id", "string", "email", "phone", "url", "textarea",
    "picklist", "multipicklist", "combobox", "encryptedstring",
})

DOUBLE_TYPES: frozenset[str] = frozenset({"double", "currency", "percent"})

EXACT_TYPES: Mapping[str, str] = MappingProxyType({
    "int": "Integer",
    "boolean": "Boolean",
    "date": "Date",
    "datetime": "Datetime",
    "time": "Time",
    "location": "Location",
    "address": "Address",
    "base64": "Blob",
})

REFERENCE_TYPE = "reference"
REFERENCE_FALLBACK = "Id"
DEFAULT_TYPE = "Object"


def map_to_stub_type(type_tag: str | None, reference_to: Iterable[str] = ()) -> str:
    """Return the Apex type used to declare a field in a stub class.

    Args:
        type_tag: Remote field type (e.g. ``currency``), compared lower-case.
        reference_to: Target SObjects of a ``reference`` field, in describe order.

    Returns:
        ``String``, ``Double``, an exact-match type, the first reference
        target, ``Id`` for an untargeted reference, or ``Object``.
    """
    tag = (type_tag or "").lower()
    if tag in STRING_TYPES:
        return "String"
    if tag in DOUBLE_TYPES:
        return "Double"
    if tag == REFERENCE_TYPE:
        return next(iter(reference_to), REFERENCE_FALLBACK)
    return EXACT_TYPES.get(tag, DEFAULT_TYPE)
