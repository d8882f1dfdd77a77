"""Key sorting for parsed translation mappings."""

from __future__ import annotations

from typing import Mapping

from ..models.datatypes import YamlMapping
from .quoting import DOUBLE_QUOTE, SINGLE_QUOTE


def sort_key(key: object) -> str:
    """Return the case-insensitive, quote-insensitive comparison form of a key."""

    return str(key).lower().replace(DOUBLE_QUOTE, "").strip(SINGLE_QUOTE)


def sort_by_key(mapping: Mapping[str, object], recursive: bool = False) -> YamlMapping:
    """Return a new mapping with keys ordered by `sort_key`.

    Args:
        mapping: Mapping to sort; it is not modified.
        recursive: Whether nested mappings are sorted too. Once a nested
            mapping is entered, sorting applies all the way down.
    """

    ordered: YamlMapping = {}
    for key in sorted(mapping, key=sort_key):
        value = mapping[key]
        if recursive and isinstance(value, Mapping):
            value = sort_by_key(value, True)
        ordered[key] = value
    return ordered
