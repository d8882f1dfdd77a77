"""Text pipeline components for the translation YAML dialect.

This package provides the shared quoting rules and the normalizer, parser,
serializer, and key sorter built on top of them.
"""

from .normalizer import YamlNormalizer
from .parser import YamlParser
from .quoting import quote_key, quote_value
from .serializer import YamlSerializer
from .sorting import sort_by_key

__all__ = [
    "YamlNormalizer",
    "YamlParser",
    "YamlSerializer",
    "quote_key",
    "quote_value",
    "sort_by_key",
]
