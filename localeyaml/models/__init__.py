"""Shared typed data models for localeyaml.

This package holds the node aliases and block-scalar descriptor used across
the text modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import BlockScalarHeader, YamlMapping, YamlNode

__all__ = ["BlockScalarHeader", "YamlMapping", "YamlNode"]
