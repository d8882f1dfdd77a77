"""Filesystem input/output components."""

from .storage import YamlFileStore

__all__ = ["YamlFileStore"]
