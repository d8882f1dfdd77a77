"""Top-level package for localeyaml.

This package normalizes, parses, and serializes the restricted YAML dialect
used by application translation files. The entry points are `clean`, `parse`,
and `dump`; `LocaleYamlPipeline` exposes the same workflows with stage-aware
errors.
"""

from .pipeline import LocaleYamlPipeline, clean, dump, parse

__all__ = ["LocaleYamlPipeline", "clean", "dump", "parse", "__version__"]

__version__ = "0.1.0"
