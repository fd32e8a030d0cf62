"""
Data Models Layer.

This package defines the validated configuration and the value types passed
between the locator, resolver and transcoder.
"""

from .config import ReplacerConfig
from .source import ResolvedSource, SourceKind, SourceReference

__all__ = ["ReplacerConfig", "ResolvedSource", "SourceKind", "SourceReference"]
