"""
Static asset bundler engine.

Scans a directory tree and packs every eligible file into a single JSON bundle.
"""

from .bundle import render_bundle, write_bundle
from .errors import BundlerError, ScanError, WriteError
from .models import Bundle, BundleEntry
from .scanner import IGNORED_EXTENSIONS, build_bundle, is_eligible

__all__ = [
    "Bundle",
    "BundleEntry",
    "BundlerError",
    "IGNORED_EXTENSIONS",
    "ScanError",
    "WriteError",
    "build_bundle",
    "is_eligible",
    "render_bundle",
    "write_bundle",
]
