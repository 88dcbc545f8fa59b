from .schema import BundleDocument
from .writer import STDOUT_MARKER, render_bundle, write_bundle

__all__ = ["BundleDocument", "STDOUT_MARKER", "render_bundle", "write_bundle"]
