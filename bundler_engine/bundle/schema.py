"""Bundle document schema - contract between the bundler and the server that loads it."""

from pydantic import BaseModel

from ..models import Bundle


class BundleDocument(BaseModel):
    """Top-level JSON envelope: ``{"bundle": {"files": [...]}}``."""

    bundle: Bundle
