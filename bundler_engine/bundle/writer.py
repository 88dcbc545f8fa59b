import json
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from loguru import logger

from ..errors import WriteError
from ..models import Bundle
from .schema import BundleDocument

STDOUT_MARKER = "-"


def render_bundle(bundle: Bundle, indent: int = 2) -> str:
    """Serialize a bundle into its JSON document, file contents base64-encoded."""
    document = BundleDocument(bundle=bundle)
    return json.dumps(document.model_dump(mode="json"), indent=indent)


def write_bundle(
    bundle: Bundle,
    destination: Union[str, Path, None] = None,
    stream: Optional[TextIO] = None,
    indent: int = 2,
) -> Optional[Path]:
    """Write the bundle document to a file, or to stdout.

    A destination of None or "-" sends the document to ``stream`` (stdout by
    default). Otherwise the file is created or overwritten and its path returned.
    """
    output_json = render_bundle(bundle, indent=indent)

    if destination is None or str(destination) == STDOUT_MARKER:
        stream = stream or sys.stdout
        stream.write(output_json + "\n")
        stream.flush()
        return None

    output_path = Path(destination)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(output_json)
    except OSError as e:
        raise WriteError(output_path, e.strerror or str(e)) from e

    logger.info(f"Wrote bundle to {output_path}")
    return output_path
