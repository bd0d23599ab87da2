"""
RDF Utilities for rdfbridge

Base URL validation and content-type resolution shared by the parsing and
serialization layers.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import AnyUrl

from .errors import InvalidBase

logger = logging.getLogger(__name__)

# A base URL is a validated absolute URL value, never a bare string.
BaseUrl = AnyUrl


class RDFContentType(Enum):
    """Supported RDF content types."""
    TURTLE = "text/turtle"
    JSON_LD = "application/ld+json"
    NQUADS = "application/n-quads"

    @classmethod
    def from_media_type(cls, media_type: Optional[str]) -> "RDFContentType":
        """Resolve a media type string, ignoring parameters and case.

        JSON-LD and N-Quads are recognized; anything else is treated as Turtle.
        """
        if isinstance(media_type, RDFContentType):
            return media_type
        if not media_type:
            return cls.TURTLE
        essence = media_type.split(';', 1)[0].strip().lower()
        if essence == cls.JSON_LD.value:
            return cls.JSON_LD
        if essence in (cls.NQUADS.value, 'application/nquads'):
            return cls.NQUADS
        return cls.TURTLE


_EXTENSION_CONTENT_TYPES = {
    '.ttl': RDFContentType.TURTLE,
    '.turtle': RDFContentType.TURTLE,
    '.nt': RDFContentType.TURTLE,
    '.jsonld': RDFContentType.JSON_LD,
    '.json': RDFContentType.JSON_LD,
    '.nq': RDFContentType.NQUADS,
    '.nquads': RDFContentType.NQUADS,
}


def detect_content_type(file_path: str) -> RDFContentType:
    """
    Detect the RDF content type from a file extension.

    Args:
        file_path: Path to the RDF file

    Returns:
        Detected RDFContentType, Turtle when the extension is not recognized
    """
    extension = Path(file_path).suffix.lower()
    content_type = _EXTENSION_CONTENT_TYPES.get(extension)
    if content_type is None:
        logger.debug(f"Unrecognized extension {extension!r} for {file_path}, assuming Turtle")
        return RDFContentType.TURTLE
    return content_type


def base_url(value: str) -> BaseUrl:
    """
    Build a BaseUrl from a string.

    Raises:
        InvalidBase: If value is not an absolute URL
    """
    try:
        return BaseUrl(value)
    except (ValueError, TypeError) as e:
        raise InvalidBase(value, str(e).splitlines()[0]) from e


def ensure_base(base: Any) -> str:
    """
    Check that base is a BaseUrl value and return its href.

    Raises:
        InvalidBase: If base is a plain string or any other non-URL value
    """
    if not isinstance(base, BaseUrl):
        raise InvalidBase(base, f"expected a URL value, got {type(base).__name__}")
    return str(base)
