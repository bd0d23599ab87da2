"""
RDF parsing, querying and relativizing serialization.
"""

from .errors import (
    AmbiguousMatch,
    InvalidBase,
    InvalidTerm,
    NoMatch,
    ParserError,
    RdfBridgeError,
    RelativizationError,
    WriterError,
)
from .terms import DEFAULT_GRAPH, Quad, render_rdf_term
from .quad_store import QuadStore
from .query import find, one, one_object, zero_or_one, zero_or_one_object
from .rdf_utils import BaseUrl, RDFContentType, base_url, detect_content_type
from .parsing import (
    parse_jsonld,
    parse_jsonld_sync,
    parse_nquads,
    parse_nquads_sync,
    parse_rdf,
    parse_rdf_file,
    parse_turtle,
    parse_turtle_sync,
)
from .serialization import serialize_turtle, serialize_turtle_sync

__all__ = [
    "AmbiguousMatch",
    "BaseUrl",
    "DEFAULT_GRAPH",
    "InvalidBase",
    "InvalidTerm",
    "NoMatch",
    "ParserError",
    "Quad",
    "QuadStore",
    "RDFContentType",
    "RdfBridgeError",
    "RelativizationError",
    "WriterError",
    "base_url",
    "detect_content_type",
    "find",
    "one",
    "one_object",
    "parse_jsonld",
    "parse_jsonld_sync",
    "parse_nquads",
    "parse_nquads_sync",
    "parse_rdf",
    "parse_rdf_file",
    "parse_turtle",
    "parse_turtle_sync",
    "render_rdf_term",
    "serialize_turtle",
    "serialize_turtle_sync",
    "zero_or_one",
    "zero_or_one_object",
]
