"""
IRI Relativization

Policies used by the serializers to shorten subject and object IRIs:

- prefix coverage: IRIs starting with a namespace from the prefix map are left
  alone so the Turtle writer can compact them to prefixed names;
- strict relativization: shortest relative reference, verified by resolving it
  back against the base;
- host-scoped relativization: root-path-relative references, only for IRIs on
  the base URL's scheme and host.
"""

import logging
from functools import lru_cache
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import SplitResult, urlsplit, urlunsplit

from pyld import jsonld
from rdflib import Graph, URIRef
from rdflib.plugins.parsers.notation3 import join as resolve_reference

from .errors import RelativizationError
from .terms import Quad

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
    'ws': 80,
    'wss': 443,
    'ftp': 21,
}


class PrefixCoverage:
    """Tests whether an IRI starts with any namespace of a prefix map."""

    def __init__(self, prefixes: Optional[Dict[str, str]]):
        self.namespaces: Tuple[str, ...] = tuple(str(ns) for ns in (prefixes or {}).values())

    def covers(self, iri: str) -> bool:
        return any(iri.startswith(ns) for ns in self.namespaces)


@lru_cache(maxsize=32)
def _parser_base(base: str) -> str:
    """The base the Turtle parser resolves against: absolutized, fragment removed."""
    return str(Graph(bind_namespaces="none").absolutize(base))


def _shortest_reference(base: str, iri: str) -> Optional[str]:
    return jsonld.remove_base(base, iri)


def _directory_reference(base: str, iri: str) -> Optional[str]:
    """Reference from the base's directory, keeping the base's last segment when iri extends it."""
    base_parts = urlsplit(base)
    iri_parts = urlsplit(iri)
    if (base_parts.scheme, base_parts.netloc) != (iri_parts.scheme, iri_parts.netloc):
        return None
    directory = base_parts.path[:base_parts.path.rfind('/') + 1]
    if not directory or not iri_parts.path.startswith(directory):
        return None
    rest = iri_parts.path[len(directory):]
    # an empty path or a colon in the first segment would change meaning
    if not rest or ':' in rest.split('/', 1)[0]:
        rest = './' + rest
    return urlunsplit(('', '', rest, iri_parts.query, iri_parts.fragment))


def relativize_strict(base: str, iri: str) -> str:
    """
    Compute the shortest reference to iri relative to base and verify it.

    Each candidate reference is resolved back against base with rdflib's Turtle
    resolver and must reproduce iri exactly. IRIs on another scheme or
    authority come back unchanged (absolute).

    Raises:
        RelativizationError: If no candidate resolves back to iri
    """
    parser_base = _parser_base(base)
    rejected = None
    for candidate in (_shortest_reference, _directory_reference):
        try:
            relative = candidate(base, iri)
        except ValueError as e:
            raise RelativizationError(base, iri, None, e) from e
        if relative is None:
            continue
        try:
            effective = resolve_reference(parser_base, relative)
        except ValueError as e:
            raise RelativizationError(base, iri, relative, e) from e
        if effective == iri:
            return relative
        if rejected is None:
            rejected = (relative, effective)

    relative, effective = rejected
    raise RelativizationError(base, iri, relative, ValueError(f"{iri} != {effective}"))


def _host(parts: SplitResult) -> Optional[str]:
    """Host with non-default port, or None if the URL has no usable host."""
    try:
        port = parts.port
    except ValueError:
        return None
    hostname = parts.hostname
    if not hostname:
        return None
    if port is None or port == _DEFAULT_PORTS.get(parts.scheme.lower()):
        return hostname
    return f"{hostname}:{port}"


def relativize_host_scoped(base: str, iri: str) -> Optional[str]:
    """
    Root-path-relative form of iri if it shares base's scheme and host.

    Returns:
        ``/path?query#fragment``, or None when iri must stay absolute
    """
    try:
        base_parts = urlsplit(base)
        iri_parts = urlsplit(iri)
    except ValueError:
        return None

    base_host = _host(base_parts)
    if base_host is None or base_host != _host(iri_parts):
        return None
    if base_parts.scheme.lower() != iri_parts.scheme.lower():
        return None
    # user info is dropped by a root-relative reference
    if iri_parts.username is not None:
        return None
    # "https://host" and "https://host/" are different IRIs
    if not iri_parts.path:
        return None
    path = iri_parts.path
    # "//x" would read back as a network-path reference
    if path.startswith('//'):
        return None
    return urlunsplit(('', '', path, iri_parts.query, iri_parts.fragment))


def relativize_quad(quad: Quad, coverage: PrefixCoverage,
                    relativize: Callable[[str], Optional[str]]) -> Quad:
    """
    Return a copy of quad with subject and object IRIs relativized.

    Prefix-covered IRIs are kept so the writer can compact them. Predicate and
    graph are never touched. relativize returns None to keep an IRI absolute.
    """
    subject = _relativize_term(quad.subject, coverage, relativize)
    obj = _relativize_term(quad.object, coverage, relativize)
    if subject is quad.subject and obj is quad.object:
        return quad
    return quad._replace(subject=subject, object=obj)


def _relativize_term(term, coverage: PrefixCoverage, relativize: Callable[[str], Optional[str]]):
    if not isinstance(term, URIRef) or coverage.covers(term):
        return term
    relative = relativize(str(term))
    if relative is None or relative == str(term):
        return term
    logger.debug(f"Relativized {term} => {relative}")
    return URIRef(relative)
