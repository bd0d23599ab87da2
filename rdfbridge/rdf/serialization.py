"""
Relativizing Turtle Serializer

Writes a QuadStore (or any sequence of quads or triples) as Turtle. Subject and
object IRIs that no prefix namespace covers are rewritten relative to the base
URL before rdflib's writer compacts the rest with the prefix map.

Two variants share that policy:

- serialize_turtle_sync: shortest relative references, each one verified by
  resolving it back against the base; a mismatch raises RelativizationError.
- serialize_turtle: root-path-relative references for IRIs on the base host
  only, no verification; the writer runs in a worker thread.

Quads outside the default graph are written as TriG graph blocks.
"""

import asyncio
import logging
import re
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Union

from rdflib import Dataset, Graph, URIRef

from .errors import WriterError
from .quad_store import QuadStore
from .rdf_utils import ensure_base
from .relativize import PrefixCoverage, relativize_host_scoped, relativize_quad, relativize_strict
from .terms import Quad

logger = logging.getLogger(__name__)

PrefixMap = Dict[str, str]

# Turtle PN_PREFIX (may be empty), letters and digits from any script.
_PREFIX_LABEL = re.compile(r'^(?:[^\W\d_](?:[\w.\-]*[\w\-])?)?$')
_NAMESPACE_FORBIDDEN = re.compile(r'[\s<>"{}|^`\\]')


def _collect_quads(store_or_quads: Union[QuadStore, Iterable[Any]]) -> List[Quad]:
    if isinstance(store_or_quads, QuadStore):
        return list(store_or_quads)
    return [Quad.from_tuple(statement) for statement in store_or_quads]


def _bind_prefixes(graph: Graph, prefixes: PrefixMap) -> None:
    for label, namespace in prefixes.items():
        if not isinstance(label, str) or not _PREFIX_LABEL.match(label):
            raise WriterError(ValueError(f"invalid prefix label {label!r}"))
        if not isinstance(namespace, str) or _NAMESPACE_FORBIDDEN.search(namespace):
            raise WriterError(ValueError(f"invalid namespace {namespace!r} for prefix {label!r}"))
        graph.bind(label, URIRef(namespace), override=True, replace=True)


def _write(quads: List[Quad], prefixes: PrefixMap) -> str:
    """Hand the (already relativized) quads to rdflib's writer."""
    named = any(not quad.in_default_graph for quad in quads)
    try:
        if named:
            target = Dataset()
            _bind_prefixes(target, prefixes)
            for quad in quads:
                if quad.in_default_graph:
                    target.add((quad.subject, quad.predicate, quad.object))
                else:
                    target.add((quad.subject, quad.predicate, quad.object, quad.graph))
            text = target.serialize(format='trig')
        else:
            target = Graph(bind_namespaces="none")
            _bind_prefixes(target, prefixes)
            for quad in quads:
                target.add((quad.subject, quad.predicate, quad.object))
            text = target.serialize(format='turtle')
    except WriterError:
        raise
    except Exception as e:
        logger.error(f"Turtle writer failed on {len(quads)} quads: {e}")
        raise WriterError(e) from e

    logger.debug(f"Serialized {len(quads)} quads ({'TriG' if named else 'Turtle'}, {len(text)} chars)")
    return text


def serialize_turtle_sync(store_or_quads: Union[QuadStore, Iterable[Any]], base,
                          prefixes: Optional[PrefixMap]) -> str:
    """
    Serialize quads as Turtle with strict, round-trip-verified relativization.

    Every subject and object IRI not covered by a prefix namespace is replaced
    by its shortest reference relative to base, which must resolve back to the
    original IRI exactly. The input store is not modified.

    Args:
        store_or_quads: QuadStore, or an iterable of quads / triples
        base: BaseUrl the output is relative to
        prefixes: Prefix map used for coverage and for the writer

    Returns:
        Turtle text

    Raises:
        InvalidBase: If base is not a BaseUrl (checked before any work)
        RelativizationError: If a relative reference does not resolve back
        WriterError: If the writer rejects the prefixes or quads
    """
    base_href = ensure_base(base)
    prefixes = prefixes or {}
    coverage = PrefixCoverage(prefixes)
    relativize = partial(relativize_strict, base_href)

    quads = [relativize_quad(quad, coverage, relativize) for quad in _collect_quads(store_or_quads)]
    return _write(quads, prefixes)


async def serialize_turtle(store_or_quads: Union[QuadStore, Iterable[Any]], base,
                           prefixes: Optional[PrefixMap]) -> str:
    """
    Serialize quads as Turtle with host-scoped relativization.

    Subject and object IRIs not covered by a prefix namespace become
    root-path-relative (``/path?query#fragment``) when they share the base
    URL's scheme and host; all others stay absolute. The prefix check runs
    first, so a covered IRI is never relativized even on the base host.

    Raises:
        InvalidBase: If base is not a BaseUrl (checked before any work)
        WriterError: If the writer rejects the prefixes or quads
    """
    base_href = ensure_base(base)
    prefixes = prefixes or {}
    coverage = PrefixCoverage(prefixes)
    relativize = partial(relativize_host_scoped, base_href)

    quads = [relativize_quad(quad, coverage, relativize) for quad in _collect_quads(store_or_quads)]
    return await asyncio.to_thread(_write, quads, dict(prefixes))
