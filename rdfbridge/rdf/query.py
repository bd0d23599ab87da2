"""
Cardinality-Constrained Query Helpers

RDF configuration and metadata documents often use functional predicates: a
subject is expected to carry at most one value for them. ``one`` and
``zero_or_one`` turn a violation of that expectation into a typed error
(NoMatch / AmbiguousMatch) instead of a silently picked answer.
"""

import logging
from typing import Any, List, Optional

from .errors import AmbiguousMatch, NoMatch
from .quad_store import QuadStore
from .terms import Quad, Term, render_rdf_term

logger = logging.getLogger(__name__)


def render_pattern(subject: Any, predicate: Any, obj: Any, graph: Any = None) -> str:
    """Render a pattern as ``<s> <p> <o>``, with ``_`` for wildcards.

    The graph component is only shown when one was given.
    """
    parts = [subject, predicate, obj]
    if graph is not None:
        parts.append(graph)
    return ' '.join(render_rdf_term(term) for term in parts)


def find(store: QuadStore, subject=None, predicate=None, obj=None, graph=None) -> List[Quad]:
    """
    Return the quads matching a pattern.

    The pattern is rendered before the store is queried, so a value that is not
    an RDF term (a plain string, for example) raises InvalidTerm up front.
    """
    render_pattern(subject, predicate, obj, graph)
    return store.quads(subject, predicate, obj, graph)


def _expect_one(store: QuadStore, subject, predicate, obj, graph, nullable: bool) -> Optional[Quad]:
    # Renders first so that invalid pattern terms fail before the lookup.
    rendered = render_pattern(subject, predicate, obj, graph)

    matches = store.quads(subject, predicate, obj, graph)
    if len(matches) == 0:
        if nullable:
            return None
        raise NoMatch(rendered)
    if len(matches) > 1:
        logger.debug(f"{len(matches)} quads match {{ {rendered} }}")
        raise AmbiguousMatch(rendered, len(matches))
    return matches[0]


def one(store: QuadStore, subject, predicate, obj, graph=None) -> Quad:
    """
    Return the single quad matching the pattern.

    Raises:
        NoMatch: If no quad matches
        AmbiguousMatch: If more than one quad matches
        InvalidTerm: If a pattern component is not a term or None
    """
    return _expect_one(store, subject, predicate, obj, graph, nullable=False)


def zero_or_one(store: QuadStore, subject, predicate, obj, graph=None) -> Optional[Quad]:
    """
    Return the single quad matching the pattern, or None if nothing matches.

    Raises:
        AmbiguousMatch: If more than one quad matches
        InvalidTerm: If a pattern component is not a term or None
    """
    return _expect_one(store, subject, predicate, obj, graph, nullable=True)


def one_object(store: QuadStore, subject, predicate, graph=None) -> Term:
    """Return the object of the only ``subject predicate ?o`` quad."""
    return one(store, subject, predicate, None, graph).object


def zero_or_one_object(store: QuadStore, subject, predicate, graph=None) -> Optional[Term]:
    """Return the object of the only ``subject predicate ?o`` quad, or None."""
    quad = zero_or_one(store, subject, predicate, None, graph)
    return quad.object if quad is not None else None
