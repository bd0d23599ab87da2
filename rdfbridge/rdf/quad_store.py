"""
In-memory Quad Store

An unordered set of Quads with pattern lookup. A store is created fresh by each
parse call and owned by the caller afterwards; it is not safe to mutate from
several threads at once.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Set

from .terms import GraphTerm, Quad

logger = logging.getLogger(__name__)


class QuadStore:
    """Set of quads supporting wildcard pattern lookup."""

    def __init__(self, quads: Optional[Iterable[Any]] = None):
        """
        Initialize the store.

        Args:
            quads: Optional quads (or triples) to add
        """
        self._quads: Set[Quad] = set()
        if quads is not None:
            self.add_all(quads)

    def add(self, statement: Any) -> Quad:
        """Add a quad or triple, returning the stored Quad. Duplicates collapse."""
        quad = Quad.from_tuple(statement)
        self._quads.add(quad)
        return quad

    def add_all(self, statements: Iterable[Any]) -> int:
        """Add every quad or triple from statements and return how many were given."""
        count = 0
        for statement in statements:
            self.add(statement)
            count += 1
        return count

    def remove(self, statement: Any) -> None:
        """Remove a quad if present."""
        self._quads.discard(Quad.from_tuple(statement))

    def quads(self, subject=None, predicate=None, obj=None, graph=None) -> List[Quad]:
        """
        Return all quads matching the pattern.

        Each argument is either a concrete term (exact match) or None (wildcard).
        Pass DEFAULT_GRAPH as graph to restrict matches to the default graph.
        """
        matches = []
        for quad in self._quads:
            if subject is not None and quad.subject != subject:
                continue
            if predicate is not None and quad.predicate != predicate:
                continue
            if obj is not None and quad.object != obj:
                continue
            if graph is not None and quad.graph != graph:
                continue
            matches.append(quad)
        return matches

    def graphs(self) -> Set[GraphTerm]:
        """Return the graph terms in use, DEFAULT_GRAPH included if any quad is in it."""
        return {quad.graph for quad in self._quads}

    def __contains__(self, statement: Any) -> bool:
        return Quad.from_tuple(statement) in self._quads

    def __iter__(self) -> Iterator[Quad]:
        return iter(list(self._quads))

    def __len__(self) -> int:
        return len(self._quads)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, QuadStore):
            return NotImplemented
        return self._quads == other._quads

    def __repr__(self) -> str:
        return f"QuadStore(quads={len(self._quads)})"
