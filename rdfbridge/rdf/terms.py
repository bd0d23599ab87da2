"""
RDF Term Model

rdflib's URIRef, BNode and Literal are the term variants used throughout
rdfbridge. This module adds the immutable Quad value built from them and the
diagnostic rendering used in query error messages.
"""

from typing import Any, NamedTuple, Optional, Union

from rdflib import BNode, Literal, URIRef
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from .errors import InvalidTerm

# Graph component of quads that belong to the default graph.
DEFAULT_GRAPH = DATASET_DEFAULT_GRAPH_ID

Term = Union[URIRef, BNode, Literal]
SubjectTerm = Union[URIRef, BNode]
GraphTerm = Union[URIRef, BNode]


def is_term(value: Any) -> bool:
    """Return True if value is one of the supported RDF term variants."""
    return isinstance(value, (URIRef, BNode, Literal))


def is_default_graph(graph: Optional[Any]) -> bool:
    """Return True if graph names the default graph (rdflib uses None or its default id)."""
    return graph is None or graph == DEFAULT_GRAPH


class Quad(NamedTuple):
    """Subject, predicate, object and graph of one RDF statement."""
    subject: SubjectTerm
    predicate: URIRef
    object: Term
    graph: GraphTerm = DEFAULT_GRAPH

    @classmethod
    def create(cls, subject: Any, predicate: Any, obj: Any,
               graph: Optional[Any] = None) -> "Quad":
        """
        Build a quad after checking each component's variant.

        Args:
            subject: IRI or blank node
            predicate: IRI
            obj: any RDF term
            graph: IRI, blank node, or None / DEFAULT_GRAPH for the default graph

        Raises:
            InvalidTerm: If a component is not an acceptable term for its position
        """
        if not isinstance(subject, (URIRef, BNode)):
            raise InvalidTerm(subject, "quad subject (IRI or blank node)")
        if not isinstance(predicate, URIRef):
            raise InvalidTerm(predicate, "quad predicate (IRI)")
        if not is_term(obj):
            raise InvalidTerm(obj, "quad object (IRI, blank node or literal)")
        if is_default_graph(graph):
            graph = DEFAULT_GRAPH
        elif not isinstance(graph, (URIRef, BNode)):
            raise InvalidTerm(graph, "quad graph (IRI or blank node)")
        return cls(subject, predicate, obj, graph)

    @classmethod
    def from_tuple(cls, statement: Any) -> "Quad":
        """Build a quad from a Quad, a 4-tuple or a 3-tuple (default graph)."""
        if isinstance(statement, Quad):
            return statement
        if isinstance(statement, tuple) and len(statement) in (3, 4):
            return cls.create(*statement)
        raise InvalidTerm(statement, "triple or quad")

    @property
    def in_default_graph(self) -> bool:
        return self.graph == DEFAULT_GRAPH


def render_rdf_term(term: Optional[Any]) -> str:
    """
    Good-enough rendering of a term (or a wildcard) for diagnostics.

    None renders as the wildcard placeholder ``_``. Literals lose their language
    tag and datatype. Plain strings are rejected even though URIRef is a str.

    Raises:
        InvalidTerm: If term is neither None nor an RDF term
    """
    if term is None:
        return '_'
    if isinstance(term, URIRef):
        return f"<{term}>"
    if isinstance(term, BNode):
        return f"_:{term}"
    if isinstance(term, Literal):
        escaped = str(term).replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'
    raise InvalidTerm(term)
