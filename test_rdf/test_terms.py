"""Tests for the RDF term model and diagnostic rendering."""

import sys
import os

import pytest
from rdflib import BNode, Literal, URIRef, Variable

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rdfbridge import DEFAULT_GRAPH, InvalidTerm, Quad, render_rdf_term


S = URIRef("https://example.org/s")
P = URIRef("https://example.org/p")


def test_render_iri():
    assert render_rdf_term(S) == "<https://example.org/s>"


def test_render_blank_node():
    assert render_rdf_term(BNode("b0")) == "_:b0"


def test_render_literal_escapes_quotes_and_backslashes():
    assert render_rdf_term(Literal('say "hi" \\ bye')) == '"say \\"hi\\" \\\\ bye"'


def test_render_literal_drops_language_and_datatype():
    assert render_rdf_term(Literal("chat", lang="fr")) == '"chat"'
    assert render_rdf_term(Literal(5)) == '"5"'


def test_render_wildcard():
    assert render_rdf_term(None) == "_"


@pytest.mark.parametrize("value", ["https://example.org/s", 42, Variable("x"), object()])
def test_render_rejects_non_terms(value):
    with pytest.raises(InvalidTerm):
        render_rdf_term(value)


def test_invalid_term_is_a_type_error():
    with pytest.raises(TypeError):
        render_rdf_term("plain string")


def test_quad_defaults_to_default_graph():
    quad = Quad.create(S, P, Literal("x"))
    assert quad.graph == DEFAULT_GRAPH
    assert quad.in_default_graph


def test_quad_from_triple_tuple():
    quad = Quad.from_tuple((S, P, S))
    assert quad == Quad(S, P, S, DEFAULT_GRAPH)


def test_quad_equality_is_structural():
    assert Quad.create(S, P, Literal("x", lang="en")) == Quad.create(S, P, Literal("x", lang="en"))
    assert Quad.create(S, P, Literal("x", lang="en")) != Quad.create(S, P, Literal("x"))


def test_quad_rejects_blank_node_predicate():
    with pytest.raises(InvalidTerm):
        Quad.create(S, BNode(), S)


def test_quad_rejects_literal_subject():
    with pytest.raises(InvalidTerm):
        Quad.create(Literal("x"), P, S)


def test_quad_rejects_literal_graph():
    with pytest.raises(InvalidTerm):
        Quad.create(S, P, S, Literal("g"))


def test_quad_rejects_plain_string_object():
    with pytest.raises(InvalidTerm):
        Quad.create(S, P, "https://example.org/o")
