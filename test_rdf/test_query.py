"""Tests for the cardinality-constrained query helpers."""

import sys
import os

import pytest
from rdflib import BNode, Literal, URIRef

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rdfbridge import (
    AmbiguousMatch,
    DEFAULT_GRAPH,
    InvalidTerm,
    NoMatch,
    Quad,
    QuadStore,
    find,
    one,
    one_object,
    zero_or_one,
    zero_or_one_object,
)


ALICE = URIRef("https://example.org/alice")
BOB = URIRef("https://example.org/bob")
NAME = URIRef("http://schema.org/name")
KNOWS = URIRef("http://schema.org/knows")
G1 = URIRef("https://example.org/g1")


@pytest.fixture
def store():
    """Alice has one name and knows two people; Bob has a name in a named graph."""
    return QuadStore([
        (ALICE, NAME, Literal("Alice")),
        (ALICE, KNOWS, BOB),
        (ALICE, KNOWS, BNode("friend")),
        (BOB, NAME, Literal("Bob"), G1),
    ])


def test_duplicates_collapse():
    store = QuadStore()
    store.add((ALICE, NAME, Literal("Alice")))
    store.add(Quad(ALICE, NAME, Literal("Alice"), DEFAULT_GRAPH))
    assert len(store) == 1


def test_one_returns_single_match(store):
    quad = one(store, ALICE, NAME, None)
    assert quad == Quad(ALICE, NAME, Literal("Alice"), DEFAULT_GRAPH)


def test_one_no_match(store):
    with pytest.raises(NoMatch) as exc_info:
        one(store, BOB, KNOWS, None)
    assert exc_info.value.pattern == "<https://example.org/bob> <http://schema.org/knows> _"
    assert "no matches for { <https://example.org/bob> <http://schema.org/knows> _ }" in str(exc_info.value)


def test_one_ambiguous_reports_count(store):
    with pytest.raises(AmbiguousMatch) as exc_info:
        one(store, ALICE, KNOWS, None)
    assert exc_info.value.count == 2
    assert str(exc_info.value).endswith("; got 2")
    assert "<https://example.org/alice> <http://schema.org/knows> _" in str(exc_info.value)


def test_zero_or_one_absent(store):
    assert zero_or_one(store, BOB, KNOWS, None) is None


def test_zero_or_one_single(store):
    assert zero_or_one(store, ALICE, NAME, None).object == Literal("Alice")


def test_zero_or_one_ambiguous(store):
    with pytest.raises(AmbiguousMatch) as exc_info:
        zero_or_one(store, None, NAME, None)
    assert exc_info.value.count == 2


def test_errors_are_distinguishable(store):
    with pytest.raises(NoMatch):
        one(store, BOB, KNOWS, None)
    with pytest.raises(LookupError):
        one(store, ALICE, KNOWS, None)
    assert not issubclass(NoMatch, AmbiguousMatch)
    assert not issubclass(AmbiguousMatch, NoMatch)


def test_invalid_pattern_fails_before_lookup():
    class ExplodingStore(QuadStore):
        def quads(self, *args, **kwargs):
            raise AssertionError("store should not be queried")

    with pytest.raises(InvalidTerm):
        one(ExplodingStore(), "https://example.org/alice", NAME, None)
    with pytest.raises(InvalidTerm):
        find(ExplodingStore(), ALICE, NAME, 3)


def test_find_with_graph(store):
    assert len(find(store, None, NAME, None)) == 2
    assert find(store, None, NAME, None, G1) == [Quad(BOB, NAME, Literal("Bob"), G1)]
    assert find(store, None, NAME, None, DEFAULT_GRAPH) == [Quad(ALICE, NAME, Literal("Alice"), DEFAULT_GRAPH)]


def test_one_graph_shows_in_pattern(store):
    with pytest.raises(NoMatch) as exc_info:
        one(store, ALICE, NAME, None, G1)
    assert exc_info.value.pattern.endswith("<https://example.org/g1>")


def test_object_accessors(store):
    assert one_object(store, ALICE, NAME) == Literal("Alice")
    assert zero_or_one_object(store, BOB, KNOWS) is None
    with pytest.raises(AmbiguousMatch):
        zero_or_one_object(store, ALICE, KNOWS)


def test_remove_and_graphs(store):
    assert store.graphs() == {DEFAULT_GRAPH, G1}

    store.remove((BOB, NAME, Literal("Bob"), G1))
    assert len(store) == 3
    assert store.graphs() == {DEFAULT_GRAPH}
    assert zero_or_one(store, BOB, NAME, None) is None

    # removing an absent quad is a no-op
    store.remove((BOB, NAME, Literal("Bob"), G1))
    assert len(store) == 3
