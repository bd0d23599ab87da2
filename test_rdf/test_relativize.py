"""Tests for prefix coverage and the two relativization policies."""

import sys
import os
import pytest
from rdflib import BNode, Literal, URIRef
from rdflib.plugins.parsers.notation3 import join

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rdfbridge import Quad, RelativizationError
from rdfbridge.rdf.relativize import (
    PrefixCoverage,
    relativize_host_scoped,
    relativize_quad,
    relativize_strict,
)

BASE = "https://example.org/docs/guide"


def test_prefix_coverage_is_literal_prefix_match():
    coverage = PrefixCoverage({"ex": "http://example.com/a.b?c#", "dc": "http://purl.org/dc/terms/"})

    assert coverage.covers("http://example.com/a.b?c#thing")
    assert coverage.covers("http://purl.org/dc/terms/title")
    # "." and "?" are not pattern characters
    assert not coverage.covers("http://example.com/aXb?c#thing")
    assert not coverage.covers("https://example.org/docs/a")


def test_empty_prefix_map_covers_nothing():
    assert not PrefixCoverage({}).covers("https://example.org/docs/a")
    assert not PrefixCoverage(None).covers("https://example.org/docs/a")


@pytest.mark.parametrize("iri, expected", [
    ("https://example.org/docs/other", "other"),
    ("https://example.org/docs/guide#intro", "#intro"),
    ("https://example.org/docs/sub/page", "sub/page"),
    ("https://example.org/top", "../top"),
    ("https://example.org/docs/guide?q=1", "guide?q=1"),
    ("https://example.org/docs/guide/", "guide/"),
    ("https://example.org/docs/guide/intro", "guide/intro"),
    ("https://example.org/docs/", "./"),
    ("https://other.example.net/x", "https://other.example.net/x"),
    ("http://example.org/docs/other", "http://example.org/docs/other"),
])
def test_relativize_strict_round_trips(iri, expected):
    relative = relativize_strict(BASE, iri)
    assert relative == expected
    assert join(BASE, relative) == iri


def test_relativize_strict_rejects_reference_that_resolves_elsewhere():
    # the default port is dropped while relativizing, so the result resolves
    # to a different absolute IRI
    iri = "https://example.org:443/docs/other"
    with pytest.raises(RelativizationError) as exc_info:
        relativize_strict(BASE, iri)

    error = exc_info.value
    assert error.base == BASE
    assert error.iri == iri
    assert error.relative == "other"
    assert iri in str(error)


def test_relativize_host_scoped_same_host():
    assert relativize_host_scoped(BASE, "https://example.org/docs/other?x=1#f") == "/docs/other?x=1#f"
    assert relativize_host_scoped(BASE, "https://example.org/") == "/"


@pytest.mark.parametrize("iri", [
    "https://other.example.net/docs/other",
    "http://example.org/docs/other",
    "https://example.org:8443/docs/other",
    "urn:isbn:0451450523",
    "https://user@example.org/docs/other",
    "https://example.org//double",
    "https://example.org",
    "https://example.org?q=1",
])
def test_relativize_host_scoped_leaves_iri_absolute(iri):
    assert relativize_host_scoped(BASE, iri) is None


def test_relativize_host_scoped_ignores_default_port():
    assert relativize_host_scoped(BASE, "https://example.org:443/docs/x") == "/docs/x"


def test_relativize_quad_only_touches_subject_and_object():
    quad = Quad.create(
        URIRef("https://example.org/docs/s"),
        URIRef("https://example.org/docs/p"),
        URIRef("https://example.org/docs/o"),
        URIRef("https://example.org/docs/g"),
    )
    result = relativize_quad(quad, PrefixCoverage({}), lambda iri: relativize_strict(BASE, iri))

    assert result.subject == URIRef("s")
    assert result.predicate == quad.predicate
    assert result.object == URIRef("o")
    assert result.graph == quad.graph


def test_relativize_quad_skips_covered_iris_and_non_iris():
    quad = Quad.create(BNode("x"), URIRef("https://example.org/docs/p"), Literal("https://example.org/docs/o"))
    assert relativize_quad(quad, PrefixCoverage({}), lambda iri: "changed") is quad

    covered = Quad.create(URIRef("https://example.org/docs/s"), URIRef("https://example.org/docs/p"),
                          URIRef("https://example.org/docs/o"))
    coverage = PrefixCoverage({"d": "https://example.org/docs/"})
    assert relativize_quad(covered, coverage, lambda iri: "changed") is covered


def test_relativize_strict_rejects_iri_without_path():
    # "../../" reads back as "https://example.org/", not "https://example.org"
    with pytest.raises(RelativizationError):
        relativize_strict(BASE, "https://example.org")


def test_relativize_strict_does_not_relabel_programming_errors(monkeypatch):
    from rdfbridge.rdf import relativize

    def broken(base, iri):
        raise AttributeError("remove_base")

    monkeypatch.setattr(relativize.jsonld, "remove_base", broken)
    with pytest.raises(AttributeError):
        relativize_strict(BASE, "https://example.org/docs/other")
