"""Sample RDF Documents for Testing

Turtle and JSON-LD documents used by the parsing, query and serialization tests.
All relative IRIs are meant to be resolved against BASE.
"""

import json
from typing import Any, Dict

BASE = "https://example.org/docs/"

EX = "http://example.com/vocab#"
SCHEMA = "http://schema.org/"


def create_simple_turtle() -> str:
    """Two subjects on the base host, one cross-host object, one prefix."""
    return """
@prefix ex: <http://example.com/vocab#> .

<a> ex:title "A" ;
    ex:next <b> .

<b> ex:title "B \\"quoted\\"" ;
    ex:link <https://other.example.net/x> ;
    ex:tag "one", "two" .
"""


def create_redeclared_prefix_turtle() -> str:
    """The ex prefix is declared twice; the second declaration wins."""
    return """
@prefix ex: <http://first.example.com/ns#> .
@prefix ex: <http://example.com/vocab#> .
@prefix : <https://example.org/docs/terms#> .

<a> ex:title "A" ;
    :kind :Document .
"""


def create_single_triple_jsonld() -> Dict[str, Any]:
    """One triple with a relative subject."""
    return {
        "@context": {"name": "http://schema.org/name"},
        "@id": "people/alice",
        "name": "Alice"
    }


def create_named_graph_jsonld() -> Dict[str, Any]:
    """One triple inside the named graph https://example.org/g1."""
    return {
        "@id": "https://example.org/g1",
        "@graph": [
            {
                "@id": "https://example.org/s",
                "https://example.org/p": {"@id": "https://example.org/o"}
            }
        ]
    }


def create_remote_context_jsonld() -> Dict[str, Any]:
    """A document whose context must be fetched over the network."""
    return {
        "@context": "https://example.org/contexts/people.jsonld",
        "@id": "people/bob",
        "name": "Bob"
    }


def as_text(document: Dict[str, Any]) -> str:
    return json.dumps(document)
