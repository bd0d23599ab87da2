"""
RDF Error Types for rdfbridge

Every failure raised by the parsing, query and serialization layers is one of
the classes below, so callers can tell a bad base URL from a bad document from
a data-integrity problem without inspecting message text.
"""

from typing import Any, Optional


class RdfBridgeError(Exception):
    """Base class for all rdfbridge errors."""
    pass


class InvalidBase(RdfBridgeError, ValueError):
    """Raised when a base argument is not an absolute URL value."""

    def __init__(self, base: Any, reason: Optional[str] = None):
        self.base = base
        message = f"base {base!r} must be an absolute URL"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParserError(RdfBridgeError):
    """
    Wraps a failure from the underlying Turtle, N-Quads or JSON-LD engine.

    The original input text is kept on the error so diagnostics can show the
    offending document.
    """

    def __init__(self, cause: BaseException, source_text: str):
        self.cause = cause
        self.source_text = source_text
        super().__init__(f"{cause}\nin document:\n{source_text}")


class NoMatch(RdfBridgeError, LookupError):
    """Raised when a pattern that must match exactly once matches nothing."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"no matches for {{ {pattern} }}")


class AmbiguousMatch(RdfBridgeError, LookupError):
    """Raised when a pattern expected to match at most once matches several quads."""

    def __init__(self, pattern: str, count: int):
        self.pattern = pattern
        self.count = count
        super().__init__(f"expected one answer to {{ {pattern} }}; got {count}")


class InvalidTerm(RdfBridgeError, TypeError):
    """Raised when a value passed as an RDF term is not an IRI, blank node or literal."""

    def __init__(self, value: Any, expected: Optional[str] = None):
        self.value = value
        if expected:
            super().__init__(f"{value!r} is not a valid {expected}")
        else:
            super().__init__(f"{value!r} is not an RDF term")


class RelativizationError(RdfBridgeError):
    """
    Raised by the strict serializer when a computed relative IRI does not
    resolve back to the absolute IRI it was computed from.
    """

    def __init__(self, base: str, iri: str, relative: Optional[str],
                 cause: Optional[BaseException] = None):
        self.base = base
        self.iri = iri
        self.relative = relative
        self.cause = cause
        message = f"relativizing {iri} against {base} => {relative!r} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class WriterError(RdfBridgeError):
    """Raised when the Turtle writer rejects the quads or prefixes it was given."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Turtle writer failed: {cause}")
