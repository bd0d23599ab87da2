"""
RDF Parsing Adapter

Turns Turtle, N-Quads or JSON-LD text into a fresh QuadStore. Grammar work is
done by rdflib (Turtle, N-Quads) and PyLD (JSON-LD to N-Quads); this module
checks the base URL, captures prefix declarations, and wraps every engine
failure into a ParserError that carries the original source text.

The async entry points hand the blocking engine call to a worker thread and
resume exactly once with the store or a single error.
"""

import asyncio
import json
import logging
from typing import Dict, Optional, Tuple

import aiofiles
from pyld import jsonld
from pyld.jsonld import JsonLdError
from rdflib import Dataset, Graph

from ..config.config_loader import get_config
from .errors import ParserError
from .quad_store import QuadStore
from .rdf_utils import RDFContentType, detect_content_type, ensure_base
from .terms import Quad

logger = logging.getLogger(__name__)

PrefixMap = Dict[str, str]

_RDFLIB_FORMATS = {
    RDFContentType.TURTLE: 'turtle',
    RDFContentType.NQUADS: 'nquads',
}


class _PrefixRecordingGraph(Graph):
    """Graph that remembers every prefix binding the parser makes, in order."""

    def __init__(self):
        super().__init__(bind_namespaces="none")
        self.declared_prefixes: PrefixMap = {}

    def bind(self, prefix, namespace, override=True, replace=False):
        # the namespace manager keeps one label per namespace; keep them all here
        if prefix is not None:
            self.declared_prefixes[str(prefix)] = str(namespace)
        super().bind(prefix, namespace, override=override, replace=replace)


def _parse_with_rdflib(text: str, base_href: str,
                       content_type: RDFContentType) -> Tuple[QuadStore, PrefixMap]:
    """Parse Turtle or N-Quads text; engine exceptions propagate unchanged."""
    store = QuadStore()

    if content_type == RDFContentType.NQUADS:
        dataset = Dataset()
        dataset.parse(data=text, format=_RDFLIB_FORMATS[content_type], publicID=base_href)
        for s, p, o, g in dataset.quads((None, None, None, None)):
            store.add(Quad.create(s, p, o, g))
        return store, {}

    graph = _PrefixRecordingGraph()
    graph.parse(data=text, format=_RDFLIB_FORMATS[content_type], publicID=base_href)
    for s, p, o in graph:
        store.add(Quad.create(s, p, o))

    return store, dict(graph.declared_prefixes)


def _refuse_remote_document(url, options=None):
    raise JsonLdError(
        f"Remote JSON-LD document {url} was not fetched; remote contexts are disabled.",
        'jsonld.LoadDocumentError',
        {'url': url},
        code='loading remote context failed')


def _jsonld_to_nquads(text: str, base_href: str, allow_remote: bool) -> str:
    document = json.loads(text)
    options = {'base': base_href, 'format': 'application/n-quads'}
    if not allow_remote:
        options['documentLoader'] = _refuse_remote_document
    return jsonld.to_rdf(document, options)


def _parse_jsonld_with_engines(text: str, base_href: str, allow_remote: bool) -> QuadStore:
    nquads = _jsonld_to_nquads(text, base_href, allow_remote)
    store, _ = _parse_with_rdflib(nquads, base_href, RDFContentType.NQUADS)
    return store


def _merge_prefixes(prefixes: Optional[PrefixMap], declared: PrefixMap) -> None:
    if prefixes is None or not declared:
        return
    # later declarations of a label overwrite earlier ones
    prefixes.update(declared)
    logger.debug(f"Captured prefixes: {sorted(declared)}")


def _log_parsed(store: QuadStore, content_type: RDFContentType, text: str) -> None:
    logger.debug(f"Parsed {len(store)} quads from {content_type.name} ({len(text)} chars)")


def parse_turtle_sync(text: str, base, prefixes: Optional[PrefixMap] = None) -> QuadStore:
    """
    Parse Turtle text into a new QuadStore, in the calling thread.

    Args:
        text: Turtle document
        base: BaseUrl used to resolve relative IRIs
        prefixes: Optional caller-owned map; prefix declarations from the
            document are merged into it once parsing succeeds

    Raises:
        InvalidBase: If base is not a BaseUrl (checked before parsing)
        ParserError: If the document cannot be parsed
    """
    base_href = ensure_base(base)
    try:
        store, declared = _parse_with_rdflib(text, base_href, RDFContentType.TURTLE)
    except Exception as e:
        logger.debug(f"Turtle parse failed: {e}")
        raise ParserError(e, text) from e
    _merge_prefixes(prefixes, declared)
    _log_parsed(store, RDFContentType.TURTLE, text)
    return store


async def parse_turtle(text: str, base, prefixes: Optional[PrefixMap] = None) -> QuadStore:
    """
    Parse Turtle text into a new QuadStore.

    Behaves like parse_turtle_sync; the parse runs in a worker thread and the
    caller's prefix map is updated after it completes. Do not share one prefix
    map between concurrently running parses.

    Raises:
        InvalidBase: If base is not a BaseUrl (checked before parsing)
        ParserError: If the document cannot be parsed
    """
    base_href = ensure_base(base)
    try:
        store, declared = await asyncio.to_thread(
            _parse_with_rdflib, text, base_href, RDFContentType.TURTLE)
    except Exception as e:
        logger.debug(f"Turtle parse failed: {e}")
        raise ParserError(e, text) from e
    _merge_prefixes(prefixes, declared)
    _log_parsed(store, RDFContentType.TURTLE, text)
    return store


def parse_nquads_sync(text: str, base) -> QuadStore:
    """
    Parse N-Quads text into a new QuadStore, keeping named graphs.

    Raises:
        InvalidBase: If base is not a BaseUrl
        ParserError: If the document cannot be parsed
    """
    base_href = ensure_base(base)
    try:
        store, _ = _parse_with_rdflib(text, base_href, RDFContentType.NQUADS)
    except Exception as e:
        logger.debug(f"N-Quads parse failed: {e}")
        raise ParserError(e, text) from e
    _log_parsed(store, RDFContentType.NQUADS, text)
    return store


async def parse_nquads(text: str, base) -> QuadStore:
    """Async twin of parse_nquads_sync."""
    base_href = ensure_base(base)
    try:
        store, _ = await asyncio.to_thread(
            _parse_with_rdflib, text, base_href, RDFContentType.NQUADS)
    except Exception as e:
        logger.debug(f"N-Quads parse failed: {e}")
        raise ParserError(e, text) from e
    _log_parsed(store, RDFContentType.NQUADS, text)
    return store


def parse_jsonld_sync(text: str, base) -> QuadStore:
    """
    Parse a JSON-LD document into a new QuadStore, in the calling thread.

    The document is expanded to N-Quads by PyLD against base, then parsed by
    rdflib. Failures at any stage raise ParserError carrying the original
    JSON-LD text.

    Raises:
        InvalidBase: If base is not a BaseUrl
        ParserError: If JSON, JSON-LD expansion or N-Quads parsing fails
        ConfigurationError: If the JSON-LD settings are invalid
    """
    base_href = ensure_base(base)
    allow_remote = get_config().allow_remote_contexts()
    try:
        store = _parse_jsonld_with_engines(text, base_href, allow_remote)
    except Exception as e:
        logger.debug(f"JSON-LD parse failed: {e}")
        raise ParserError(e, text) from e
    _log_parsed(store, RDFContentType.JSON_LD, text)
    return store


async def parse_jsonld(text: str, base) -> QuadStore:
    """
    Parse a JSON-LD document into a new QuadStore.

    Raises:
        InvalidBase: If base is not a BaseUrl
        ParserError: If JSON, JSON-LD expansion or N-Quads parsing fails
        ConfigurationError: If the JSON-LD settings are invalid
    """
    base_href = ensure_base(base)
    allow_remote = get_config().allow_remote_contexts()
    try:
        store = await asyncio.to_thread(_parse_jsonld_with_engines, text, base_href, allow_remote)
    except Exception as e:
        logger.debug(f"JSON-LD parse failed: {e}")
        raise ParserError(e, text) from e
    _log_parsed(store, RDFContentType.JSON_LD, text)
    return store


async def parse_rdf(body: str, base, content_type: Optional[str],
                    prefixes: Optional[PrefixMap] = None) -> QuadStore:
    """
    Parse an RDF document of the given content type.

    Args:
        body: Document text
        base: BaseUrl used to resolve relative IRIs
        content_type: Media type or RDFContentType; "application/ld+json"
            selects JSON-LD, "application/n-quads" N-Quads, anything else Turtle
        prefixes: Optional map receiving Turtle prefix declarations

    Raises:
        InvalidBase: If base is not a BaseUrl
        ParserError: If the document cannot be parsed
    """
    ensure_base(base)
    resolved = RDFContentType.from_media_type(content_type)

    if resolved == RDFContentType.JSON_LD:
        return await parse_jsonld(body, base)
    if resolved == RDFContentType.NQUADS:
        return await parse_nquads(body, base)
    return await parse_turtle(body, base, prefixes)


async def parse_rdf_file(file_path: str, base, content_type: Optional[str] = None,
                         prefixes: Optional[PrefixMap] = None) -> QuadStore:
    """
    Read a UTF-8 RDF file and parse it.

    Args:
        file_path: Path to the RDF file
        base: BaseUrl used to resolve relative IRIs
        content_type: Media type; detected from the file extension when None
        prefixes: Optional map receiving Turtle prefix declarations

    Raises:
        InvalidBase: If base is not a BaseUrl
        ParserError: If the document cannot be parsed
        OSError: If the file cannot be read
    """
    ensure_base(base)
    resolved = (RDFContentType.from_media_type(content_type)
                if content_type is not None else detect_content_type(file_path))

    async with aiofiles.open(file_path, 'r', encoding='utf-8') as f:
        body = await f.read()

    logger.debug(f"Read {len(body)} chars from {file_path} as {resolved.value}")
    return await parse_rdf(body, base, resolved, prefixes)
