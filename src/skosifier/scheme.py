"""IRIs for the concept scheme and its concepts."""

import re

from rdflib import URIRef

SEPARATOR = "/"

# Characters that must not appear in the local part of a concept IRI.
_UNSAFE_ID_CHARS = re.compile(r"[.\s/#?]")


def scheme_iri(base_iri: str) -> URIRef:
    """
    Derive the concept scheme IRI from the base IRI.

    Exactly one trailing "/" is stripped, so "http://example.org/voc/" and
    "http://example.org/voc" both give <http://example.org/voc>.
    """
    if base_iri.endswith(SEPARATOR):
        base_iri = base_iri[: -len(SEPARATOR)]
    return URIRef(base_iri)


def sanitize_id(identifier: str) -> str:
    """Replace characters not allowed in the local part of an IRI by "_"."""
    return _UNSAFE_ID_CHARS.sub("_", identifier)


def concept_iri(base_iri: str, identifier: str) -> URIRef:
    return URIRef(base_iri + sanitize_id(identifier))


def local_name(iri: str) -> str:
    """Return the part of an IRI after the last "/" or "#"."""
    return re.split(r"[/#]", str(iri))[-1]
