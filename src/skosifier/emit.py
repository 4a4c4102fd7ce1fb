"""Serialization of the assembled graph to RDF files."""

import logging
from pathlib import Path

from rdflib import RDF, SKOS, Graph, URIRef

from skosifier.checks import OutputError
from skosifier.scheme import local_name, sanitize_id

logger = logging.getLogger(__name__)

# file extension -> rdflib serializer
RDF_FORMATS = {
    "nt": "nt",
    "ttl": "turtle",
    "rdf": "xml",
    "jsonld": "json-ld",
}
GRAPH_FILE_STEM = "skos"


def _serialize(graph: Graph, outfile: Path, fmt: str) -> None:
    try:
        graph.serialize(destination=outfile, format=RDF_FORMATS[fmt], encoding="utf-8")
    except OSError as exc:
        msg = 'Cannot write "%s": %s'
        raise OutputError(msg % (outfile, exc)) from exc


def _ensure_dir(directory: Path) -> None:
    if directory.is_file():
        msg = 'Output path "%s" must be a directory but it is a file.'
        raise OutputError(msg % directory)
    try:
        directory.mkdir(exist_ok=True, parents=True)
    except OSError as exc:
        msg = 'Cannot create directory "%s": %s'
        raise OutputError(msg % (directory, exc)) from exc


def write_graph(graph: Graph, outdir: Path, formats=("nt", "ttl")) -> list[Path]:
    """Write the whole graph once per format to outdir/skos.<format>."""
    _ensure_dir(outdir)
    written = []
    for fmt in formats:
        outfile = outdir / f"{GRAPH_FILE_STEM}.{fmt}"
        _serialize(graph, outfile, fmt)
        logger.debug("-> wrote %i triples to %s", len(graph), outfile)
        written.append(outfile)
    return written


def concept_graph(graph: Graph, concept: URIRef) -> Graph:
    """Return a new graph with the triples that have concept as subject."""
    tmp_graph = Graph()
    for prefix, namespace in graph.namespaces():
        tmp_graph.bind(prefix, namespace)
    tmp_graph += graph.triples((concept, None, None))
    return tmp_graph


def concept_file_stem(graph: Graph, concept: URIRef) -> str:
    notation = graph.value(concept, SKOS.notation)
    if notation is None:
        return local_name(concept)
    return sanitize_id(str(notation))


def write_per_concept(graph: Graph, outdir: Path, fmt: str = "ttl") -> list[Path]:
    """
    Write each concept to a separate file named after its identifier.

    The name is the sanitized skos:notation, like the concept IRI suffix. Concepts
    without notation fall back to the part of the IRI after the last "/" or "#".

    Only the triples with the concept as subject are written. The scheme
    itself gets no file.
    """
    _ensure_dir(outdir)
    written = []
    for concept in sorted(set(graph.subjects(RDF.type, SKOS.Concept))):
        outfile = outdir / f"{concept_file_stem(graph, concept)}.{fmt}"
        _serialize(concept_graph(graph, concept), outfile, fmt)
        written.append(outfile)
    logger.debug("-> wrote %i concept file(s) to %s", len(written), outdir)
    return written
