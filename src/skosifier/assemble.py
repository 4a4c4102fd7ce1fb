"""Build a SKOS concept scheme graph from a vocabulary table."""

import logging

from rdflib import OWL, RDF, SDO, SKOS, XSD, Graph, Literal, URIRef

from skosifier.checks import InputError
from skosifier.dates import parse_date
from skosifier.header import Role
from skosifier.models import Row, VocabTable
from skosifier.scheme import concept_iri, sanitize_id, scheme_iri

logger = logging.getLogger(__name__)

NAMESPACES = {
    "skos": SKOS,
    "schema": SDO,
    "owl": OWL,
    "xsd": XSD,
}

LANGUAGE_PREDICATES = {
    Role.PREF_LABEL: SKOS.prefLabel,
    Role.ALT_LABEL: SKOS.altLabel,
    Role.DEFINITION: SKOS.definition,
    Role.SCOPE_NOTE: SKOS.scopeNote,
}
DATE_PREDICATES = {
    Role.START_DATE: SDO.startDate,
    Role.END_DATE: SDO.endDate,
}


def _add_hierarchy(graph: Graph, concept: URIRef, parent: URIRef | None, scheme):
    if parent is None:
        graph.add((concept, SKOS.topConceptOf, scheme))
        graph.add((scheme, SKOS.hasTopConcept, concept))
    else:
        graph.add((concept, SKOS.broader, parent))
        graph.add((parent, SKOS.narrower, concept))


def _add_values(graph: Graph, concept: URIRef, row: Row, table: VocabTable):
    for column in table.columns[2:]:
        value = row[column.position]
        if not value:
            continue
        role = column.role
        if role in LANGUAGE_PREDICATES:
            graph.add(
                (
                    concept,
                    LANGUAGE_PREDICATES[role],
                    Literal(value, lang=column.language),
                )
            )
        elif role in DATE_PREDICATES:
            day = parse_date(value)
            if day is None:
                logger.warning(
                    'Row %i: ignoring invalid date "%s" in column "%s" '
                    "(expected DD/MM/YYYY).",
                    row.line,
                    value,
                    column.header,
                )
                continue
            graph.add(
                (
                    concept,
                    DATE_PREDICATES[role],
                    Literal(day.isoformat(), datatype=XSD.date),
                )
            )
        elif role is Role.LINK:
            graph.add((concept, column.predicate, URIRef(value)))
        elif role is Role.LITERAL:
            graph.add((concept, column.predicate, Literal(value)))


def build_graph(table: VocabTable, base_iri: str) -> Graph:
    """
    Map all rows of the table to a SKOS concept scheme.

    Each row becomes a skos:Concept in the scheme derived from base_iri.
    Rows without parent are top concepts, all others get mirrored
    skos:broader/skos:narrower edges. Parents are not required to exist.

    Raises InputError for rows without identifier and for identifiers that
    collide after sanitization. In that case no graph is returned.
    """
    graph = Graph()
    for prefix, namespace in NAMESPACES.items():
        graph.bind(prefix, namespace)

    scheme = scheme_iri(base_iri)
    graph.add((scheme, RDF.type, SKOS.ConceptScheme))

    seen = {}
    for row in table.rows:
        if not row.identifier:
            msg = "Row %i has no identifier."
            raise InputError(msg % row.line)
        local_id = sanitize_id(row.identifier)
        if local_id in seen:
            msg = 'Row %i: identifier "%s" collides with "%s" from row %i.'
            prev_id, prev_line = seen[local_id]
            raise InputError(msg % (row.line, row.identifier, prev_id, prev_line))
        seen[local_id] = (row.identifier, row.line)

        concept = concept_iri(base_iri, row.identifier)
        graph.add((concept, RDF.type, SKOS.Concept))
        graph.add((concept, SKOS.notation, Literal(row.identifier)))

        parent = concept_iri(base_iri, row.parent) if row.parent else None
        _add_hierarchy(graph, concept, parent, scheme)
        graph.add((concept, SKOS.inScheme, scheme))

        _add_values(graph, concept, row, table)

    dangling = sorted(
        {sanitize_id(row.parent) for row in table.rows if row.parent} - set(seen)
    )
    if dangling:
        logger.debug("Parents without own row: %s", ", ".join(dangling))
    logger.debug("-> built graph with %i concepts.", len(seen))
    return graph
