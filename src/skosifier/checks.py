"""Error classes and consistency checks for assembled SKOS graphs.

The assembler keeps the scheme invariants. Cyclic parent relations in the
input are not rejected by the assembler and are only reported here.
"""

import logging

import networkx as nx
from curies import Converter
from rdflib import RDF, SKOS, Graph

logger = logging.getLogger(__name__)


class SkosifierError(Exception):
    pass


class InputError(SkosifierError):
    """The input table cannot be read or is structurally invalid."""


class OutputError(SkosifierError):
    """An output directory or file cannot be written."""


def _converter_for(graph: Graph) -> Converter:
    # curies requires unique URI prefixes; the first binding of a namespace wins.
    prefix_by_uri = {}
    for prefix, uri in graph.namespaces():
        if prefix:
            prefix_by_uri.setdefault(str(uri), prefix)
    return Converter.from_prefix_map(
        {prefix: uri for uri, prefix in prefix_by_uri.items()}
    )


def broader_cycles(graph: Graph) -> list[list]:
    """
    Return the cycles of the skos:broader hierarchy as lists of IRIs.

    Each cycle follows the broader edges and starts at its smallest IRI.
    """
    dag = nx.DiGraph()
    dag.add_edges_from(graph.subject_objects(SKOS.broader))
    cycles = []
    for cycle in nx.simple_cycles(dag):
        start = cycle.index(min(cycle))
        cycles.append(cycle[start:] + cycle[:start])
    return sorted(cycles)


def check_graph(graph: Graph) -> list[str]:
    """
    Verify the concept scheme invariants of a graph.

    Returns a list of problem descriptions. An empty list means that
    - there is exactly one skos:ConceptScheme,
    - every concept has exactly one skos:inScheme to that scheme,
    - every concept has either skos:broader or skos:topConceptOf (not both),
    - all broader/narrower and topConceptOf/hasTopConcept edges are mirrored,
    - the broader hierarchy has no cycles.
    """
    converter = _converter_for(graph)

    def c(iri):
        return converter.compress(str(iri), passthrough=True)

    problems = []
    schemes = sorted(graph.subjects(RDF.type, SKOS.ConceptScheme))
    if len(schemes) != 1:
        problems.append(f"Expected exactly one concept scheme, found {len(schemes)}.")
        return problems
    scheme = schemes[0]

    for concept in sorted(graph.subjects(RDF.type, SKOS.Concept)):
        in_scheme = list(graph.objects(concept, SKOS.inScheme))
        if in_scheme != [scheme]:
            problems.append(
                f"{c(concept)} must be in scheme {c(scheme)} exactly once "
                f"(found: {', '.join(c(s) for s in in_scheme) or 'none'})."
            )
        has_parent = (concept, SKOS.broader, None) in graph
        is_top = (concept, SKOS.topConceptOf, scheme) in graph
        if has_parent == is_top:
            problems.append(
                f"{c(concept)} must have either a broader concept or be a top concept."
            )
        if is_top and (scheme, SKOS.hasTopConcept, concept) not in graph:
            problems.append(f"{c(scheme)} is missing skos:hasTopConcept {c(concept)}.")

    for child, parent in sorted(graph.subject_objects(SKOS.broader)):
        if (parent, SKOS.narrower, child) not in graph:
            problems.append(f"{c(parent)} is missing skos:narrower {c(child)}.")
    for parent, child in sorted(graph.subject_objects(SKOS.narrower)):
        if (child, SKOS.broader, parent) not in graph:
            problems.append(f"{c(child)} is missing skos:broader {c(parent)}.")

    for cycle in broader_cycles(graph):
        problems.append(
            "Cycle in broader hierarchy: " + " -> ".join(c(iri) for iri in cycle)
        )

    logger.debug("-> graph check found %i problem(s).", len(problems))
    return problems
