from conftest import BASE
from rdflib import RDF, SKOS, URIRef

from skosifier.assemble import build_graph
from skosifier.checks import broader_cycles, check_graph

SCHEME = URIRef("http://example.org/voc")


def test_valid_graph_has_no_problems(make_table):
    table = make_table(["id", "parent"], ["A", ""], ["B", "A"], ["C", "B"])
    assert check_graph(build_graph(table, BASE)) == []


def test_cycle_detected(make_table):
    table = make_table(["id", "parent"], ["A", "B"], ["B", "A"])
    graph = build_graph(table, BASE)
    assert broader_cycles(graph) == [[URIRef(BASE + "A"), URIRef(BASE + "B")]]
    problems = check_graph(graph)
    assert len(problems) == 1
    assert problems[0].startswith("Cycle in broader hierarchy: ")


def test_cycle_follows_broader_edges(make_table):
    table = make_table(["id", "parent"], ["A", "C"], ["C", "B"], ["B", "A"])
    graph = build_graph(table, BASE)
    a, b, c = (URIRef(BASE + local) for local in "ABC")
    assert broader_cycles(graph) == [[a, c, b]]
    assert check_graph(graph) == [
        f"Cycle in broader hierarchy: {BASE}A -> {BASE}C -> {BASE}B"
    ]


def test_missing_mirror_and_scheme_edges(make_table):
    graph = build_graph(make_table(["id", "parent"], ["A", ""], ["B", "A"]), BASE)
    a, b = URIRef(BASE + "A"), URIRef(BASE + "B")
    graph.remove((a, SKOS.narrower, b))
    graph.remove((SCHEME, SKOS.hasTopConcept, a))
    graph.remove((b, SKOS.inScheme, SCHEME))
    graph.add((b, SKOS.topConceptOf, SCHEME))

    problems = "\n".join(check_graph(graph))
    assert "is missing skos:narrower" in problems
    assert "is missing skos:hasTopConcept" in problems
    assert "must be in scheme" in problems
    assert "must have either a broader concept or be a top concept" in problems


def test_one_scheme_required(make_table):
    graph = build_graph(make_table(["id", "parent"], ["A", ""]), BASE)
    graph.add((URIRef("http://example.org/other"), RDF.type, SKOS.ConceptScheme))
    assert check_graph(graph) == ["Expected exactly one concept scheme, found 2."]
