import logging

from conftest import BASE, CS_FULL, CS_SIMPLE
from rdflib import DCTERMS, OWL, SKOS, Graph, Literal, URIRef

from skosifier.config import Settings
from skosifier.convert import convert_file


def test_convert_file_uses_global_settings(datadir, tmp_path, temp_config):
    temp_config.load_config(settings=Settings(formats=["jsonld"]))
    written = convert_file(datadir / CS_SIMPLE, tmp_path, BASE)
    assert written == [tmp_path / "skos.jsonld"]


def test_convert_file_all_outputs(datadir, tmp_path):
    settings = Settings(formats=["nt", "rdf"], per_concept=True, html=True)
    written = convert_file(datadir / CS_FULL, tmp_path, BASE, settings)
    names = {p.relative_to(tmp_path).as_posix() for p in written}
    assert names == {
        "skos.nt",
        "skos.rdf",
        "ttl/1.ttl",
        "ttl/1_1.ttl",
        "ttl/1_2.ttl",
        "index.html",
        "html/1.html",
        "html/1_1.html",
        "html/1_2.html",
    }

    graph = Graph().parse(tmp_path / "skos.rdf", format="xml")
    one = URIRef(BASE + "1")
    assert (one, SKOS.exactMatch, URIRef("http://www.wikidata.org/entity/Q199")) in graph
    assert (one, DCTERMS.source, Literal("Registry")) in graph
    assert (one, SKOS.altLabel, Literal("Een", lang="nl")) in graph
    assert (one, SKOS.definition, Literal("Le nombre un", lang="fr")) in graph
    assert (one, SKOS.scopeNote, Literal("Top level", lang="en")) in graph
    assert (one, OWL.sameAs, None) not in graph


def test_graph_problems_are_logged(tmp_path, caplog):
    infile = tmp_path / "cycle.csv"
    infile.write_text("id;parent\nA;B\nB;A\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        convert_file(infile, tmp_path / "out", BASE, Settings())
    assert "Cycle in broader hierarchy" in caplog.text
    assert (tmp_path / "out" / "skos.ttl").exists()
