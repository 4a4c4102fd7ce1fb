import logging
from pathlib import Path

from skosifier import config
from skosifier.assemble import build_graph
from skosifier.checks import check_graph
from skosifier.emit import write_graph, write_per_concept
from skosifier.html import write_html
from skosifier.reader import read_table

logger = logging.getLogger(__name__)


def convert_file(
    infile: Path,
    outdir: Path,
    base_iri: str,
    settings: config.Settings | None = None,
) -> list[Path]:
    """
    Convert the table in infile to SKOS files in outdir.

    The graph is built completely before anything is written. Returns the
    list of written files.
    """
    settings = config.SETTINGS if settings is None else settings

    table = read_table(infile, delimiter=settings.delimiter, encoding=settings.encoding)
    graph = build_graph(table, base_iri)
    for problem in check_graph(graph):
        logger.warning(problem)

    written = write_graph(graph, outdir, settings.formats)
    if settings.per_concept:
        written += write_per_concept(
            graph, outdir / settings.per_concept_dir, settings.per_concept_format
        )
    if settings.html:
        written += write_html(table, outdir, settings.html_dir)
    return written


# ===== convert command =====


def convert(args):
    logger.debug("Convert command started!")

    settings = config.SETTINGS.updated(
        formats=args.formats,
        per_concept=True if args.per_concept else None,
        html=True if args.html else None,
    )
    written = convert_file(args.INPUT, args.OUTDIR, args.BASE_IRI, settings)
    logger.info("-> successfully wrote %i file(s) to %s", len(written), args.OUTDIR)
