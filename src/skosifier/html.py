"""Simple html table views of the input table."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from skosifier.checks import OutputError
from skosifier.models import VocabTable
from skosifier.scheme import sanitize_id

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _load_template(template_file):
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR), autoescape=True
    ).get_template(template_file)


def _write(outfile: Path, content: str) -> None:
    try:
        with open(outfile, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        msg = 'Cannot write "%s": %s'
        raise OutputError(msg % (outfile, exc)) from exc


def write_html(table: VocabTable, outdir: Path, subdir: str = "html") -> list[Path]:
    """
    Write index.html with all rows and one page per row to outdir/subdir.

    Identifiers and parents link to the page of the respective row. Page names
    use the sanitized identifier like the concept IRIs.
    """
    template = _load_template("table.html")
    pagedir = outdir / subdir
    try:
        pagedir.mkdir(exist_ok=True, parents=True)
    except OSError as exc:
        msg = 'Cannot create directory "%s": %s'
        raise OutputError(msg % (pagedir, exc)) from exc

    pages = {row.identifier: f"{sanitize_id(row.identifier)}.html" for row in table.rows}

    index = outdir / "index.html"
    _write(
        index,
        template.render(
            title="Index",
            header=table.header,
            rows=table.rows,
            links={ident: f"{subdir}/{page}" for ident, page in pages.items()},
        ),
    )
    written = [index]
    for row in table.rows:
        outfile = pagedir / pages[row.identifier]
        _write(
            outfile,
            template.render(
                title=row.identifier, header=table.header, rows=[row], links=pages
            ),
        )
        written.append(outfile)
    logger.debug("-> wrote %i html page(s) to %s", len(written), outdir)
    return written
