"""Read vocabulary tables from delimited text files or xlsx workbooks."""

import csv
import logging
from datetime import date
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from skosifier.checks import InputError
from skosifier.models import Row, VocabTable

logger = logging.getLogger(__name__)

TEXT_FILE_ENDINGS = [".csv", ".txt", ".tsv"]
EXCEL_FILE_ENDINGS = [".xlsx"]
KNOWN_FILE_ENDINGS = TEXT_FILE_ENDINGS + EXCEL_FILE_ENDINGS


def _tidy(value) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        # xlsx date cells; the time of datetime cells is dropped
        return value.strftime("%d/%m/%Y")
    return str(value).strip()


def _read_text(path: Path, delimiter: str, encoding: str) -> list[list[str]]:
    if path.suffix.lower() == ".tsv":
        delimiter = "\t"
    with open(path, newline="", encoding=encoding) as fp:
        reader = csv.reader(fp, delimiter=delimiter)
        return [[_tidy(cell) for cell in row] for row in reader]


def _read_xlsx(path: Path) -> list[list[str]]:
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        logger.debug('-> reading sheet "%s"', ws.title)
        rows = [[_tidy(cell) for cell in row] for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()
    # Trailing empty cells are part of the used range in xlsx; trim them to
    # the width of the header.
    if rows:
        header = rows[0]
        while header and not header[-1]:
            header.pop()
        rows = [header] + [row[: len(header)] for row in rows[1:]]
    return rows


def read_table(path: Path, delimiter: str = ";", encoding: str = "utf-8") -> VocabTable:
    """
    Read the table in path. The first row is the header.

    Completely empty lines are skipped. Raises InputError if the file cannot
    be read or a row does not match the header.
    """
    path = Path(path)
    if not path.is_file():
        msg = "File not found: %s"
        raise InputError(msg % path)
    try:
        if path.suffix.lower() in EXCEL_FILE_ENDINGS:
            raw_rows = _read_xlsx(path)
        else:
            raw_rows = _read_text(path, delimiter, encoding)
    except (OSError, UnicodeDecodeError, csv.Error, InvalidFileException) as exc:
        msg = 'Failed to read input file "%s": %s'
        raise InputError(msg % (path, exc)) from exc

    numbered = [
        (line, row) for line, row in enumerate(raw_rows, start=1) if any(row)
    ]
    if not numbered:
        msg = "Input file is empty: %s"
        raise InputError(msg % path)

    (_, header), *data = numbered
    table = VocabTable.from_rows(
        header, [Row.from_fields(header, fields, line) for line, fields in data]
    )
    logger.info("-> read %i rows from %s", len(table.rows), path)
    return table
