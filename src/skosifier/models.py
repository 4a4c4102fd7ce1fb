"""Row model of the input table.

A table is a header plus rows of plain strings. Field 0 of a row is the
concept identifier and field 1 the identifier of its parent. Empty strings
mean "no value".
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from skosifier.checks import InputError
from skosifier.header import ColumnRole, classify_header

logger = logging.getLogger(__name__)

MIN_COLUMNS = 2


@dataclass(frozen=True)
class Row:
    fields: tuple[str, ...]
    line: int = 0  # line number in the input, used in messages

    @classmethod
    def from_fields(cls, header: Sequence[str], fields: Iterable, line: int = 0):
        fields = tuple("" if value is None else str(value) for value in fields)
        if len(fields) != len(header):
            msg = "Row %i has %i fields but the header has %i columns."
            raise InputError(msg % (line, len(fields), len(header)))
        return cls(fields, line)

    @property
    def identifier(self) -> str:
        return self.fields[0]

    @property
    def parent(self) -> str:
        return self.fields[1]

    def __getitem__(self, position: int) -> str:
        return self.fields[position]

    def __len__(self) -> int:
        return len(self.fields)


@dataclass(frozen=True)
class VocabTable:
    header: tuple[str, ...]
    rows: tuple[Row, ...]
    columns: tuple[ColumnRole, ...]

    @classmethod
    def from_rows(cls, header: Sequence[str], rows: Iterable, first_line: int = 2):
        """
        Build a table from a header and raw rows.

        Raw rows may be sequences of strings or Row instances. Line numbers
        of raw rows are counted from first_line (the header is line 1).
        """
        header = tuple(str(cell) for cell in header)
        if len(header) < MIN_COLUMNS:
            msg = "The header needs at least an identifier and a parent column (found: %s)."
            raise InputError(msg % ", ".join(header))
        table_rows = []
        for line, raw in enumerate(rows, start=first_line):
            if isinstance(raw, Row):
                if len(raw) != len(header):
                    msg = "Row %i has %i fields but the header has %i columns."
                    raise InputError(msg % (raw.line, len(raw), len(header)))
                table_rows.append(raw)
            else:
                table_rows.append(Row.from_fields(header, raw, line))
        logger.debug("-> table with %i columns and %i rows", len(header), len(table_rows))
        return cls(header, tuple(table_rows), classify_header(header))
