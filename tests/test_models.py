import pytest

from skosifier.checks import InputError
from skosifier.header import Role
from skosifier.models import Row, VocabTable


def test_row_access():
    row = Row.from_fields(["id", "parent", "nl"], ["A", "", "Root"], line=2)
    assert row.identifier == "A"
    assert row.parent == ""
    assert row[2] == "Root"
    assert len(row) == 3  # noqa: PLR2004
    assert row.line == 2  # noqa: PLR2004


def test_row_none_is_empty_string():
    row = Row.from_fields(["id", "parent"], ["A", None])
    assert row.parent == ""


def test_row_length_mismatch():
    with pytest.raises(InputError, match="Row 7 has 2 fields but the header has 3"):
        Row.from_fields(["id", "parent", "nl"], ["A", ""], line=7)


def test_row_is_immutable():
    row = Row(("A", ""))
    with pytest.raises(AttributeError):
        row.fields = ("B", "")


def test_table_from_rows():
    table = VocabTable.from_rows(
        ["id", "parent", "fr"], [["A", "", "a"], ["B", "A", "b"]]
    )
    assert table.header == ("id", "parent", "fr")
    assert [row.line for row in table.rows] == [2, 3]
    assert table.columns[2].role is Role.PREF_LABEL


def test_table_row_mismatch_reports_line():
    with pytest.raises(InputError, match="Row 3 has 4 fields"):
        VocabTable.from_rows(["id", "parent", "fr"], [["A", "", "a"], ["B", "A", "b", "x"]])


def test_table_needs_two_columns():
    with pytest.raises(InputError, match="at least an identifier and a parent"):
        VocabTable.from_rows(["id"], [])


def test_table_accepts_rows():
    rows = [Row(("A", "", "a"), line=10)]
    table = VocabTable.from_rows(["id", "parent", "en"], rows)
    assert table.rows[0].line == 10  # noqa: PLR2004
    with pytest.raises(InputError, match="Row 10 has 3 fields"):
        VocabTable.from_rows(["id", "parent"], rows)
