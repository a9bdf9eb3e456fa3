"""Tests for export.py"""

import csv
import io

import pytest

from branchseed.exceptions import ExportError, UnknownTableError
from branchseed.export import (
    TABLES,
    export_filename,
    export_table,
    table_headers,
    table_rows,
    to_csv,
)


@pytest.fixture
def bundle(generator):
    return generator.generate("branch-001")


def _parse(text):
    return list(csv.DictReader(io.StringIO(text)))


class TestExportTable:

    def test_credit_officers(self, bundle):
        text = export_table(bundle, "credit-officers")
        assert text.splitlines()[0] == "id,name,idNumber,status,phone,email,dateJoined"
        rows = _parse(text)
        assert len(rows) == len(bundle.credit_officers)
        assert rows[0]["name"] == "Funke Akindele"
        assert rows[0]["phone"] == "+2348086552932"

    def test_reports(self, bundle):
        rows = _parse(export_table(bundle, "reports"))
        assert len(rows) == 20
        assert rows[0]["reportId"] == bundle.reports[0].report_id

    def test_missed_reports(self, bundle):
        rows = _parse(export_table(bundle, "missed-reports"))
        assert len(rows) == 8
        assert {row["status"] for row in rows} == {"Missed"}

    def test_dates_with_commas_are_quoted(self, bundle):
        text = export_table(bundle, "reports")
        assert f'"{bundle.reports[0].date}"' in text

    @pytest.mark.parametrize("table", sorted(TABLES))
    def test_rows_match_headers(self, bundle, table):
        for row in table_rows(bundle, table):
            assert tuple(row) == table_headers(table)

    def test_unknown_table(self, bundle):
        with pytest.raises(UnknownTableError) as exc_info:
            export_table(bundle, "customers")
        assert exc_info.value.code == "BS_UNKNOWN_TABLE"
        assert isinstance(exc_info.value, ExportError)
        assert exc_info.value.details["available"] == sorted(TABLES)


class TestToCsv:

    def test_missing_keys_are_blank(self):
        assert to_csv([{"a": 1}], ("a", "b")) == "a,b\n1,\n"

    def test_empty_rows(self):
        assert to_csv([], ["x"]) == "x\n"


class TestExportFilename:

    def test_filename(self):
        assert export_filename("branch-001", "reports") == "branch-001-reports.csv"

    def test_empty_id_uses_default(self):
        assert export_filename("", "credit-officers") == "default-credit-officers.csv"
