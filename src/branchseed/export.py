"""
CSV export for generated bundles.

Each table of a bundle (credit officers, reports, missed reports) exports as
a CSV with a fixed header row of wire keys, the same rows the dashboard's
"Export" buttons download.
"""

from __future__ import annotations

import csv
import io
from typing import Any

from .exceptions import UnknownTableError
from .models import BranchBundle
from .rng import normalize_seed

TABLES: dict[str, tuple[str, ...]] = {
    "credit-officers": (
        "id", "name", "idNumber", "status", "phone", "email", "dateJoined",
    ),
    "reports": ("id", "reportId", "branchName", "timeSent", "date"),
    "missed-reports": ("id", "reportId", "branchName", "status", "dateDue"),
}


def table_headers(table: str) -> tuple[str, ...]:
    """Return the header row for a table, raising UnknownTableError if unknown."""
    try:
        return TABLES[table]
    except KeyError:
        raise UnknownTableError(
            f"Unknown table '{table}'",
            details={"available": sorted(TABLES)},
        ) from None


def table_rows(bundle: BranchBundle, table: str) -> list[dict[str, Any]]:
    """Return the rows of one bundle table as wire dicts."""
    table_headers(table)
    if table == "credit-officers":
        items = bundle.credit_officers
    elif table == "reports":
        items = bundle.reports
    else:
        items = bundle.missed_reports
    return [item.to_dict() for item in items]


def to_csv(rows: list[dict[str, Any]], headers: tuple[str, ...] | list[str]) -> str:
    """
    Render rows as CSV text.

    Values are written in header order; missing keys become empty cells.
    Fields containing commas, quotes or newlines are quoted.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([row.get(header, "") for header in headers])
    return buffer.getvalue()


def export_table(bundle: BranchBundle, table: str) -> str:
    """Export one bundle table as CSV text."""
    return to_csv(table_rows(bundle, table), table_headers(table))


def export_filename(branch_id: str, table: str) -> str:
    """Download filename for an exported table."""
    return f"{normalize_seed(branch_id)}-{table}.csv"


__all__ = [
    "TABLES",
    "table_headers",
    "table_rows",
    "to_csv",
    "export_table",
    "export_filename",
]
