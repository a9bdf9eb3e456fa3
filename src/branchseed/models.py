"""
branchseed Bundle Models

Immutable value types for one generated branch bundle.

Key components:
- BranchInfo: Name, numeric id, creation date and region of the branch
- Metric / Statistics: The four headline statistic cards
- CreditOfficer: One member of the branch's credit officer roster
- Report / MissedReport: Report rows referencing roster officers
- BranchBundle: Everything above, as returned by the generator

Each model serializes with to_dict() into the camelCase shape the dashboard
consumes, so a bundle can be dropped straight into the UI's props.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union

from .formatting import change_label


MISSED_STATUS = "Missed"


# =============================================================================
# Branch Info
# =============================================================================

@dataclass(frozen=True)
class BranchInfo:
    """
    Branch header card.

    Attributes:
        name: Branch display name
        branch_id: 8-digit numeric identifier, as a string
        date_created: Display date ("Nov 29, 2023")
        region: State the branch operates in
    """
    name: str
    branch_id: str
    date_created: str
    region: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dashboard's wire shape."""
        return {
            "name": self.name,
            "branchId": self.branch_id,
            "dateCreated": self.date_created,
            "region": self.region,
        }


# =============================================================================
# Statistics
# =============================================================================

@dataclass(frozen=True)
class Metric:
    """
    One statistic card: a value and its month-over-month change.

    Currency metrics carry a float amount and serialize the value under
    "amount" with an isCurrency flag; count metrics are integers under
    "value".
    """
    value: Union[int, float]
    change: int
    is_currency: bool = False

    @property
    def change_label(self) -> str:
        return change_label(self.change)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dashboard's wire shape."""
        if self.is_currency:
            return {
                "amount": self.value,
                "change": self.change,
                "changeLabel": self.change_label,
                "isCurrency": True,
            }
        return {
            "value": self.value,
            "change": self.change,
            "changeLabel": self.change_label,
        }


@dataclass(frozen=True)
class Statistics:
    """
    The branch's four headline statistics.

    Attributes:
        all_cos: Number of credit officers
        all_customers: Number of customers
        active_loans: Number of active loans
        loans_processed: Amount of loans processed (currency)
    """
    all_cos: Metric
    all_customers: Metric
    active_loans: Metric
    loans_processed: Metric

    def to_dict(self) -> dict[str, Any]:
        return {
            "allCOs": self.all_cos.to_dict(),
            "allCustomers": self.all_customers.to_dict(),
            "activeLoans": self.active_loans.to_dict(),
            "loansProcessed": self.loans_processed.to_dict(),
        }


# =============================================================================
# Roster and Reports
# =============================================================================

@dataclass(frozen=True)
class CreditOfficer:
    """
    A credit officer on the branch roster.

    Attributes:
        id: Sequential roster id ("co-1", "co-2", ...)
        name: Full name, unique within the branch
        id_number: 5-digit staff number, as a string
        status: "Active" or "In active"
        phone: Nigerian mobile number ("+234...")
        email: Address derived from the officer's name
        date_joined: Display date
    """
    id: str
    name: str
    id_number: str
    status: str
    phone: str
    email: str
    date_joined: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "idNumber": self.id_number,
            "status": self.status,
            "phone": self.phone,
            "email": self.email,
            "dateJoined": self.date_joined,
        }


@dataclass(frozen=True)
class Report:
    """
    A submitted report row.

    The dashboard's reports table labels its columns "branchName" and
    "timeSent" but fills them with the submitting officer's name and email.
    """
    id: str
    report_id: str
    branch_name: str
    time_sent: str
    date: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "reportId": self.report_id,
            "branchName": self.branch_name,
            "timeSent": self.time_sent,
            "date": self.date,
        }


@dataclass(frozen=True)
class MissedReport:
    """A report an officer failed to send before its due date."""
    id: str
    report_id: str
    branch_name: str
    date_due: str
    status: str = MISSED_STATUS

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "reportId": self.report_id,
            "branchName": self.branch_name,
            "status": self.status,
            "dateDue": self.date_due,
        }


# =============================================================================
# Bundle
# =============================================================================

@dataclass(frozen=True)
class BranchBundle:
    """
    Complete sample data for one branch.

    Attributes:
        branch_info: Branch header card
        statistics: Headline statistics
        credit_officers: Roster (5-15 officers)
        reports: Submitted reports (8-20)
        missed_reports: Missed reports (2-8)
    """
    branch_info: BranchInfo
    statistics: Statistics
    credit_officers: tuple[CreditOfficer, ...]
    reports: tuple[Report, ...]
    missed_reports: tuple[MissedReport, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the dashboard's wire shape."""
        return {
            "branchInfo": self.branch_info.to_dict(),
            "statistics": self.statistics.to_dict(),
            "creditOfficers": [o.to_dict() for o in self.credit_officers],
            "reports": [r.to_dict() for r in self.reports],
            "missedReports": [m.to_dict() for m in self.missed_reports],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON text (key order is stable)."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def count_officers(self, status: str) -> int:
        """Number of roster officers with the given status."""
        return sum(1 for o in self.credit_officers if o.status == status)


__all__ = [
    "MISSED_STATUS",
    "BranchInfo",
    "Metric",
    "Statistics",
    "CreditOfficer",
    "Report",
    "MissedReport",
    "BranchBundle",
]
