"""Response schemas for the API.

Field names are snake_case in Python and serialize under the camelCase keys
the dashboard reads.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class WireModel(BaseModel):
    """Base model serializing by camelCase alias."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BranchInfoResponse(WireModel):
    """Branch header card."""
    name: str
    branch_id: str
    date_created: str
    region: str


class CountMetricResponse(WireModel):
    """Integer statistic card."""
    value: int
    change: int
    change_label: str


class AmountMetricResponse(WireModel):
    """Currency statistic card."""
    amount: float
    change: int
    change_label: str
    is_currency: bool = True
    formatted: Optional[str] = None


class StatisticsResponse(WireModel):
    """The four headline statistics."""
    all_cos: CountMetricResponse = Field(alias="allCOs")
    all_customers: CountMetricResponse
    active_loans: CountMetricResponse
    loans_processed: AmountMetricResponse


class CreditOfficerResponse(WireModel):
    """Credit officer roster row."""
    id: str
    name: str
    id_number: str
    status: str
    phone: str
    email: str
    date_joined: str


class ReportResponse(WireModel):
    """Submitted report row."""
    id: str
    report_id: str
    branch_name: str
    time_sent: str
    date: str


class MissedReportResponse(WireModel):
    """Missed report row."""
    id: str
    report_id: str
    branch_name: str
    status: str
    date_due: str


class BranchBundleResponse(WireModel):
    """Complete sample data for one branch."""
    branch_info: BranchInfoResponse
    statistics: StatisticsResponse
    credit_officers: list[CreditOfficerResponse]
    reports: list[ReportResponse]
    missed_reports: list[MissedReportResponse]


class HealthResponse(BaseModel):
    """Liveness probe response."""
    status: str
    timestamp: str
    version: str
    pool_sizes: dict[str, int]


class ErrorResponse(BaseModel):
    """Structured error response."""
    error: str
    code: str
    details: Optional[dict] = None
    request_id: str
