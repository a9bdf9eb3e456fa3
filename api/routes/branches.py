"""Sample branch data endpoints."""

from __future__ import annotations

import logging
import re
import time
from datetime import date
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import Response

from api.schemas.responses import (
    BranchBundleResponse,
    ErrorResponse,
    StatisticsResponse,
)
from branchseed.export import export_filename, export_table
from branchseed.formatting import format_naira
from branchseed.generator import BranchDataGenerator
from branchseed.models import BranchBundle
from branchseed.pools import SamplePools, default_pools

router = APIRouter(prefix="/branches", tags=["Branches"])

logger = logging.getLogger("branchseed.api")

# Shared configuration (set by main.py)
pools: Optional[SamplePools] = None
fixed_now: Optional[date] = None


def set_config(p: Optional[SamplePools], now: Optional[date]):
    global pools, fixed_now
    pools = p
    fixed_now = now


def content_disposition(filename: str) -> str:
    """
    Build an attachment header that survives any branch id.

    Header values must be latin-1, so the quoted filename falls back to
    ASCII (non-ASCII, quotes and backslashes become "_") and the exact name
    travels percent-encoded in filename* (RFC 6266).
    """
    fallback = re.sub(r'[^\x20-\x7e]|["\\]', "_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _generate(request: Request, branch_id: str, now: Optional[date]) -> BranchBundle:
    """Generate a bundle with a fresh generator and log it."""
    start_time = time.time()
    generator = BranchDataGenerator(
        pools=pools or default_pools(),
        now=now or fixed_now,
    )
    bundle = generator.generate(branch_id)

    logger.info(
        "Bundle generated",
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "branch_id": branch_id,
            "officer_count": len(bundle.credit_officers),
            "duration_ms": int((time.time() - start_time) * 1000),
        },
    )
    return bundle


@router.get(
    "/{branch_id}/sample",
    response_model=BranchBundleResponse,
    response_model_exclude_none=True,
)
async def get_branch_sample(request: Request, branch_id: str, now: Optional[date] = None):
    """
    Get the sample data bundle for a branch.

    The same branch id always returns the same bundle; pass `now`
    (YYYY-MM-DD) to pin the date fields as well.
    """
    bundle = _generate(request, branch_id, now)
    return BranchBundleResponse.model_validate(bundle.to_dict())


@router.get("/{branch_id}/statistics", response_model=StatisticsResponse)
async def get_branch_statistics(request: Request, branch_id: str, now: Optional[date] = None):
    """Get only the statistic cards, with the processed amount formatted."""
    bundle = _generate(request, branch_id, now)
    data = bundle.statistics.to_dict()
    loans = data["loansProcessed"]
    loans["formatted"] = format_naira(loans["amount"])
    return StatisticsResponse.model_validate(data)


@router.get(
    "/{branch_id}/sample/{table}.csv",
    responses={404: {"model": ErrorResponse, "description": "Unknown table"}},
)
async def export_branch_table(
    request: Request,
    branch_id: str,
    table: str,
    now: Optional[date] = None,
):
    """
    Download one bundle table as CSV.

    Tables: credit-officers, reports, missed-reports
    """
    bundle = _generate(request, branch_id, now)
    csv_text = export_table(bundle, table)
    filename = export_filename(branch_id, table)
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": content_disposition(filename)},
    )
