"""
branchseed: Branch Data Generator

Builds a consistent sample-data bundle for one branch from its id. The same
branch id always yields the same names, numbers and roster; only the date
fields follow the generation date ("now"), so sample data ages naturally
unless a fixed `now` is supplied.

Key components:
- BranchDataGenerator: Composes the entity synthesizers into a bundle
- generate_branch_data: Functional entry point

Design Principles:
- Deterministic: Same branch id + same now + same pools = identical bundle
- Parity: Draw order and formulas match the dashboard's built-in generator,
  so bundles for a given id are identical draw for draw
- Local state: Each generate() call owns its SeededRandom; nothing is shared

Draw order (changing it changes every later value):
    branch info -> statistics -> credit officers -> reports -> missed reports

Example:
    >>> from datetime import date
    >>> bundle = generate_branch_data("branch-001", now=date(2024, 1, 1))
    >>> bundle.branch_info.name
    'Yaba Office'
    >>> bundle.statistics.all_cos.change_label
    '+8% this month'
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from .formatting import DateLike, as_date, days_before, display_date
from .models import (
    BranchBundle,
    BranchInfo,
    CreditOfficer,
    Metric,
    MissedReport,
    Report,
    Statistics,
)
from .pools import MAX_ROSTER_SIZE, SamplePools, default_pools
from .rng import SeededRandom


# =============================================================================
# Constants
# =============================================================================

BRANCH_ID_RANGE = (10_000_000, 99_999_999)
BRANCH_AGE_DAYS = (1, 730)

# (value range, change range) per statistic card
OFFICER_COUNT_RANGE = (15, 85)
OFFICER_COUNT_CHANGE = (-15, 25)
CUSTOMER_COUNT_RANGE = (5_000, 45_000)
CUSTOMER_COUNT_CHANGE = (-10, 30)
ACTIVE_LOANS_RANGE = (10_000, 60_000)
ACTIVE_LOANS_CHANGE = (-30, 40)
LOANS_PROCESSED_RANGE = (20_000, 150_000)
LOANS_PROCESSED_CHANGE = (-20, 50)

ROSTER_SIZE_RANGE = (5, MAX_ROSTER_SIZE)
STAFF_NUMBER_RANGE = (10_000, 99_999)
# Draws above this threshold are active: 80% active, 20% inactive
INACTIVE_THRESHOLD = 0.2
PHONE_COUNTRY_CODE = "+234"
PHONE_PREFIX_RANGE = (800, 909)
PHONE_SUBSCRIBER_RANGE = (1_000_000, 9_999_999)
MIN_TENURE_DAYS = 30

REPORT_COUNT_RANGE = (8, 20)
REPORT_AGE_DAYS = (1, 365)
REPORT_NUMBER_RANGE = (10_000, 99_999)

MISSED_REPORT_COUNT_RANGE = (2, 8)
MISSED_REPORT_AGE_DAYS = (1, 180)


# =============================================================================
# Generator
# =============================================================================

class BranchDataGenerator:
    """
    Generates sample branch bundles.

    The generator itself holds only configuration (pools and an optional
    pinned date); each generate() call seeds its own SeededRandom, so one
    instance can be shared freely.

    Usage:
        >>> generator = BranchDataGenerator(now=date(2024, 1, 1))
        >>> bundle = generator.generate("branch-001")
        >>> len(bundle.credit_officers)
        10
    """

    def __init__(
        self,
        pools: Optional[SamplePools] = None,
        now: Optional[DateLike] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            pools: Sample pools to draw from (defaults to the packaged pools)
            now: Fixed generation date; None means today's date at each call
        """
        self.pools = pools or default_pools()
        self.now = as_date(now) if now is not None else None

    def generate(self, branch_id: Optional[str]) -> BranchBundle:
        """
        Generate the bundle for one branch.

        Args:
            branch_id: Branch identifier; empty or None behaves as "default"

        Returns:
            BranchBundle for the branch
        """
        rng = SeededRandom(branch_id)
        today = self.now if self.now is not None else date.today()

        branch_info, days_ago = self._generate_branch_info(rng, today)
        statistics = self._generate_statistics(rng)
        officers = self._generate_credit_officers(rng, today, days_ago)
        reports = self._generate_reports(rng, today, officers)
        missed = self._generate_missed_reports(rng, today, officers)

        return BranchBundle(
            branch_info=branch_info,
            statistics=statistics,
            credit_officers=officers,
            reports=reports,
            missed_reports=missed,
        )

    def _generate_branch_info(
        self,
        rng: SeededRandom,
        today: date,
    ) -> tuple[BranchInfo, int]:
        """Generate the branch header; also returns the branch age in days."""
        name = rng.choice(self.pools.branch_names)
        region = rng.choice(self.pools.regions)
        branch_number = rng.next_int(*BRANCH_ID_RANGE)
        days_ago = rng.next_int(*BRANCH_AGE_DAYS)

        info = BranchInfo(
            name=name,
            branch_id=str(branch_number),
            date_created=display_date(days_before(today, days_ago)),
            region=region,
        )
        return info, days_ago

    def _generate_statistics(self, rng: SeededRandom) -> Statistics:
        """Generate the four statistic cards (all values first, then changes)."""
        all_cos = rng.next_int(*OFFICER_COUNT_RANGE)
        all_customers = rng.next_int(*CUSTOMER_COUNT_RANGE)
        active_loans = rng.next_int(*ACTIVE_LOANS_RANGE)
        loans_processed = rng.next_float(*LOANS_PROCESSED_RANGE)

        return Statistics(
            all_cos=Metric(all_cos, rng.next_int(*OFFICER_COUNT_CHANGE)),
            all_customers=Metric(all_customers, rng.next_int(*CUSTOMER_COUNT_CHANGE)),
            active_loans=Metric(active_loans, rng.next_int(*ACTIVE_LOANS_CHANGE)),
            loans_processed=Metric(
                loans_processed,
                rng.next_int(*LOANS_PROCESSED_CHANGE),
                is_currency=True,
            ),
        )

    def _generate_credit_officers(
        self,
        rng: SeededRandom,
        today: date,
        days_ago: int,
    ) -> tuple[CreditOfficer, ...]:
        """
        Generate the branch roster.

        Names are unique within the roster: a drawn name that is already
        taken is redrawn. SamplePools guarantees at least as many names as
        the largest roster, so this always terminates.
        """
        count = rng.next_int(*ROSTER_SIZE_RANGE)
        officers: list[CreditOfficer] = []
        used_names: set[str] = set()

        for i in range(count):
            name = rng.choice(self.pools.officer_names)
            while name in used_names:
                name = rng.choice(self.pools.officer_names)
            used_names.add(name)

            id_number = rng.next_int(*STAFF_NUMBER_RANGE)
            if rng.next() > INACTIVE_THRESHOLD:
                status = self.pools.active_status
            else:
                status = self.pools.inactive_status
            phone = (
                f"{PHONE_COUNTRY_CODE}"
                f"{rng.next_int(*PHONE_PREFIX_RANGE)}"
                f"{rng.next_int(*PHONE_SUBSCRIBER_RANGE)}"
            )
            email = f"{_email_prefix(name)}@{rng.choice(self.pools.email_domains)}"
            # Branches younger than MIN_TENURE_DAYS get high < low here; kept as-is
            join_days_ago = rng.next_int(MIN_TENURE_DAYS, days_ago)

            officers.append(CreditOfficer(
                id=f"co-{i + 1}",
                name=name,
                id_number=str(id_number),
                status=status,
                phone=phone,
                email=email,
                date_joined=display_date(days_before(today, join_days_ago)),
            ))

        return tuple(officers)

    def _generate_reports(
        self,
        rng: SeededRandom,
        today: date,
        officers: tuple[CreditOfficer, ...],
    ) -> tuple[Report, ...]:
        """Generate submitted reports, each sent by a roster officer."""
        count = rng.next_int(*REPORT_COUNT_RANGE)
        reports: list[Report] = []

        for i in range(count):
            report_id = f"ID: {rng.next_int(*REPORT_NUMBER_RANGE)}"
            officer = rng.choice(officers)
            report_days_ago = rng.next_int(*REPORT_AGE_DAYS)

            reports.append(Report(
                id=f"report-{i + 1}",
                report_id=report_id,
                branch_name=officer.name,
                time_sent=officer.email,
                date=display_date(days_before(today, report_days_ago)),
            ))

        return tuple(reports)

    def _generate_missed_reports(
        self,
        rng: SeededRandom,
        today: date,
        officers: tuple[CreditOfficer, ...],
    ) -> tuple[MissedReport, ...]:
        """Generate missed reports, each owed by a roster officer."""
        count = rng.next_int(*MISSED_REPORT_COUNT_RANGE)
        missed: list[MissedReport] = []

        for i in range(count):
            report_id = f"ID: {rng.next_int(*REPORT_NUMBER_RANGE)}"
            officer = rng.choice(officers)
            due_days_ago = rng.next_int(*MISSED_REPORT_AGE_DAYS)

            missed.append(MissedReport(
                id=f"missed-{i + 1}",
                report_id=report_id,
                branch_name=officer.name,
                date_due=display_date(days_before(today, due_days_ago)),
            ))

        return tuple(missed)


def _email_prefix(name: str) -> str:
    """Lowercase the name and drop its first space ("Eze Chinedu" -> "ezechinedu")."""
    return name.lower().replace(" ", "", 1)


def generate_branch_data(
    branch_id: Optional[str],
    now: Optional[DateLike] = None,
    pools: Optional[SamplePools] = None,
) -> BranchBundle:
    """
    Generate the sample bundle for a branch.

    Args:
        branch_id: Branch identifier; empty or None behaves as "default"
        now: Generation date (defaults to today)
        pools: Sample pools (defaults to the packaged pools)

    Returns:
        BranchBundle
    """
    return BranchDataGenerator(pools=pools, now=now).generate(branch_id)


__all__ = [
    "BRANCH_ID_RANGE",
    "BRANCH_AGE_DAYS",
    "OFFICER_COUNT_RANGE",
    "CUSTOMER_COUNT_RANGE",
    "ACTIVE_LOANS_RANGE",
    "LOANS_PROCESSED_RANGE",
    "ROSTER_SIZE_RANGE",
    "REPORT_COUNT_RANGE",
    "MISSED_REPORT_COUNT_RANGE",
    "INACTIVE_THRESHOLD",
    "BranchDataGenerator",
    "generate_branch_data",
]
