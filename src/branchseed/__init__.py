"""
branchseed - Deterministic Sample Branch Data

branchseed produces consistent placeholder data for the loan dashboard's
branch pages: branch info, headline statistics, a credit officer roster,
submitted reports and missed reports. The same branch id always yields the
same bundle, so screens look stable across reloads without a backend.

Core Principle: "One branch id, one bundle."

Key Features:
- String-seeded generator with draw-for-draw parity with the dashboard
- Sample pools in YAML, validated on load
- Camel-case wire output ready for the dashboard
- CSV export of every bundle table
- CLI and HTTP service

Quick Start:
    from datetime import date
    from branchseed import generate_branch_data

    bundle = generate_branch_data("branch-001", now=date(2024, 1, 1))
    bundle.branch_info.name          # 'Yaba Office'
    bundle.to_dict()["statistics"]   # camelCase statistic cards

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core
# =============================================================================
from .rng import DEFAULT_SEED, SeededRandom, hash_seed, normalize_seed
from .pools import MAX_ROSTER_SIZE, SamplePools, default_pools, load_pools
from .models import (
    BranchBundle,
    BranchInfo,
    CreditOfficer,
    Metric,
    MissedReport,
    Report,
    Statistics,
)
from .generator import BranchDataGenerator, generate_branch_data

# =============================================================================
# Utilities
# =============================================================================
from .formatting import change_label, display_date, format_naira
from .export import TABLES, export_filename, export_table, to_csv

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    BranchSeedError,
    EmptyPoolError,
    ExportError,
    PoolConfigError,
    PoolLoadError,
    UnknownTableError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Seeded random
    "DEFAULT_SEED",
    "SeededRandom",
    "hash_seed",
    "normalize_seed",
    # Pools
    "MAX_ROSTER_SIZE",
    "SamplePools",
    "default_pools",
    "load_pools",
    # Models
    "BranchBundle",
    "BranchInfo",
    "CreditOfficer",
    "Metric",
    "MissedReport",
    "Report",
    "Statistics",
    # Generator
    "BranchDataGenerator",
    "generate_branch_data",
    # Utilities
    "change_label",
    "display_date",
    "format_naira",
    "TABLES",
    "export_filename",
    "export_table",
    "to_csv",
    # Exceptions
    "BranchSeedError",
    "EmptyPoolError",
    "ExportError",
    "PoolConfigError",
    "PoolLoadError",
    "UnknownTableError",
]
