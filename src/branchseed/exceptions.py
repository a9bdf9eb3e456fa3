"""
branchseed Exception Hierarchy

Domain-specific exceptions for sample branch data generation.
All exceptions include error codes for tracking and logging.

Generation itself never fails: every seed string (including empty/None)
yields a bundle. Errors surface from pool loading and table export only.

Exception codes follow the pattern: BS_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class BranchSeedError(Exception):
    """
    Base exception for all branchseed errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (BS_*)
        details: Additional context about the error
        branch_id: Associated branch ID if applicable
    """
    message: str
    code: str = "BS_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    branch_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.branch_id:
            parts.append(f"(branch: {self.branch_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.branch_id:
            result["branch_id"] = self.branch_id
        return result


# =============================================================================
# Pool Errors
# =============================================================================

@dataclass
class PoolConfigError(BranchSeedError):
    """Sample pool contents are invalid (empty, duplicated, too small)."""
    code: str = "BS_POOL_CONFIG_ERROR"


@dataclass
class PoolLoadError(BranchSeedError):
    """Failed to load sample pools from file."""
    code: str = "BS_POOL_LOAD_ERROR"


@dataclass
class EmptyPoolError(BranchSeedError):
    """Attempted to draw from an empty sequence."""
    code: str = "BS_EMPTY_POOL"


# =============================================================================
# Export Errors
# =============================================================================

@dataclass
class ExportError(BranchSeedError):
    """Failed to export bundle data."""
    code: str = "BS_EXPORT_ERROR"


@dataclass
class UnknownTableError(ExportError):
    """Requested export table does not exist."""
    code: str = "BS_UNKNOWN_TABLE"


__all__ = [
    "BranchSeedError",
    "PoolConfigError",
    "PoolLoadError",
    "EmptyPoolError",
    "ExportError",
    "UnknownTableError",
]
