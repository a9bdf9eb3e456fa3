"""
branchseed: Sample Pool Loader

Sample pools are the fixed candidate lists the generator draws from: branch
names, regions, credit officer names, email domains and officer statuses.
They live in YAML files next to this module; default.yaml is what the
dashboard ships with.

Example:
    >>> from branchseed.pools import default_pools, load_pools
    >>> pools = default_pools()
    >>> len(pools.officer_names)
    20
    >>> custom = load_pools("/etc/branchseed/pools.yaml")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import PoolConfigError, PoolLoadError

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

POOLS_DIR = Path(__file__).parent
DEFAULT_POOLS_FILE = POOLS_DIR / "default.yaml"

# Largest credit officer roster the generator draws; officer_names must be
# at least this long for unique-name resampling to terminate.
MAX_ROSTER_SIZE = 15

POOL_FIELDS = (
    "branch_names",
    "regions",
    "officer_names",
    "email_domains",
    "statuses",
)


# =============================================================================
# Pool Model
# =============================================================================

@dataclass(frozen=True)
class SamplePools:
    """
    Immutable candidate lists for the generator.

    Attributes:
        branch_names: Candidate branch display names
        regions: Candidate regions (states)
        officer_names: Candidate credit officer full names (unique)
        email_domains: Candidate email domains for officer addresses
        statuses: Exactly two statuses, (active, inactive)
    """
    branch_names: tuple[str, ...]
    regions: tuple[str, ...]
    officer_names: tuple[str, ...]
    email_domains: tuple[str, ...]
    statuses: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate pools on construction."""
        for name in POOL_FIELDS:
            if not getattr(self, name):
                raise PoolConfigError(
                    f"Pool '{name}' cannot be empty",
                    details={"pool": name},
                )
        if len(set(self.officer_names)) != len(self.officer_names):
            raise PoolConfigError("officer_names contains duplicate names")
        if len(self.officer_names) < MAX_ROSTER_SIZE:
            raise PoolConfigError(
                f"officer_names needs at least {MAX_ROSTER_SIZE} names",
                details={
                    "size": len(self.officer_names),
                    "required": MAX_ROSTER_SIZE,
                },
            )
        if len(self.statuses) != 2:
            raise PoolConfigError(
                "statuses must list exactly two values (active, inactive)",
                details={"size": len(self.statuses)},
            )

    @property
    def active_status(self) -> str:
        return self.statuses[0]

    @property
    def inactive_status(self) -> str:
        return self.statuses[1]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SamplePools:
        """Build pools from a parsed mapping, coercing lists to tuples."""
        missing = [name for name in POOL_FIELDS if name not in data]
        if missing:
            raise PoolLoadError(
                f"Pool definition is missing keys: {missing}",
                details={"missing": missing},
            )
        values = {}
        for name in POOL_FIELDS:
            raw = data[name]
            if not isinstance(raw, list):
                raise PoolLoadError(
                    f"Pool '{name}' must be a list",
                    details={"pool": name},
                )
            values[name] = tuple(str(item) for item in raw)
        return cls(**values)

    def sizes(self) -> dict[str, int]:
        """Number of entries in each pool."""
        return {name: len(getattr(self, name)) for name in POOL_FIELDS}


# =============================================================================
# Loader Functions
# =============================================================================

def list_pool_files() -> list[str]:
    """
    List the pool files shipped with the package.

    Returns:
        List of pool names (without .yaml extension)
    """
    return sorted(path.stem for path in POOLS_DIR.glob("*.yaml"))


def load_pools(path: Optional[Union[str, Path]] = None) -> SamplePools:
    """
    Load and validate sample pools from a YAML file.

    Args:
        path: Path to a pool YAML file (defaults to the packaged default.yaml)

    Returns:
        Validated SamplePools

    Raises:
        PoolLoadError: If the file is missing, unreadable or malformed
        PoolConfigError: If the pools fail validation
    """
    yaml_path = Path(path) if path is not None else DEFAULT_POOLS_FILE

    if not yaml_path.exists():
        raise PoolLoadError(
            f"Pool file '{yaml_path}' not found",
            details={"available": list_pool_files()},
        )

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PoolLoadError(f"Invalid YAML in {yaml_path.name}: {e}")

    if not isinstance(data, dict):
        raise PoolLoadError(f"Pool file {yaml_path.name} must contain a mapping")

    pools = SamplePools.from_dict(data)
    logger.debug("Loaded sample pools from %s: %s", yaml_path, pools.sizes())
    return pools


@lru_cache(maxsize=1)
def default_pools() -> SamplePools:
    """Return the packaged default pools (loaded once)."""
    return load_pools(DEFAULT_POOLS_FILE)


__all__ = [
    "POOLS_DIR",
    "DEFAULT_POOLS_FILE",
    "MAX_ROSTER_SIZE",
    "POOL_FIELDS",
    "SamplePools",
    "list_pool_files",
    "load_pools",
    "default_pools",
]
