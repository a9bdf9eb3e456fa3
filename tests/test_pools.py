"""
Tests for pools/__init__.py

Validates:
- Packaged default pools load with the dashboard's sizes
- Empty pools, duplicate officer names and short officer pools are rejected
- Missing files, malformed YAML and missing keys fail to load
"""

import pytest
import yaml

from branchseed.exceptions import PoolConfigError, PoolLoadError
from branchseed.pools import (
    MAX_ROSTER_SIZE,
    SamplePools,
    default_pools,
    list_pool_files,
    load_pools,
)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def write_pools(tmp_path):
    """Write a mapping to a YAML file and return its path."""
    def _write(data, name="pools.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path
    return _write


# ============================================================================
# DEFAULT POOLS
# ============================================================================

class TestDefaultPools:

    def test_sizes(self):
        assert default_pools().sizes() == {
            "branch_names": 12,
            "regions": 8,
            "officer_names": 20,
            "email_domains": 10,
            "statuses": 2,
        }

    def test_statuses(self):
        pools = default_pools()
        assert pools.active_status == "Active"
        assert pools.inactive_status == "In active"

    def test_known_entries(self):
        pools = default_pools()
        assert "Yaba Office" in pools.branch_names
        assert "Osun State" in pools.regions
        assert "Funke Akindele" in pools.officer_names

    def test_cached(self):
        assert default_pools() is default_pools()

    def test_listed(self):
        assert "default" in list_pool_files()


# ============================================================================
# VALIDATION
# ============================================================================

class TestValidation:

    def test_valid_dict(self, pool_dict):
        pools = SamplePools.from_dict(pool_dict)
        assert pools.regions == ("Lagos State",)

    @pytest.mark.parametrize("field", [
        "branch_names", "regions", "officer_names", "email_domains", "statuses",
    ])
    def test_empty_pool_rejected(self, pool_dict, field):
        pool_dict[field] = []
        with pytest.raises(PoolConfigError) as exc_info:
            SamplePools.from_dict(pool_dict)
        assert exc_info.value.details == {"pool": field}

    def test_duplicate_officer_names_rejected(self, pool_dict):
        pool_dict["officer_names"][1] = pool_dict["officer_names"][0]
        with pytest.raises(PoolConfigError):
            SamplePools.from_dict(pool_dict)

    def test_short_officer_pool_rejected(self, pool_dict):
        pool_dict["officer_names"] = pool_dict["officer_names"][:MAX_ROSTER_SIZE - 1]
        with pytest.raises(PoolConfigError) as exc_info:
            SamplePools.from_dict(pool_dict)
        assert exc_info.value.details["required"] == MAX_ROSTER_SIZE

    def test_three_statuses_rejected(self, pool_dict):
        pool_dict["statuses"] = ["Active", "In active", "Suspended"]
        with pytest.raises(PoolConfigError):
            SamplePools.from_dict(pool_dict)

    def test_missing_key(self, pool_dict):
        del pool_dict["regions"]
        with pytest.raises(PoolLoadError) as exc_info:
            SamplePools.from_dict(pool_dict)
        assert exc_info.value.details == {"missing": ["regions"]}

    def test_non_list_pool(self, pool_dict):
        pool_dict["regions"] = "Lagos State"
        with pytest.raises(PoolLoadError):
            SamplePools.from_dict(pool_dict)


# ============================================================================
# LOADING
# ============================================================================

class TestLoadPools:

    def test_load_custom_file(self, write_pools, pool_dict):
        pools = load_pools(write_pools(pool_dict))
        assert pools.branch_names == ("Alpha Branch", "Beta Branch")
        assert len(pools.officer_names) == 15

    def test_load_string_path(self, write_pools, pool_dict):
        pools = load_pools(str(write_pools(pool_dict)))
        assert pools.email_domains == ("example.com",)

    def test_missing_file(self, tmp_path):
        with pytest.raises(PoolLoadError) as exc_info:
            load_pools(tmp_path / "nope.yaml")
        assert exc_info.value.code == "BS_POOL_LOAD_ERROR"
        assert "default" in exc_info.value.details["available"]

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("branch_names: [unclosed\n", encoding="utf-8")
        with pytest.raises(PoolLoadError, match="Invalid YAML"):
            load_pools(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(PoolLoadError, match="mapping"):
            load_pools(path)

    def test_invalid_contents(self, write_pools, pool_dict):
        pool_dict["officer_names"] = ["Only One"]
        with pytest.raises(PoolConfigError):
            load_pools(write_pools(pool_dict))
