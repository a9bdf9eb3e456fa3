"""Shared pytest configuration: path setup for src & api imports, fixtures."""

import json
import sys
from datetime import date
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parent.parent

# Allow ``from branchseed import ...`` (src is the package root)
sys.path.insert(0, str(_ROOT / "src"))

# Allow ``from api.main import app``
sys.path.insert(0, str(_ROOT))

from branchseed.generator import BranchDataGenerator
from branchseed.pools import default_pools

GOLDEN_DIR = Path(__file__).parent / "golden"

# Generation date the golden bundles were recorded with
FIXED_NOW = date(2024, 1, 1)


def load_golden(name: str) -> dict:
    """Load a recorded bundle from tests/golden/<name>.json."""
    with open(GOLDEN_DIR / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def pools():
    return default_pools()


@pytest.fixture
def generator():
    """Generator pinned to the golden generation date."""
    return BranchDataGenerator(now=FIXED_NOW)


@pytest.fixture
def pool_dict():
    """A valid pool mapping, as parsed from YAML."""
    return {
        "branch_names": ["Alpha Branch", "Beta Branch"],
        "regions": ["Lagos State"],
        "officer_names": [f"Officer {i}" for i in range(15)],
        "email_domains": ["example.com"],
        "statuses": ["Active", "In active"],
    }
