from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

import pytest

from src.method_selector.engine import MethodSelector
from src.method_selector.schema import Catalog, load_catalog

ROOT = Path(__file__).resolve().parent.parent
CATALOG_PATH = ROOT / "data" / "method_selector_config.yaml"
DEPOSITS_DIR = ROOT / "deposits"

BASE_INPUTS = {
    "shape": "Equidimensional",
    "thickness": "V. Thick",
    "plunge": "Steep",
    "grade": "Moderate",
    "depth": "100-600m",
    "rmr_ore": "Moderate",
    "rss_ore": "Moderate",
    "rmr_hw": "Moderate",
    "rss_hw": "Moderate",
    "rmr_fw": "Moderate",
    "rss_fw": "Moderate",
}

SYNTHETIC_CATALOG: Dict[str, Any] = {
    "version": "test",
    "source": {
        "excel_file": "synthetic.xlsx",
        "excel_version": "0",
        "reference_paper": "none",
        "algorithm_source": "none",
    },
    "elimination_threshold": -10,
    # deliberately not alphabetical: ties must follow this order
    "methods": ["Zeta", "Alpha", "Mid"],
    "factors": {
        "shape": {"label": "Shape", "category": "geometry", "options": ["x", "y"]},
        "rock": {"label": "Rock", "category": "ore_zone", "options": ["hard", "soft"]},
        "hw": {"label": "Hanging", "category": "hanging_wall", "options": ["ok"]},
        "fw": {"label": "Foot", "category": "footwall", "options": ["ok"]},
    },
    "categories": {
        "geometry": {"label": "Geometry", "factors": ["shape"]},
        "ore_zone": {"label": "Ore", "factors": ["rock"]},
        "hanging_wall": {"label": "HW", "factors": ["hw"]},
        "footwall": {"label": "FW", "factors": ["fw"]},
    },
    "weights": {
        "Zeta": {"shape": {"x": 2, "y": -10}, "rock": {"hard": 1, "soft": 0}},
        "Alpha": {"shape": {"x": 2, "y": 3}, "rock": {"hard": 1, "soft": -12}},
        "Mid": {"shape": {"x": 5, "y": 1}, "rock": {"hard": 0, "soft": 1}, "hw": {"ok": 1}},
    },
}


@pytest.fixture(scope="session")
def catalog_path() -> Path:
    return CATALOG_PATH


@pytest.fixture(scope="session")
def deposits_dir() -> Path:
    return DEPOSITS_DIR


@pytest.fixture(scope="session")
def catalog(catalog_path: Path) -> Catalog:
    return load_catalog(catalog_path)


@pytest.fixture(scope="session")
def selector(catalog: Catalog) -> MethodSelector:
    return MethodSelector(catalog)


@pytest.fixture
def base_inputs() -> Dict[str, str]:
    return dict(BASE_INPUTS)


@pytest.fixture
def synthetic_data() -> Dict[str, Any]:
    return copy.deepcopy(SYNTHETIC_CATALOG)


@pytest.fixture
def synthetic_catalog(synthetic_data: Dict[str, Any]) -> Catalog:
    return Catalog(**synthetic_data)
