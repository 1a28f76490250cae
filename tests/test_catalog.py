"""
Tests for loading and querying the weight catalog.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.method_selector.schema import CATEGORIES, Catalog, load_catalog, load_default_catalog


def test_catalog_shape(catalog):
    """The shipped catalog has ten methods, eleven factors and four categories."""
    assert catalog.method_count == 10
    assert len(catalog.factors) == 11
    assert list(catalog.categories) == CATEGORIES
    assert catalog.elimination_threshold == -49
    assert catalog.methods[0] == "Open Pit"
    assert catalog.source.reference_paper


def test_load_default_catalog_matches_explicit_path(catalog, catalog_path):
    assert load_default_catalog(catalog_path) == catalog


def test_every_factor_has_full_weights(catalog):
    """Every method carries a weight for every legal option."""
    for method in catalog.methods:
        for factor, factor_config in catalog.factors.items():
            assert set(catalog.weights[method][factor]) == set(factor_config.options), (
                f"{method}/{factor} weights do not cover the options"
            )


def test_get_weight_known_values(catalog):
    assert catalog.get_weight("Open Pit", "shape", "Equidimensional") == 4
    assert catalog.get_weight("Block Caving", "thickness", "V. Narrow") == -49
    assert catalog.get_weight("Longwall", "shape", "Equidimensional") == -49


def test_get_weight_unknown_lookups_default_to_zero(catalog):
    assert catalog.get_weight("Non-existent Method", "shape", "Equidimensional") == 0
    assert catalog.get_weight("Open Pit", "non_existent", "value") == 0
    assert catalog.get_weight("Open Pit", "shape", "Spherical") == 0


@pytest.mark.parametrize("weight,expected", [(-49, True), (-50, True), (-48, False), (0, False), (4, False)])
def test_is_eliminating(catalog, weight, expected):
    assert catalog.is_eliminating(weight) is expected


def test_factors_for_and_labels(catalog):
    assert catalog.factors_for("geometry") == ["shape", "thickness", "plunge", "grade", "depth"]
    assert catalog.factors_for("unknown") == []
    assert catalog.factor_label("shape") == "General Shape"
    assert catalog.factor_label("not_a_factor") == "not_a_factor"


def test_catalog_is_frozen(catalog):
    with pytest.raises(ValidationError):
        catalog.elimination_threshold = 0


def test_catalog_sequences_cannot_change_in_place(synthetic_catalog):
    with pytest.raises(AttributeError):
        synthetic_catalog.methods.append("Ghost")
    with pytest.raises(AttributeError):
        synthetic_catalog.factors["shape"].options.append("z")
    with pytest.raises(AttributeError):
        synthetic_catalog.categories["geometry"].factors.append("rock")
    assert synthetic_catalog.method_count == 3


def test_load_catalog_rejects_unparseable_yaml(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("methods: [Open Pit\nfactors: {")
    with pytest.raises(yaml.YAMLError):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.yaml")


def test_load_catalog_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "catalog.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_catalog(path)


def test_load_catalog_round_trip_file(tmp_path: Path, synthetic_data):
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump(synthetic_data, sort_keys=False))
    loaded = load_catalog(path)
    assert loaded.methods == ("Zeta", "Alpha", "Mid")


def _mutate_positive_threshold(data):
    data["elimination_threshold"] = 5


def _mutate_unknown_option(data):
    data["weights"]["Zeta"]["shape"]["z"] = 1


def _mutate_unknown_weight_method(data):
    data["weights"]["Ghost"] = {}


def _mutate_unknown_weight_factor(data):
    data["weights"]["Zeta"]["colour"] = {"x": 1}


def _mutate_non_integer_weight(data):
    data["weights"]["Zeta"]["shape"]["x"] = "two"


def _mutate_missing_category(data):
    del data["categories"]["footwall"]
    del data["factors"]["fw"]


def _mutate_wrong_category(data):
    data["factors"]["rock"]["category"] = "geometry"


def _mutate_unassigned_factor(data):
    data["factors"]["extra"] = {"label": "Extra", "category": "geometry", "options": ["a"]}


def _mutate_duplicate_method(data):
    data["methods"].append("Zeta")


def _mutate_duplicate_option(data):
    data["factors"]["shape"]["options"] = ["x", "x"]


def _mutate_unknown_category_key(data):
    data["categories"]["roof"] = {"label": "Roof", "factors": []}


@pytest.mark.parametrize(
    "mutate",
    [
        _mutate_positive_threshold,
        _mutate_unknown_option,
        _mutate_unknown_weight_method,
        _mutate_unknown_weight_factor,
        _mutate_non_integer_weight,
        _mutate_missing_category,
        _mutate_wrong_category,
        _mutate_unassigned_factor,
        _mutate_duplicate_method,
        _mutate_duplicate_option,
        _mutate_unknown_category_key,
    ],
)
def test_malformed_catalog_rejected(synthetic_data, mutate):
    """Malformed catalog data fails at load instead of scoring silently."""
    mutate(synthetic_data)
    with pytest.raises(ValidationError):
        Catalog(**synthetic_data)


def test_missing_weights_are_allowed(synthetic_data):
    """Methods without weight entries are legal; they score 0 everywhere."""
    del synthetic_data["weights"]["Mid"]
    catalog = Catalog(**synthetic_data)
    assert catalog.get_weight("Mid", "shape", "x") == 0
