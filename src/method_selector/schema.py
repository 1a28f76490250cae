"""Schema validation for the mining method weight catalog."""

from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

from src.config import Config
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

FactorCategory = Literal["geometry", "ore_zone", "hanging_wall", "footwall"]

# Fixed order used for category scores and the elimination scan
CATEGORIES: List[str] = ["geometry", "ore_zone", "hanging_wall", "footwall"]


class SourceInfo(BaseModel):
    """Provenance of the weight table."""
    model_config = ConfigDict(frozen=True)

    excel_file: str = Field(..., description="Spreadsheet the weights were extracted from")
    excel_version: str = Field(..., description="Spreadsheet revision")
    reference_paper: str = Field(..., description="Published method the weights come from")
    algorithm_source: str = Field(..., description="Implementation the algorithm follows")


class FactorConfig(BaseModel):
    """One deposit characteristic and its legal options."""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Human readable label")
    category: FactorCategory = Field(..., description="Category the factor is scored under")
    options: Tuple[str, ...] = Field(..., min_length=1, description="Legal option strings, in display order")
    tooltip: str = Field(default="", description="Help text for form collaborators")

    @field_validator("options")
    @classmethod
    def validate_unique_options(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Options must be unique within a factor."""
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate options: {v}")
        return v


class CategoryConfig(BaseModel):
    """A group of factors scored together."""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Human readable label")
    factors: Tuple[str, ...] = Field(default_factory=tuple, description="Factor keys in declaration order")


class Catalog(BaseModel):
    """
    Schema for the weight catalog: methods, factors, categories and weights.

    Sequences are stored as tuples. The nested weight and factor dicts are
    still plain dicts, so a catalog shared between callers should only be
    handed out through MethodSelector, which keeps its own private copy.
    """
    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Catalog version")
    source: SourceInfo = Field(..., description="Provenance metadata")
    elimination_threshold: StrictInt = Field(..., lt=0, description="Weights at or below this eliminate a method")
    methods: Tuple[str, ...] = Field(..., min_length=1, description="Mining methods in catalog order")
    factors: Dict[str, FactorConfig] = Field(..., min_length=1, description="Factors keyed by factor key")
    categories: Dict[FactorCategory, CategoryConfig] = Field(..., description="Categories keyed by category key")
    weights: Dict[str, Dict[str, Dict[str, StrictInt]]] = Field(
        default_factory=dict, description="method -> factor -> option -> weight"
    )

    @model_validator(mode="after")
    def validate_structure(self):
        """Cross-check methods, factors, categories and weights."""
        if len(set(self.methods)) != len(self.methods):
            raise ValueError(f"Duplicate methods: {self.methods}")

        missing = set(CATEGORIES) - set(self.categories)
        if missing:
            raise ValueError(f"Missing categories: {sorted(missing)}")

        seen: Dict[str, str] = {}
        for category, category_config in self.categories.items():
            for factor in category_config.factors:
                if factor not in self.factors:
                    raise ValueError(f"Category {category} lists unknown factor: {factor}")
                if factor in seen:
                    raise ValueError(f"Factor {factor} listed under both {seen[factor]} and {category}")
                if self.factors[factor].category != category:
                    raise ValueError(
                        f"Factor {factor} declares category {self.factors[factor].category} "
                        f"but is listed under {category}"
                    )
                seen[factor] = category

        unassigned = set(self.factors) - set(seen)
        if unassigned:
            raise ValueError(f"Factors not listed in any category: {sorted(unassigned)}")

        for method, method_weights in self.weights.items():
            if method not in self.methods:
                raise ValueError(f"Weights given for unknown method: {method}")
            for factor, option_weights in method_weights.items():
                if factor not in self.factors:
                    raise ValueError(f"Weights for {method} reference unknown factor: {factor}")
                unknown = set(option_weights) - set(self.factors[factor].options)
                if unknown:
                    raise ValueError(f"Weights for {method}/{factor} reference unknown options: {sorted(unknown)}")
        return self

    @property
    def method_count(self) -> int:
        return len(self.methods)

    def factors_for(self, category: str) -> List[str]:
        """Factor keys of a category in declaration order (empty if unknown)."""
        category_config = self.categories.get(category)
        if category_config is None:
            return []
        return list(category_config.factors)

    def factor_label(self, factor: str) -> str:
        factor_config = self.factors.get(factor)
        return factor_config.label if factor_config is not None else factor

    def get_weight(self, method: str, factor: str, option: str) -> int:
        """
        Look up the weight of one (method, factor, option) triple.

        Unknown methods, factors and options all score a neutral 0.
        """
        method_weights = self.weights.get(method)
        if method_weights is None:
            return 0
        option_weights = method_weights.get(factor)
        if option_weights is None:
            return 0
        return option_weights.get(option, 0)

    def is_eliminating(self, weight: int) -> bool:
        """True when a weight disqualifies a method outright."""
        return weight <= self.elimination_threshold


def load_catalog(path: Union[str, Path]) -> Catalog:
    """
    Load and validate the weight catalog from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not parseable YAML
        ValueError: If the YAML is empty or not a mapping
        pydantic.ValidationError: If the catalog data is malformed
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(catalog_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Catalog file must contain a mapping: {path}")

    catalog = Catalog(**data)
    logger.info(
        f"Loaded catalog v{catalog.version} from {catalog_path}: "
        f"{catalog.method_count} methods, {len(catalog.factors)} factors"
    )
    return catalog


def load_default_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load the catalog named by Config.CATALOG_PATH (or an explicit override)."""
    return load_catalog(path or Config.CATALOG_PATH)
