"""UBC mining method selector: weight catalog, scoring and ranking."""
from .schema import Catalog, load_catalog, load_default_catalog
from .results import CategoryScore, MethodResult, ScoringResult, ValidationReport
from .engine import MethodSelector

__all__ = [
    "Catalog",
    "load_catalog",
    "load_default_catalog",
    "CategoryScore",
    "MethodResult",
    "ScoringResult",
    "ValidationReport",
    "MethodSelector",
]
