"""Result schemas produced by the scoring and ranking engine."""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field


class FactorScore(BaseModel):
    """Option chosen for one factor and the weight it earned."""
    option: str = Field(..., description="Option supplied for the factor")
    score: int = Field(..., description="Weight looked up for the option")


class CategoryScore(BaseModel):
    """Score of one category for one method."""
    score: int = Field(default=0, description="Sum of the breakdown scores")
    breakdown: Dict[str, FactorScore] = Field(
        default_factory=dict, description="Per-factor detail in factor declaration order"
    )


class MethodResult(BaseModel):
    """Total, category scores and elimination status of one method."""
    method: str = Field(..., description="Mining method name")
    total_score: int = Field(..., description="Sum of the four category scores")
    is_eliminated: bool = Field(..., description="True if any factor weight hit the elimination threshold")
    elimination_reasons: List[str] = Field(default_factory=list, description="One entry per eliminating factor")
    category_scores: Dict[str, CategoryScore] = Field(..., description="Category scores keyed by category")


class ScoringResult(BaseModel):
    """Scores for every catalog method, ranked and partitioned."""
    results: List[MethodResult] = Field(..., description="Method results in catalog order")
    ranked_methods: List[MethodResult] = Field(..., description="Results sorted by total score, ties in catalog order")
    recommended_methods: List[MethodResult] = Field(..., description="Ranked methods that are not eliminated")
    eliminated_methods: List[MethodResult] = Field(..., description="Ranked methods that are eliminated")
    inputs: Dict[str, str] = Field(default_factory=dict, description="Input record that was scored")
    timestamp: datetime = Field(..., description="UTC time the result was computed")


class ValidationReport(BaseModel):
    """Outcome of checking an input record against the catalog."""
    is_valid: bool = Field(..., description="True when no errors were recorded")
    errors: Dict[str, str] = Field(default_factory=dict, description="Error message keyed by factor")
