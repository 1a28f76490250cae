from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from src.utils.logging_utils import get_logger

from .results import CategoryScore, FactorScore, MethodResult
from .schema import CATEGORIES, Catalog

logger = get_logger(__name__)


def score_category(
    catalog: Catalog,
    method: str,
    category: str,
    inputs: Mapping[str, Optional[str]],
) -> CategoryScore:
    """Sum the weights of one category's factors for one method."""
    breakdown: Dict[str, FactorScore] = {}
    total = 0

    for factor in catalog.factors_for(category):
        option = inputs.get(factor)
        # missing or non-string values contribute nothing and are left out of the breakdown
        if not isinstance(option, str) or not option:
            continue
        score = catalog.get_weight(method, factor, option)
        breakdown[factor] = FactorScore(option=option, score=score)
        total += score

    return CategoryScore(score=total, breakdown=breakdown)


def score_method(catalog: Catalog, method: str, inputs: Mapping[str, Optional[str]]) -> MethodResult:
    """Score all four categories for one method and check for elimination."""
    category_scores = {
        category: score_category(catalog, method, category, inputs) for category in CATEGORIES
    }
    total = sum(cs.score for cs in category_scores.values())

    reasons: List[str] = []
    for category in CATEGORIES:
        for factor, detail in category_scores[category].breakdown.items():
            if catalog.is_eliminating(detail.score):
                reasons.append(f"{catalog.factor_label(factor)}: {detail.option} (score: {detail.score})")

    result = MethodResult(
        method=method,
        total_score=total,
        is_eliminated=bool(reasons),
        elimination_reasons=reasons,
        category_scores=category_scores,
    )
    logger.debug(f"{method}: total={total} eliminated={result.is_eliminated}")
    return result
