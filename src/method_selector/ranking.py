from __future__ import annotations

from datetime import datetime, timezone
from typing import Mapping, Optional

from src.utils.logging_utils import get_logger

from .results import ScoringResult
from .schema import Catalog
from .scoring import score_method

logger = get_logger(__name__)


def score_all(catalog: Catalog, inputs: Mapping[str, Optional[str]]) -> ScoringResult:
    """
    Score every catalog method, rank them and split recommended from eliminated.

    Inputs are expected to have passed validate_inputs already; missing or
    unknown values simply score 0.
    """
    results = [score_method(catalog, method, inputs) for method in catalog.methods]

    # sorted() is stable, so equal totals keep catalog order
    ranked = sorted(results, key=lambda r: r.total_score, reverse=True)

    recommended = [r for r in ranked if not r.is_eliminated]
    eliminated = [r for r in ranked if r.is_eliminated]

    logger.info(
        f"Scored {len(results)} methods: {len(recommended)} recommended, {len(eliminated)} eliminated"
    )

    return ScoringResult(
        results=results,
        ranked_methods=ranked,
        recommended_methods=recommended,
        eliminated_methods=eliminated,
        inputs={k: v for k, v in inputs.items() if isinstance(v, str)},
        timestamp=datetime.now(timezone.utc),
    )
