from __future__ import annotations

from typing import Any, Dict, Optional

from .results import ScoringResult


def compute_summary(result: ScoringResult) -> Dict[str, Any]:
    """Headline numbers for a scoring result (counts, leader and its margin)."""
    recommended = result.recommended_methods

    top_method: Optional[str] = None
    top_score: Optional[int] = None
    margin: Optional[int] = None
    if recommended:
        top_method = recommended[0].method
        top_score = recommended[0].total_score
        # margin over the runner-up viable method, if there is one
        if len(recommended) > 1:
            margin = top_score - recommended[1].total_score

    summary = {
        "n_methods": len(result.results),
        "n_recommended": len(recommended),
        "n_eliminated": len(result.eliminated_methods),
        "top_method": top_method,
        "top_score": top_score,
        "top_margin": margin,
    }

    if result.eliminated_methods:
        summary["closest_eliminated"] = result.eliminated_methods[0].method

    return summary
