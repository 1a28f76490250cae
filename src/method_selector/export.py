"""Tabular views of scoring results and the weight matrix."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from .results import ScoringResult
from .schema import CATEGORIES, Catalog


def ranking_frame(result: ScoringResult) -> pd.DataFrame:
    """One row per ranked method with its category scores and elimination status."""
    rows = []
    for rank, method_result in enumerate(result.ranked_methods, start=1):
        row = {
            "rank": rank,
            "method": method_result.method,
            "total_score": method_result.total_score,
        }
        for category in CATEGORIES:
            row[category] = method_result.category_scores[category].score
        row["is_eliminated"] = method_result.is_eliminated
        row["elimination_reasons"] = "; ".join(method_result.elimination_reasons)
        rows.append(row)

    columns = ["rank", "method", "total_score", *CATEGORIES, "is_eliminated", "elimination_reasons"]
    return pd.DataFrame(rows, columns=columns)


def weights_frame(catalog: Catalog, category: Optional[str] = None) -> pd.DataFrame:
    """
    Weight matrix with methods as rows and (factor, option) columns.

    Args:
        catalog: Weight catalog
        category: Restrict columns to one category's factors (all if None)

    Returns:
        DataFrame indexed by method, in catalog order

    Raises:
        ValueError: If category is not a catalog category
    """
    if category is None:
        factors = [f for c in CATEGORIES for f in catalog.factors_for(c)]
    elif category in catalog.categories:
        factors = catalog.factors_for(category)
    else:
        raise ValueError(f"Unknown category: {category}")

    columns = [(factor, option) for factor in factors for option in catalog.factors[factor].options]
    data = [
        [catalog.get_weight(method, factor, option) for factor, option in columns]
        for method in catalog.methods
    ]

    frame = pd.DataFrame(
        data,
        index=pd.Index(catalog.methods, name="method"),
        columns=pd.MultiIndex.from_tuples(columns, names=["factor", "option"]),
    )
    return frame
