"""Input record validation against the catalog's factors and options."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .results import ValidationReport
from .schema import Catalog


def validate_inputs(catalog: Catalog, inputs: Mapping[str, Optional[str]]) -> ValidationReport:
    """
    Check an input record against every factor declared in the catalog.

    All problems are collected so a form can report them at once. Keys that
    are not catalog factors are ignored.

    Args:
        catalog: Weight catalog defining factors and legal options
        inputs: Partial or complete input record (factor -> option)

    Returns:
        ValidationReport with one error per missing or illegal factor
    """
    errors: Dict[str, str] = {}

    for factor, factor_config in catalog.factors.items():
        value = inputs.get(factor)
        if not value:
            errors[factor] = f"{factor_config.label} is required"
        elif value not in factor_config.options:
            errors[factor] = f"Invalid option for {factor_config.label}"

    return ValidationReport(is_valid=not errors, errors=errors)
