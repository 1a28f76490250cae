"""Shareable-link encoding of input records."""

from __future__ import annotations

from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode

from .schema import Catalog


def encode_inputs(inputs: Mapping[str, Optional[str]]) -> str:
    """Encode the non-empty values of an input record as a query string."""
    return urlencode([(key, value) for key, value in inputs.items() if value])


def decode_inputs(query: str, catalog: Catalog) -> Dict[str, str]:
    """
    Decode a query string back into a (possibly partial) input record.

    Unknown keys and empty values are dropped; the first occurrence of a
    repeated key wins. Factors left out stay absent for validate_inputs
    to report.
    """
    inputs: Dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=False):
        if key not in catalog.factors or not value or key in inputs:
            continue
        inputs[key] = value

    # factor declaration order, independent of the order in the link
    return {factor: inputs[factor] for factor in catalog.factors if factor in inputs}
