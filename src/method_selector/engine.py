"""
Method selector facade.

Holds one immutable catalog and exposes the operations collaborators call:
configuration snapshot, input validation, full ranking and single-method
scoring. Any catalog can be injected, which keeps synthetic catalogs easy
to use in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

import pandas as pd

from .codec import decode_inputs
from .export import weights_frame
from .ranking import score_all
from .results import MethodResult, ScoringResult, ValidationReport
from .schema import Catalog, load_default_catalog
from .scoring import score_method
from .validate import validate_inputs


class MethodSelector:
    """Ranks underground mining methods for a deposit against a weight catalog."""

    def __init__(self, catalog: Catalog):
        # private copy: later changes to the caller's catalog never reach scoring
        self._catalog = catalog.model_copy(deep=True)

    @classmethod
    def from_path(cls, path: Optional[Union[str, Path]] = None) -> "MethodSelector":
        """Build a selector from a catalog file (Config.CATALOG_PATH by default)."""
        return cls(load_default_catalog(path))

    @property
    def version(self) -> str:
        return self._catalog.version

    @property
    def methods(self) -> Tuple[str, ...]:
        return self._catalog.methods

    def get_config(self) -> Catalog:
        """Read-only snapshot of the catalog; changes to it never reach the selector."""
        return self._catalog.model_copy(deep=True)

    def validate_inputs(self, inputs: Mapping[str, Optional[str]]) -> ValidationReport:
        return validate_inputs(self._catalog, inputs)

    def calculate_scores(self, inputs: Mapping[str, Optional[str]]) -> ScoringResult:
        return score_all(self._catalog, inputs)

    def calculate_method_result(self, method: str, inputs: Mapping[str, Optional[str]]) -> MethodResult:
        return score_method(self._catalog, method, inputs)

    def decode_query(self, query: str) -> Dict[str, str]:
        """Decode a shareable-link query string against this selector's factors."""
        return decode_inputs(query, self._catalog)

    def weights_table(self, category: Optional[str] = None) -> pd.DataFrame:
        return weights_frame(self._catalog, category)
