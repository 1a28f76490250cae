"""Run report schema for method selection runs."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RunReport(BaseModel):
    """Report of a selection run with its inputs, summary metrics and artifacts."""

    deposit_name: str = Field(..., description="Deposit name or 'query' for ad-hoc runs")
    deposit_path: Optional[str] = Field(default=None, description="Path to the deposit YAML file")
    catalog_version: str = Field(..., description="Version of the weight catalog used")
    inputs: Dict[str, str] = Field(..., description="Input record that was scored")
    summary: Dict[str, Any] = Field(..., description="Summary metrics of the scoring result")
    artifacts: List[str] = Field(default_factory=list, description="List of artifact file names")
    created_at: datetime = Field(..., description="Time the run finished")
