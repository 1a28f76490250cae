"""Deposit description files: a named input record stored as YAML."""

from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field


class DepositConfig(BaseModel):
    """Schema for deposit files."""

    name: str = Field(..., min_length=1, description="Deposit name, used for output directories")
    description: Optional[str] = Field(default=None, description="Free-form notes on the deposit")
    inputs: Dict[str, str] = Field(..., description="Input record: factor key -> option")


def load_deposit(path: Union[str, Path]) -> DepositConfig:
    """Load and validate a deposit from a YAML file."""
    deposit_path = Path(path)
    if not deposit_path.exists():
        raise FileNotFoundError(f"Deposit file not found: {path}")

    with open(deposit_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Deposit file must contain a mapping: {path}")

    return DepositConfig(**data)
