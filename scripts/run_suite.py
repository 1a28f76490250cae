#!/usr/bin/env python3
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from scripts.run_selection import run_selection
from src.config import Config
from src.method_selector.deposit import load_deposit
from src.method_selector.engine import MethodSelector


def find_deposits(deposits_dir: Path) -> List[Path]:
    """Find all YAML deposit files in the deposits directory."""
    if not deposits_dir.exists():
        raise FileNotFoundError(f"Deposits directory not found: {deposits_dir}")
    return sorted(deposits_dir.glob("*.yaml"))


def run_suite(
    deposits_dir: Path = Config.DEPOSITS_DIR,
    output_base: Path = Config.RUNS_DIR,
    selector: Optional[MethodSelector] = None,
) -> pd.DataFrame:
    """
    Rank methods for every deposit in the deposits directory and return a summary DataFrame.

    Args:
        deposits_dir: Directory containing deposit YAML files
        output_base: Base directory for outputs
        selector: Selector to use (loads the default catalog if None)

    Returns:
        DataFrame with one row per deposit and the summary metrics as columns
    """
    deposit_files = find_deposits(deposits_dir)

    if not deposit_files:
        raise ValueError(f"No deposit files found in {deposits_dir}")

    selector = selector or MethodSelector.from_path()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    suite_dir = output_base / f"suite_{timestamp}"
    suite_dir.mkdir(parents=True, exist_ok=True)

    summary_rows = []

    for deposit_path in deposit_files:
        try:
            deposit = load_deposit(deposit_path)
            validation = selector.validate_inputs(deposit.inputs)
            if not validation.is_valid:
                raise ValueError(f"Invalid inputs: {validation.errors}")

            _, report = run_selection(
                selector,
                deposit.inputs,
                suite_dir / deposit.name,
                deposit.name,
                deposit_path=str(deposit_path),
            )

            row = {
                "deposit": deposit.name,
                "deposit_file": deposit_path.name,
                **report.summary
            }
            summary_rows.append(row)

        except Exception as e:
            # Log error but continue with other deposits
            print(f"Error running {deposit_path.name}: {e}")
            row = {
                "deposit": deposit_path.stem,
                "deposit_file": deposit_path.name,
                "error": str(e)
            }
            summary_rows.append(row)

    summary_df = pd.DataFrame(summary_rows)

    summary_path = suite_dir / "summary.csv"
    summary_df.to_csv(summary_path, index=False)

    print(f"Suite run complete: {len(summary_df)} deposits")
    print(f"Summary: {summary_path}")
    print(f"Outputs: {suite_dir}")

    return summary_df


def main() -> int:
    """Main entrypoint for batch deposit runner."""
    import argparse

    parser = argparse.ArgumentParser(description="Rank mining methods for all deposits in deposits/")
    parser.add_argument("--deposits-dir", type=str, default=str(Config.DEPOSITS_DIR),
                        help="Directory containing deposit YAML files")
    parser.add_argument("--output-dir", type=str, default=str(Config.RUNS_DIR),
                        help="Base output directory")
    parser.add_argument("--catalog", type=str, default=None,
                        help="Weight catalog YAML (defaults to CATALOG_PATH)")
    args = parser.parse_args()

    summary_df = run_suite(
        Path(args.deposits_dir),
        Path(args.output_dir),
        selector=MethodSelector.from_path(args.catalog),
    )

    print("\n=== Summary ===")
    print(summary_df.to_string(index=False))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
