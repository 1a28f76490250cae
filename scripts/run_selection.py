#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

from src.config import Config
from src.method_selector.deposit import load_deposit
from src.method_selector.engine import MethodSelector
from src.method_selector.export import ranking_frame
from src.method_selector.metrics import compute_summary
from src.method_selector.results import ScoringResult
from src.schemas.report import RunReport
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


def run_selection(
    selector: MethodSelector,
    inputs: Dict[str, str],
    out_dir: Path,
    name: str,
    deposit_path: Optional[str] = None,
) -> Tuple[ScoringResult, RunReport]:
    """
    Score an already validated input record and write the run artifacts.

    Writes ranking.csv, result.json and report.json into out_dir.
    """
    result = selector.calculate_scores(inputs)
    summary = compute_summary(result)

    out_dir.mkdir(parents=True, exist_ok=True)
    ranking_frame(result).to_csv(out_dir / "ranking.csv", index=False)
    (out_dir / "result.json").write_text(result.model_dump_json(indent=2), encoding="utf-8")

    report = RunReport(
        deposit_name=name,
        deposit_path=deposit_path,
        catalog_version=selector.version,
        inputs=result.inputs,
        summary=summary,
        artifacts=["ranking.csv", "result.json", "report.json"],
        created_at=datetime.now(),
    )
    (out_dir / "report.json").write_text(report.model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Wrote selection outputs for {name} to {out_dir}")
    return result, report


def main() -> int:
    parser = argparse.ArgumentParser(description="Rank underground mining methods for one deposit.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--deposit", help="Path to deposit YAML.")
    source.add_argument("--query", help="Shareable-link query string, e.g. 'shape=Irregular&...'.")
    parser.add_argument("--catalog", type=str, default=None,
                        help="Weight catalog YAML (defaults to CATALOG_PATH).")
    parser.add_argument("--out-dir", dest="out_dir", type=str, default=None,
                        help="Output directory (if not provided, uses runs/<deposit>/<timestamp>/)")
    args = parser.parse_args()

    selector = MethodSelector.from_path(args.catalog)

    if args.deposit:
        deposit = load_deposit(args.deposit)
        name, inputs = deposit.name, deposit.inputs
    else:
        name, inputs = "query", selector.decode_query(args.query)

    validation = selector.validate_inputs(inputs)
    if not validation.is_valid:
        print(f"Invalid inputs for {name}:")
        for factor, message in validation.errors.items():
            print(f"  {factor}: {message}")
        return 2

    # Determine output directory
    if args.out_dir:
        out_dir = Path(args.out_dir)
    else:
        Config.ensure_directories()
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        out_dir = Config.RUNS_DIR / name / ts

    result, report = run_selection(selector, inputs, out_dir, name, deposit_path=args.deposit)

    # Print summary
    print(f"Deposit: {name} (catalog v{report.catalog_version})")
    for rank, method_result in enumerate(result.ranked_methods, start=1):
        status = "ELIMINATED" if method_result.is_eliminated else "ok"
        print(f"{rank:>2}. {method_result.method:<18} {method_result.total_score:>5}  {status}")
        for reason in method_result.elimination_reasons:
            print(f"      - {reason}")
    print(f"Top method: {report.summary['top_method']}")
    print(f"Outputs: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
