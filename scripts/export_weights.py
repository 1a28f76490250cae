#!/usr/bin/env python3
"""Export the weight matrix of a catalog as one CSV per category."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from src.config import Config
from src.method_selector.engine import MethodSelector
from src.method_selector.schema import CATEGORIES


def export_weights(out_dir: Path, catalog_path: Optional[str] = None) -> List[Path]:
    """Write weights_<category>.csv files and return their paths."""
    selector = MethodSelector.from_path(catalog_path)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for category in CATEGORIES:
        path = out_dir / f"weights_{category}.csv"
        selector.weights_table(category).to_csv(path)
        written.append(path)
    return written


def main() -> int:
    parser = argparse.ArgumentParser(description="Export catalog weights to CSV.")
    parser.add_argument("--catalog", type=str, default=None,
                        help="Weight catalog YAML (defaults to CATALOG_PATH).")
    parser.add_argument("--out-dir", dest="out_dir", type=str, default=str(Config.RUNS_DIR / "weights"),
                        help="Output directory")
    args = parser.parse_args()

    for path in export_weights(Path(args.out_dir), args.catalog):
        print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
