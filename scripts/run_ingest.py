"""
Demo script: read QIF files via the public API and log a summary.

Usage:
    python scripts/run_ingest.py                          # sample inputs
    python scripts/run_ingest.py exports/checking.qif     # explicit files
    python scripts/run_ingest.py --day-first export.qif   # dd/mm dates
    python scripts/run_ingest.py --tolerant export.qif    # keep unterminated last record

For each file the transactions are loaded, converted to a DataFrame and
summarized (count, date range, total amount, split count).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_INPUT_FILES = [
    "tests/inputs/example_bank.qif",
    "tests/inputs/example_investment.qif",
]

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_ingest")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import qif_ingest

    args = sys.argv[1:]
    config = qif_ingest.ReaderConfig(
        day_first="--day-first" in args,
        tolerate_truncation="--tolerant" in args,
    )
    input_files = [a for a in args if not a.startswith("--")] or DEFAULT_INPUT_FILES

    for input_path in input_files:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        log.info("=" * 70)

        try:
            transactions = qif_ingest.load(input_path, config=config)
        except qif_ingest.QifIngestError as exc:
            log.error("FAIL  %s  (line %s): %s", input_path, exc.line_number, exc)
            continue

        df = qif_ingest.transactions_to_frame(transactions)
        splits = qif_ingest.splits_to_frame(transactions)

        log.info("  Transactions : %d", len(df))
        if len(df):
            log.info("  Date range   : %s .. %s", df["date"].min(), df["date"].max())
            log.info("  Total amount : %s", sum(df["amount_decimal"]))
        log.info("  Splits       : %d", len(splits))
        log.info("Done: %s\n", input_path)

    log.info("All files processed.")


if __name__ == "__main__":
    main()
