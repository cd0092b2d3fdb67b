"""Write the monthly billing CSV for one month.

Usage: python scripts/export_billing.py [YYYY-MM] [output.csv]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.ride_ledger.ride_ledger.billing.export import csv_filename, statement_to_csv
from src.ride_ledger.ride_ledger.common.datetime_utils import now_local
from src.ride_ledger.ride_ledger.common.logging_setup import configure_logging
from src.ride_ledger.ride_ledger.container import build_container
from src.ride_ledger.ride_ledger.ledger.windows import Month


def main(argv: list[str]) -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    month = Month.parse(argv[0]) if argv else Month.of(now_local())
    out_file = Path(argv[1]) if len(argv) > 1 else REPO_ROOT / "exports" / csv_filename(month)
    out_file.parent.mkdir(parents=True, exist_ok=True)

    container = build_container(db_config=settings.DB_CONFIG)
    report = container.report_service.billing_report(month)
    out_file.write_text(statement_to_csv(report), encoding="utf-8")

    print(f"OK: {len(report.bills)} client bill(s) for {month.label()} -> {out_file}")
    if report.skipped:
        print(f"WARNING: {report.skipped} ride(s) skipped (unreadable pickup time)")


if __name__ == "__main__":
    main(sys.argv[1:])
