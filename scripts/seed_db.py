from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.ride_ledger.ride_ledger.common.logging_setup import configure_logging
from src.ride_ledger.ride_ledger.database.bootstrap import apply_seed_sql


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded demo passengers and rides -> {db_config.get('database')}")


if __name__ == "__main__":
    main()
