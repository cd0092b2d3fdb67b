from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .passengers.controller import register as register_passengers
from .reports.controller import register as register_reports
from .rides.controller import register as register_rides

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    Pass `container` to run against other repositories (tests use in-memory ones);
    otherwise MySQL repositories are built from the settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    app.extensions["ride_ledger"] = container

    register_passengers(app, container)
    register_rides(app, container)
    register_reports(app, container)

    return app
