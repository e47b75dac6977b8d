from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .ledger.controller import register as register_ledger
from .ledger.repository import LedgerRepository


def create_app(settings: Optional[Any] = None, *, repository: Optional[LedgerRepository] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger("attendance_ledger")

    backend = str(getattr(settings, "LEDGER_BACKEND", "file")).lower()
    logger.info("settings=%s backend=%s fingerprint=%s", getattr(settings, "__name__", settings), backend,
                getattr(settings, "FINGERPRINT_ALGORITHM", "demo"))

    if repository is None and backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        db_config = getattr(settings, "DB_CONFIG")
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(settings, repository=repository)
    app.extensions["ledger_container"] = container

    register_ledger(app, container)

    return app
