from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_APPROVED_LINK_DOMAIN
from .employees.controller import register as register_employees
from .payslips.controller import register as register_payslips
from .stores.controller import register as register_stores

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        store_config = dict(getattr(settings, "DOCUMENT_STORE"))
        logger.info("settings=%s document=%s/%s", settings_module, store_config.get("base_url"), store_config.get("bin_id"))
        container = build_container(
            document_store_config=store_config,
            approved_link_domain=getattr(settings, "APPROVED_LINK_DOMAIN", DEFAULT_APPROVED_LINK_DOMAIN),
        )

    # Also self-heals the remote document when it is missing or malformed.
    snapshot = container.portal.load()
    logger.info(
        "Portal ready: %d stores, %d employees, %d payslips",
        len(snapshot.stores),
        len(snapshot.employees),
        len(snapshot.payslips),
    )

    register_employees(app, container)
    register_stores(app, container)
    register_payslips(app, container)

    return app
