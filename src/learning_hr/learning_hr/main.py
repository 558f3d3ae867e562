from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from config import get_settings_module

from .common.http import error_status
from .container import Container, build_container
from .core.exceptions import DomainError
from .attendance.controller import register as register_attendance
from .enrollment.controller import register as register_enrollment
from .payroll.controller import register as register_payroll
from .policy.controller import register as register_policy
from .progress.controller import register as register_progress
from .quizzes.controller import register as register_quizzes

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    # Number of reverse proxies in front of the app; their X-Forwarded-For
    # entries become remote_addr. 0 means the socket address is used as is.
    trusted_proxies = int(getattr(settings, "TRUSTED_PROXY_COUNT", 0))
    if trusted_proxies > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=trusted_proxies)

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("settings=%s store=%s", settings_module, getattr(settings, "RECORD_STORE", "mysql"))

    if container is None:
        container = build_container(settings)
    app.extensions["learning_hr"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = error_status(exc)
        if status >= 500:
            logger.warning("%s: %s", type(exc).__name__, exc)
        return jsonify({"success": False, "message": str(exc)}), status

    register_policy(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_progress(app, container)
    register_quizzes(app, container)
    register_enrollment(app, container)

    return app
