"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production). Each application instance owns
its own ``TaskStore``, so several isolated instances can coexist in
one process.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask

from config import get_config

from .store import TaskStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    config_name: str | None = None,
    store: TaskStore | None = None,
    config_overrides: dict[str, Any] | None = None,
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        store: Task store to serve. A fresh empty store is created
               when omitted.
        config_overrides: Settings applied on top of the config class.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if config_overrides:
        app.config.update(config_overrides)

    logging.getLogger().setLevel(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    logger.info("Creating app with config: %s", config_class.__name__)

    app.extensions["task_store"] = store if store is not None else TaskStore()

    # Register request hooks and blueprints
    from .rate_limit import init_rate_limiter
    from .routes.api import api_bp

    init_rate_limiter(app)
    app.register_blueprint(api_bp)

    return app
