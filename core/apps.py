"""
App configuration for the core app.
"""

import logging
import os

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """App configuration for shared infrastructure."""

    name = "core"
    verbose_name = "Core"

    def ready(self):
        """Install tracing once apps are loaded, when enabled."""
        if os.environ.get("OTEL_ENABLED", "false").lower() != "true":
            return

        # Django's autoreloader imports the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()
