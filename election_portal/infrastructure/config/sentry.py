"""Sentry error reporting."""

import logging

import sentry_sdk

from election_portal.infrastructure.config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


def init_sentry(settings: Settings | None = None) -> bool:
    """Initialize Sentry when a DSN is configured.

    Returns:
        True if Sentry was initialized
    """
    settings = settings or get_settings()
    if not settings.SENTRY_DSN:
        logger.debug("SENTRY_DSN not set, error reporting disabled")
        return False

    sentry_sdk.init(dsn=settings.SENTRY_DSN, environment=settings.ENVIRONMENT)
    logger.info("Sentry initialized (environment=%s)", settings.ENVIRONMENT)
    return True
