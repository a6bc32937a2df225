"""
Production settings for the exceptional project.

Secrets and the database location must come from the environment.
"""

import os

import dj_database_url

from core.logging import configure_logging, get_logger

from .base import *

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ["SECRET_KEY"]

DEBUG = False

DATABASES = {
    "default": dj_database_url.config(
        default=config.database.connection_url,
        conn_max_age=600,
        conn_health_checks=True,
        ssl_require=True,
    )
}

# Security settings
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Production always logs JSON lines for aggregation
configure_logging(json_format=True, log_level=config.logging.level)

get_logger(__name__).info("Production settings loaded", database=config.database.safe_url)
