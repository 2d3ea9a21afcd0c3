"""
Logfire setup and thin logging helpers used across the service.
"""
from functools import lru_cache
from typing import Optional

import logfire

from core.config import settings

# Request URLs that would only add noise to traces
EXCLUDED_URLS = ["/health", "/docs", "/openapi.json", "/redoc"]


@lru_cache()
def get_logger():
    """Configure logfire once and return the module."""
    config_params = {"service_name": "survey-insights"}

    # Ship to Logfire only when a write token is configured
    logfire_token = settings.api_keys.logfire_token
    if logfire_token and logfire_token.get_secret_value():
        config_params["token"] = logfire_token.get_secret_value()
        config_params["send_to_logfire"] = True
    else:
        config_params["send_to_logfire"] = False

    logfire.configure(
        **config_params,
        scrubbing=False,
        inspect_arguments=False,
        environment=settings.logfire.environment,
    )
    return logfire


def instrument_fastapi(app):
    """Instrument FastAPI application with Logfire"""
    get_logger().instrument_fastapi(
        app,
        capture_headers=True,
        excluded_urls=EXCLUDED_URLS,
    )


def log_span(message: str, **kwargs):
    """Open a logfire span; use as a context manager around slow calls."""
    return get_logger().span(message, **kwargs)


def log_info(message: str, **kwargs):
    get_logger().info(message, **kwargs)


def log_warning(message: str, **kwargs):
    get_logger().warning(message, **kwargs)


def log_error(message: str, error: Optional[Exception] = None, **kwargs):
    if error:
        kwargs["error"] = str(error)
        kwargs["error_type"] = error.__class__.__name__
    get_logger().error(message, **kwargs)


logger = get_logger()
