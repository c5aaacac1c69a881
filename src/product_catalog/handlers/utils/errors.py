"""
Entry point guard for unclassified failures.
"""

import functools

from aws_lambda_powertools.metrics import MetricUnit

from product_catalog.handlers.utils.observability import logger, metrics


def log_unhandled_errors(func):
    """Log unexpected exceptions and re-raise them so the invocation is recorded as failed."""

    @functools.wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except Exception:
            metrics.add_metric(name="UnhandledError", unit=MetricUnit.Count, value=1)
            logger.exception("Unhandled error in handler", extra={"function_name": func.__name__})
            raise

    return wrapper
