"""
Process-wide handler configuration.

Built once on first use from the environment and then shared, read-only, by
every invocation that lands on the same execution environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from product_catalog.dal import ProductStore, get_dal_handler
from product_catalog.handlers.models.env_vars import get_handler_env_vars
from product_catalog.handlers.utils.observability import logger
from product_catalog.handlers.utils.responses import JSON_HEADERS


@dataclass(frozen=True)
class HandlerConfig:
    """Dependencies handed to each request pipeline."""

    table_name: str
    store: ProductStore
    headers: Mapping[str, str]


@lru_cache(maxsize=1)
def get_handler_config() -> HandlerConfig:
    """Return the configuration for this process, creating it on first call."""
    env_vars = get_handler_env_vars()
    store = get_dal_handler(
        table_name=env_vars.TABLE_NAME,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )
    logger.info("Handler configuration loaded", extra={"table_name": env_vars.TABLE_NAME})
    return HandlerConfig(
        table_name=env_vars.TABLE_NAME,
        store=store,
        headers=MappingProxyType(dict(JSON_HEADERS)),
    )
