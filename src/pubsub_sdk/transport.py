"""Request parameters a transport derives from a :class:`ClientConfig`."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from uuid import uuid4

import httpx

from .config import ClientConfig

logger = logging.getLogger("pubsub_sdk.transport")


def base_url(config: ClientConfig) -> str:
    scheme = "https" if config.is_ssl_enabled() else "http"
    return f"{scheme}://{config.get_origin()}"


def _timeout_from_ms(value: float) -> httpx.Timeout:
    return httpx.Timeout(value / 1000)


def subscribe_timeout(config: ClientConfig) -> httpx.Timeout:
    return _timeout_from_ms(config.get_subscribe_timeout())


def transaction_timeout(config: ClientConfig) -> httpx.Timeout:
    return _timeout_from_ms(config.get_transaction_timeout())


def request_params(config: ClientConfig, request_id: Optional[str] = None) -> Dict[str, Any]:
    """Query parameters attached to every outgoing request.

    ``base_params`` go first so the identifiers below always win. The secret
    and cipher keys are never sent.
    """
    params: Dict[str, Any] = dict(config.base_params)
    if config.get_uuid():
        params["uuid"] = config.get_uuid()
    if config.is_instance_id_enabled():
        params["instanceid"] = config.instance_id
    if config.is_request_id_enabled():
        params["requestid"] = request_id or str(uuid4())
    if config.get_auth_key():
        params["auth"] = config.get_auth_key()
    return params


def client_kwargs(config: ClientConfig, *, subscribe: bool = False) -> Dict[str, Any]:
    """Keyword arguments for ``httpx.Client`` serving one kind of request.

    A request id, when enabled, must be fresh per request, so it is left out
    here; pass ``request_params(config)`` on each call instead.
    """
    params = request_params(config)
    params.pop("requestid", None)
    timeout = subscribe_timeout(config) if subscribe else transaction_timeout(config)
    logger.debug("Building %s client for %s", "subscribe" if subscribe else "transactional", base_url(config))
    return {"base_url": base_url(config), "timeout": timeout, "params": params}


__all__ = [
    "base_url",
    "client_kwargs",
    "request_params",
    "subscribe_timeout",
    "transaction_timeout",
]
