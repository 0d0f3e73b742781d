"""Client configuration holder for the pub/sub SDK."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union
from uuid import uuid4

from .options import SetupOptions

logger = logging.getLogger("pubsub_sdk.config")

DEFAULT_ORIGIN = "pubsub.pubnub.com"
# milliseconds
DEFAULT_TRANSACTIONAL_REQUEST_TIMEOUT = 15 * 1000
DEFAULT_SUBSCRIBE_REQUEST_TIMEOUT = 310 * 1000
# seconds
DEFAULT_PRESENCE_TIMEOUT = 300

Number = Union[int, float]

_MASKED = "***"


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


class ClientConfig:
    """Holds every tunable of a single SDK client.

    Built once per client from a :class:`SetupOptions` (or a plain mapping with
    the same keys). Values are stored as given: nothing here validates, and
    ``subscribe_key`` is left for the calling layer to enforce.

    The object is not synchronized. It is meant to be read and written by the
    client that owns it; share it across threads only behind your own lock.
    """

    def __init__(self, setup: Union[SetupOptions, Mapping[str, Any], None] = None) -> None:
        if setup is None:
            setup = SetupOptions()
        elif not isinstance(setup, SetupOptions):
            setup = SetupOptions.from_mapping(setup)

        self._instance_id = str(uuid4())
        self.auth_key: str = setup.auth_key or ""
        self.secret_key: str = setup.secret_key or ""
        self.subscribe_key: Optional[str] = setup.subscribe_key
        self.publish_key: Optional[str] = setup.publish_key
        self.cipher_key: Optional[str] = setup.cipher_key
        self.uuid: Optional[str] = setup.uuid
        self.base_params: Dict[str, Any] = dict(setup.params or {})

        self.set_request_id_config(_pick(setup.use_request_id, False))
        self.set_suppress_leave_events(_pick(setup.suppress_leave_events, False))
        self.set_instance_id_config(_pick(setup.use_instance_id, False))
        self.set_ssl_config(_pick(setup.ssl, False))
        self.set_origin(_pick(setup.origin, DEFAULT_ORIGIN))
        self.set_transaction_timeout(
            _pick(setup.transactional_request_timeout, DEFAULT_TRANSACTIONAL_REQUEST_TIMEOUT)
        )
        self.set_subscribe_timeout(_pick(setup.subscribe_request_timeout, DEFAULT_SUBSCRIBE_REQUEST_TIMEOUT))
        self.set_send_beacon_config(_pick(setup.use_send_beacon, True))
        self.set_presence_timeout(_pick(setup.presence_timeout, DEFAULT_PRESENCE_TIMEOUT))

        # an explicit interval overrides the one derived from the timeout above
        if setup.presence_announce_interval is not None:
            self.set_presence_announce_interval(setup.presence_announce_interval)

        logger.debug("Client config created %r", self)

    @property
    def instance_id(self) -> str:
        return self._instance_id

    def is_instance_id_enabled(self) -> bool:
        return self._use_instance_id

    def set_instance_id_config(self, val: bool) -> "ClientConfig":
        self._use_instance_id = val
        return self

    def is_request_id_enabled(self) -> bool:
        return self._use_request_id

    def set_request_id_config(self, val: bool) -> "ClientConfig":
        self._use_request_id = val
        return self

    def get_subscribe_timeout(self) -> Number:
        return self._subscribe_request_timeout

    def set_subscribe_timeout(self, val: Number) -> "ClientConfig":
        self._subscribe_request_timeout = val
        return self

    def get_transaction_timeout(self) -> Number:
        return self._transactional_request_timeout

    def set_transaction_timeout(self, val: Number) -> "ClientConfig":
        self._transactional_request_timeout = val
        return self

    def is_suppressing_leave_events(self) -> bool:
        return self._suppress_leave_events

    def set_suppress_leave_events(self, val: bool) -> "ClientConfig":
        self._suppress_leave_events = val
        return self

    def is_ssl_enabled(self) -> bool:
        return self._ssl_enabled

    def set_ssl_config(self, val: bool) -> "ClientConfig":
        self._ssl_enabled = val
        return self

    def get_origin(self) -> str:
        return self._custom_origin

    def set_origin(self, val: str) -> "ClientConfig":
        self._custom_origin = val
        return self

    def is_send_beacon_enabled(self) -> bool:
        return self._use_send_beacon

    def set_send_beacon_config(self, val: bool) -> "ClientConfig":
        self._use_send_beacon = val
        return self

    def get_presence_timeout(self) -> Number:
        return self._presence_timeout

    def set_presence_timeout(self, val: Number) -> "ClientConfig":
        """Store the presence timeout and re-derive the announce interval.

        Any interval set earlier through :meth:`set_presence_announce_interval`
        is overwritten.
        """
        self._presence_timeout = val
        self._presence_announce_interval = (self._presence_timeout / 2) - 1
        logger.debug(
            "Presence timeout=%s, announce interval=%s",
            self._presence_timeout,
            self._presence_announce_interval,
        )
        return self

    def get_presence_announce_interval(self) -> Number:
        return self._presence_announce_interval

    def set_presence_announce_interval(self, val: Number) -> "ClientConfig":
        self._presence_announce_interval = val
        return self

    def get_uuid(self) -> Optional[str]:
        return self.uuid

    def set_uuid(self, val: Optional[str]) -> "ClientConfig":
        self.uuid = val
        return self

    def get_auth_key(self) -> str:
        return self.auth_key

    def set_auth_key(self, val: str) -> "ClientConfig":
        self.auth_key = val
        return self

    def get_cipher_key(self) -> Optional[str]:
        return self.cipher_key

    def set_cipher_key(self, val: Optional[str]) -> "ClientConfig":
        self.cipher_key = val
        return self

    def __repr__(self) -> str:
        fields = {
            "subscribe_key": self.subscribe_key,
            "publish_key": self.publish_key,
            "secret_key": _MASKED if self.secret_key else "",
            "auth_key": _MASKED if self.auth_key else "",
            "cipher_key": _MASKED if self.cipher_key else None,
            "instance_id": self._instance_id,
            "uuid": self.uuid,
            "origin": self._custom_origin,
            "ssl": self._ssl_enabled,
            "presence_timeout": self._presence_timeout,
            "presence_announce_interval": self._presence_announce_interval,
        }
        body = ", ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"ClientConfig({body})"


__all__ = [
    "ClientConfig",
    "DEFAULT_ORIGIN",
    "DEFAULT_PRESENCE_TIMEOUT",
    "DEFAULT_SUBSCRIBE_REQUEST_TIMEOUT",
    "DEFAULT_TRANSACTIONAL_REQUEST_TIMEOUT",
]
