"""Options bundle accepted by :class:`pubsub_sdk.config.ClientConfig`."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger("pubsub_sdk.options")

ENV_PREFIX = "PUBSUB_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

_STRING_OPTIONS = (
    "subscribe_key",
    "publish_key",
    "secret_key",
    "auth_key",
    "cipher_key",
    "uuid",
    "origin",
)
_BOOL_OPTIONS = (
    "ssl",
    "use_instance_id",
    "use_request_id",
    "suppress_leave_events",
    "use_send_beacon",
)
_NUMBER_OPTIONS = (
    "transactional_request_timeout",
    "subscribe_request_timeout",
    "presence_timeout",
    "presence_announce_interval",
)

_ALIASES = {
    "subscribeKey": "subscribe_key",
    "publishKey": "publish_key",
    "secretKey": "secret_key",
    "authKey": "auth_key",
    "cipherKey": "cipher_key",
    "useInstanceId": "use_instance_id",
    "useRequestId": "use_request_id",
    "suppressLeaveEvents": "suppress_leave_events",
    "transactionalRequestTimeout": "transactional_request_timeout",
    "subscribeRequestTimeout": "subscribe_request_timeout",
    "useSendBeacon": "use_send_beacon",
    "presenceTimeout": "presence_timeout",
    "presenceAnnounceInterval": "presence_announce_interval",
}
_IGNORED_KEYS = {"instance_id", "instanceId"}


@dataclass(frozen=True)
class SetupOptions:
    """Caller-supplied options; ``None`` means "not supplied".

    Timeouts for requests are in milliseconds, presence values in seconds.
    """

    subscribe_key: Optional[str] = None
    publish_key: Optional[str] = None
    secret_key: Optional[str] = None
    auth_key: Optional[str] = None
    cipher_key: Optional[str] = None
    uuid: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    use_instance_id: Optional[bool] = None
    use_request_id: Optional[bool] = None
    suppress_leave_events: Optional[bool] = None
    ssl: Optional[bool] = None
    origin: Optional[str] = None
    transactional_request_timeout: Optional[Union[int, float]] = None
    subscribe_request_timeout: Optional[Union[int, float]] = None
    use_send_beacon: Optional[bool] = None
    presence_timeout: Optional[Union[int, float]] = None
    presence_announce_interval: Optional[Union[int, float]] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SetupOptions":
        """Build options from snake_case or camelCase keys.

        Instance ids are always generated, so a supplied one is dropped. Any
        other unknown key raises ``TypeError``.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _IGNORED_KEYS:
                logger.debug("Ignoring option %s", key)
                continue
            values[_ALIASES.get(key, key)] = value
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SetupOptions":
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in _STRING_OPTIONS:
            raw = _read(env, name)
            if raw is not None:
                values[name] = raw
        for name in _BOOL_OPTIONS:
            raw = _read(env, name)
            if raw is not None:
                values[name] = _parse_bool(name, raw)
        for name in _NUMBER_OPTIONS:
            raw = _read(env, name)
            if raw is not None:
                values[name] = _parse_number(raw)
        logger.debug("Loaded options from environment: %s", sorted(values))
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


def _read(env: Mapping[str, str], name: str) -> Optional[str]:
    raw = env.get(ENV_PREFIX + name.upper())
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {ENV_PREFIX}{name.upper()}: {raw!r}")


def _parse_number(raw: str) -> Union[int, float]:
    try:
        return int(raw)
    except ValueError:
        return float(raw)


__all__ = ["ENV_PREFIX", "SetupOptions"]
