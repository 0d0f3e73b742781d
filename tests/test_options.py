from __future__ import annotations

import pytest

from pubsub_sdk.config import ClientConfig
from pubsub_sdk.options import SetupOptions


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(TypeError):
        SetupOptions.from_mapping({"subscribe_key": "demo", "presence_timout": 200})


def test_from_mapping_drops_instance_id() -> None:
    options = SetupOptions.from_mapping({"subscribe_key": "demo", "instanceId": "mine"})
    assert options.to_dict() == {"subscribe_key": "demo"}


def test_from_mapping_accepts_camel_case_names() -> None:
    options = SetupOptions.from_mapping(
        {"subscribeKey": "demo", "presenceTimeout": 200, "ssl": True, "useSendBeacon": False}
    )
    assert options.to_dict() == {
        "subscribe_key": "demo",
        "presence_timeout": 200,
        "ssl": True,
        "use_send_beacon": False,
    }


def test_camel_case_mapping_configures_client() -> None:
    config = ClientConfig({"subscribeKey": "demo", "presenceTimeout": 200, "ssl": True, "useSendBeacon": False})

    assert config.subscribe_key == "demo"
    assert config.get_presence_timeout() == 200
    assert config.get_presence_announce_interval() == 99
    assert config.is_ssl_enabled() is True
    assert config.is_send_beacon_enabled() is False


def test_misspelt_option_raises() -> None:
    with pytest.raises(TypeError):
        ClientConfig({"subscribe_key": "demo", "presence_timout": 200})


def test_from_env_reads_prefixed_variables() -> None:
    env = {
        "PUBSUB_SUBSCRIBE_KEY": "sub-c-env",
        "PUBSUB_ORIGIN": " ps.example.com ",
        "PUBSUB_SSL": "true",
        "PUBSUB_USE_SEND_BEACON": "off",
        "PUBSUB_PRESENCE_TIMEOUT": "120",
        "PUBSUB_TRANSACTIONAL_REQUEST_TIMEOUT": "2500.5",
        "PUBSUB_AUTH_KEY": "",
    }

    options = SetupOptions.from_env(env)

    assert options.subscribe_key == "sub-c-env"
    assert options.origin == "ps.example.com"
    assert options.ssl is True
    assert options.use_send_beacon is False
    assert options.presence_timeout == 120
    assert options.transactional_request_timeout == 2500.5
    assert options.auth_key is None


def test_from_env_leaves_defaults_to_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUBSUB_SUBSCRIBE_KEY", "sub-c-env")
    monkeypatch.delenv("PUBSUB_PRESENCE_TIMEOUT", raising=False)
    monkeypatch.delenv("PUBSUB_ORIGIN", raising=False)

    config = ClientConfig(SetupOptions.from_env())

    assert config.subscribe_key == "sub-c-env"
    assert config.get_presence_announce_interval() == 149
    assert config.get_origin() == "pubsub.pubnub.com"


def test_from_env_rejects_bad_boolean() -> None:
    with pytest.raises(ValueError):
        SetupOptions.from_env({"PUBSUB_SSL": "maybe"})


def test_from_env_rejects_bad_number() -> None:
    with pytest.raises(ValueError):
        SetupOptions.from_env({"PUBSUB_PRESENCE_TIMEOUT": "soon"})
