"""Pub/sub client SDK configuration."""

import logging

from .config import ClientConfig
from .options import SetupOptions

logging.getLogger("pubsub_sdk").addHandler(logging.NullHandler())

__all__ = ["ClientConfig", "SetupOptions"]
