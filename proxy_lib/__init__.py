"""Uniform key access over containers and records."""

from .config import ProxyConfig, load_proxy_config
from .errors import KeyNotFoundError, ProxyError, UnsupportedOperationError
from .initializer import ValueInitializer
from .introspection import allow_dynamic_keys
from .proxy import Proxy

__all__ = [
    "Proxy",
    "ProxyConfig",
    "load_proxy_config",
    "ProxyError",
    "KeyNotFoundError",
    "UnsupportedOperationError",
    "ValueInitializer",
    "allow_dynamic_keys",
]
