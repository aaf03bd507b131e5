"""Exceptions raised by the proxy accessor.

Both concrete errors also derive from the matching builtin so callers that
already catch ``KeyError`` / ``TypeError`` keep working.
"""
from __future__ import annotations
from typing import Union


class ProxyError(Exception):
    """Base class for every error raised by proxy_lib."""


class KeyNotFoundError(ProxyError, KeyError):
    """The key does not exist on the element or is not visible.

    The key itself is the only argument so the error survives pickling.
    """

    def __init__(self, key: Union[int, str]) -> None:
        super().__init__(key)

    @property
    def key(self) -> Union[int, str]:
        return self.args[0]

    def __str__(self) -> str:
        return f"Key `{self.key}` not found"


class UnsupportedOperationError(ProxyError, TypeError):
    """The requested operation cannot be applied to this key or element."""
