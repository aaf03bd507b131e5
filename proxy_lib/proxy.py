"""Uniform key access over containers and records.

A `Proxy` wraps either a container (dict-like or list-like) or a record
(any other object) and lets callers read, write, create and delete keys
without caring which one it is:

    data = {"foo": "bar"}
    proxy = Proxy(data)
    proxy.set("foo", "baz")
    assert data["foo"] == "baz"

Record members are addressed by name; zero-argument callables use the
``"name()"`` form and are invoked on `get`. The element is held by
reference, so changes made through the proxy are visible to its owner and
the other way round.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from proxy_lib.config import ProxyConfig
from proxy_lib.errors import KeyNotFoundError, UnsupportedOperationError
from proxy_lib.initializer import ValueInitializer
from proxy_lib.introspection.interfaces import IntrospectionProtocol
from proxy_lib.introspection.reflection import ReflectionIntrospector
from proxy_lib.keys import Key, KeyForm, KeyResolver, Resolution, is_callable_key
from proxy_lib.policy import ExtensionPolicy
from proxy_lib.targets import is_scalar, make_target

logger = logging.getLogger(__name__)

_UNSET = object()


class Proxy:
    """Accessor over one element.

    Mutating methods return the proxy itself so calls can be chained.
    """

    def __init__(
        self,
        element: Any,
        *,
        introspector: Optional[IntrospectionProtocol] = None,
        config: Optional[ProxyConfig] = None,
        policy: Optional[ExtensionPolicy] = None,
    ) -> None:
        self._config = config or ProxyConfig()
        self._introspector = introspector or ReflectionIntrospector()
        self._policy = policy or ExtensionPolicy(self._introspector)
        self._resolver = KeyResolver(self._introspector, self._config.catch_all_read)
        self._target = make_target(element, self._introspector, self._policy)

    @property
    def element(self) -> Any:
        return self._target.element

    def _resolve(self, key: Key) -> Resolution:
        return self._resolver.resolve(self._target.element, key)

    def _require(self, key: Key) -> Resolution:
        res = self._resolve(key)
        if not res.found:
            raise KeyNotFoundError(key)
        return res

    def has(self, key: Key) -> bool:
        """Check if a key exists in the element and is visible."""
        return self._resolve(key).found

    def get_keys(self) -> List[Key]:
        """Return the keys of the element.

        Containers list their keys in native order. Records list public
        fields first, then public callables in ``"name()"`` form.
        """
        return self._target.keys()

    def get(self, key: Key) -> Any:
        """Return the value at `key`, invoking it for callable keys.

        Raises `KeyNotFoundError` if the key does not exist.
        """
        return self._target.read(self._require(key))

    def set(self, key: Key, value: Any) -> "Proxy":
        """Overwrite the value of an existing key.

        Raises `UnsupportedOperationError` for callable keys, on containers
        too, and `KeyNotFoundError` if the key does not exist.
        """
        if is_callable_key(key):
            raise UnsupportedOperationError("Cannot set a class method")
        res = self._resolve(key)
        if not res.found:
            raise KeyNotFoundError(key)
        self._target.write(res, value)
        return self

    def is_initialised(self, key: Key) -> bool:
        """Check if the key holds a value.

        Container entries holding ``None`` count as not initialised;
        callable keys are always initialised.
        Raises `KeyNotFoundError` if the key does not exist.
        """
        return self._target.is_initialised(self._require(key))

    def create(self, key: Key, value: Any = _UNSET, *, type_: Union[str, type, None] = None) -> "Proxy":
        """Create `key` holding `value`, leaving an existing key alone.

        When `value` is omitted it is built by `ValueInitializer` from
        `type_`. With ``create_mode="initialise_missing"`` a key that exists
        but is not initialised receives the value.

        Raises `UnsupportedOperationError` if the element cannot grow new keys
        or `key` names a non-public member.
        """
        if value is _UNSET:
            value = ValueInitializer.init(type_)
        res = self._resolve(key)
        if res.exists and not res.visible:
            raise UnsupportedOperationError("Cannot create a non-public property")
        if res.found:
            if self._config.create_mode == "initialise_missing" and not self._target.is_initialised(res):
                logger.debug("Initialising existing key %r", key)
                self._target.write(res, value)
            return self
        self._target.insert(key, value)
        return self

    def unset(self, key: Key) -> "Proxy":
        """Remove `key` from the element; missing keys are ignored.

        Raises `UnsupportedOperationError` for callable keys.
        """
        res = self._resolve(key)
        if res.form is KeyForm.CALLABLE:
            raise UnsupportedOperationError("Cannot unset a class method")
        if res.found:
            self._target.remove(res)
        return self

    def get_proxy(self, key: Key) -> "Proxy":
        """Return a proxy over the nested container or record at `key`.

        The nested value is shared, not copied.
        Raises `KeyNotFoundError` if the key does not exist and
        `UnsupportedOperationError` if the value is a scalar.
        """
        value = self.get(key)
        if is_scalar(value):
            raise UnsupportedOperationError("Cannot create a proxy for a scalar value")
        return Proxy(value, introspector=self._introspector, config=self._config, policy=self._policy)

    def dynamic_keys_allowed(self) -> bool:
        """Check if new keys can be created on the element."""
        return self._target.dynamic_keys_allowed()

    def __contains__(self, key: Key) -> bool:
        return self.has(key)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"Proxy({type(self.element).__name__})"
