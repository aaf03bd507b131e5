"""Element variants wrapped by a Proxy.

An element is either a container (mapping or sequence) or a record (any
other object). `make_target` picks the variant once; afterwards every
operation is dispatched to variant-specific code without re-checking types.
"""
from __future__ import annotations

import numbers
from collections.abc import MutableMapping, MutableSequence
from typing import Any, List, Protocol

from proxy_lib.errors import UnsupportedOperationError
from proxy_lib.introspection.interfaces import IntrospectionProtocol
from proxy_lib.keys import Key, KeyForm, Resolution, callable_key, is_callable_key
from proxy_lib.policy import ExtensionPolicy

_SCALARS = (str, bytes, bytearray, numbers.Number, tuple, frozenset, type(None))


def is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALARS)


class Target(Protocol):
    """Variant-specific operations. Callers resolve keys before calling."""

    element: Any

    def keys(self) -> List[Key]: ...

    def read(self, res: Resolution) -> Any: ...

    def write(self, res: Resolution, value: Any) -> None: ...

    def is_initialised(self, res: Resolution) -> bool: ...

    def insert(self, key: Key, value: Any) -> None: ...

    def remove(self, res: Resolution) -> None: ...

    def dynamic_keys_allowed(self) -> bool: ...


class MappingTarget:
    """Container variant over a mutable mapping."""

    def __init__(self, element: MutableMapping) -> None:
        self.element = element

    def keys(self) -> List[Key]:
        return list(self.element)

    def read(self, res: Resolution) -> Any:
        return self.element[res.key]

    def write(self, res: Resolution, value: Any) -> None:
        self.element[res.key] = value

    def is_initialised(self, res: Resolution) -> bool:
        return self.element[res.key] is not None

    def insert(self, key: Key, value: Any) -> None:
        self.element[key] = value

    def remove(self, res: Resolution) -> None:
        del self.element[res.key]

    def dynamic_keys_allowed(self) -> bool:
        return True


class SequenceTarget(MappingTarget):
    """Container variant over a mutable sequence, keyed by index.

    New keys can only be appended; removing an item shifts later indices.
    """

    def __init__(self, element: MutableSequence) -> None:
        self.element = element

    def keys(self) -> List[Key]:
        return list(range(len(self.element)))

    def insert(self, key: Key, value: Any) -> None:
        if type(key) is not int or key != len(self.element):
            raise UnsupportedOperationError("Cannot create a sparse sequence index")
        self.element.append(value)


class RecordTarget:
    """Record variant: fields and zero-argument callables of an object."""

    def __init__(self, element: Any, introspector: IntrospectionProtocol, policy: ExtensionPolicy) -> None:
        self.element = element
        self._introspector = introspector
        self._policy = policy

    def keys(self) -> List[Key]:
        intro = self._introspector
        names = list(intro.list_public_fields(self.element))
        names += [callable_key(n) for n in intro.list_public_callables(type(self.element))]
        return list(dict.fromkeys(names))

    def read(self, res: Resolution) -> Any:
        if res.form is KeyForm.CALLABLE:
            return self._introspector.invoke_callable(self.element, res.name)
        return self._introspector.get_field(self.element, res.name)

    def write(self, res: Resolution, value: Any) -> None:
        if res.form is KeyForm.CALLABLE:
            raise UnsupportedOperationError("Cannot set a class method")
        if not self._introspector.field_is_writable(type(self.element), res.name):
            raise UnsupportedOperationError("Cannot set a read-only property")
        if not res.declared and not self._introspector.has_ad_hoc_field(self.element, res.name):
            # only readable through __getattr__, so writing attaches a new field
            if not self.dynamic_keys_allowed():
                raise UnsupportedOperationError("Cannot create a new property")
        self._introspector.set_field(self.element, res.name, value)

    def is_initialised(self, res: Resolution) -> bool:
        intro = self._introspector
        if res.form is KeyForm.CALLABLE:
            return True
        if res.declared:
            return intro.field_is_initialised(self.element, res.name)
        if intro.has_ad_hoc_field(self.element, res.name):
            return True
        # only reachable through __getattr__: set means "reads as non-None"
        try:
            return intro.get_field(self.element, res.name) is not None
        except AttributeError:
            return False

    def insert(self, key: Key, value: Any) -> None:
        if not isinstance(key, str):
            raise UnsupportedOperationError("Cannot create a non-string property")
        if is_callable_key(key) or self._introspector.has_callable(type(self.element), key):
            raise UnsupportedOperationError("Cannot create a class method")
        if not self.dynamic_keys_allowed():
            raise UnsupportedOperationError("Cannot create a new property")
        self._introspector.attach_ad_hoc_field(self.element, key, value)

    def remove(self, res: Resolution) -> None:
        if res.form is KeyForm.CALLABLE:
            raise UnsupportedOperationError("Cannot unset a class method")
        self._introspector.delete_field(self.element, res.name)

    def dynamic_keys_allowed(self) -> bool:
        return self._policy.allows_dynamic_keys(type(self.element))


def make_target(element: Any, introspector: IntrospectionProtocol, policy: ExtensionPolicy) -> Target:
    if isinstance(element, MutableMapping):
        return MappingTarget(element)
    if isinstance(element, MutableSequence):
        return SequenceTarget(element)
    if is_scalar(element):
        raise UnsupportedOperationError("Cannot create a proxy for a scalar value")
    return RecordTarget(element, introspector, policy)
