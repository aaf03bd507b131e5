"""Key resolution: does a key exist on an element, and what kind is it?

Callable members are addressed with a ``()`` suffix (``"method()"``), so a
key ending in ``()`` never names a field.
"""
from __future__ import annotations

import logging
from collections.abc import MutableMapping, MutableSequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from proxy_lib.introspection.interfaces import IntrospectionProtocol, Visibility

logger = logging.getLogger(__name__)

Key = Union[int, str]

CALLABLE_SUFFIX = "()"

CATCH_ALL_UNIVERSAL = "universal"
CATCH_ALL_DECLARED = "declared"


class KeyForm(str, Enum):
    FIELD = "field"
    CALLABLE = "callable"
    CONTAINER_ENTRY = "container-entry"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one key against one element.

    `declared` is False for ad hoc fields and keys that only exist through a
    catch-all read hook.
    """

    key: Key
    name: Key
    form: KeyForm
    exists: bool
    visible: bool
    declared: bool = True

    @property
    def found(self) -> bool:
        return self.exists and self.visible


def is_callable_key(key: Key) -> bool:
    return isinstance(key, str) and key.endswith(CALLABLE_SUFFIX)


def callable_key(name: str) -> str:
    return name + CALLABLE_SUFFIX


def strip_callable(key: str) -> str:
    return key[: -len(CALLABLE_SUFFIX)]


def sequence_index(seq: MutableSequence, key: Key) -> bool:
    """True if `key` addresses an existing item of `seq`.

    Negative indices and bools are not keys of a sequence.
    """
    return type(key) is int and 0 <= key < len(seq)


class KeyResolver:
    """Resolve keys against containers and records.

    `catch_all_read` decides what a record with a ``__getattr__`` hook
    reports for undeclared field keys: ``"universal"`` treats every such key
    as existing, ``"declared"`` ignores the hook.
    """

    def __init__(self, introspector: IntrospectionProtocol, catch_all_read: str = CATCH_ALL_UNIVERSAL) -> None:
        if catch_all_read not in (CATCH_ALL_UNIVERSAL, CATCH_ALL_DECLARED):
            raise ValueError(f"Unknown catch-all read policy: {catch_all_read!r}")
        self._introspector = introspector
        self._catch_all_read = catch_all_read

    def resolve(self, element: Any, key: Key) -> Resolution:
        if isinstance(element, MutableMapping):
            return Resolution(key, key, KeyForm.CONTAINER_ENTRY, key in element, True)
        if isinstance(element, MutableSequence):
            return Resolution(key, key, KeyForm.CONTAINER_ENTRY, sequence_index(element, key), True)
        return self._resolve_record(element, key)

    def _resolve_record(self, record: Any, key: Key) -> Resolution:
        intro = self._introspector
        record_type = type(record)
        if not isinstance(key, str):
            # record members are always named
            return Resolution(key, key, KeyForm.FIELD, False, False, False)

        if is_callable_key(key):
            name = strip_callable(key)
            exists = intro.has_callable(record_type, name)
            visible = exists and intro.callable_visibility(record_type, name) is Visibility.PUBLIC
            return Resolution(key, name, KeyForm.CALLABLE, exists, visible)

        if intro.has_field(record_type, key):
            visible = intro.field_visibility(record_type, key) is Visibility.PUBLIC
            return Resolution(key, key, KeyForm.FIELD, True, visible)

        if intro.has_ad_hoc_field(record, key):
            visible = intro.field_visibility(record_type, key) is Visibility.PUBLIC
            return Resolution(key, key, KeyForm.FIELD, True, visible, declared=False)

        if self._catch_all_read == CATCH_ALL_UNIVERSAL and intro.has_catch_all_read(record_type):
            logger.debug("Key %r on %s resolved through __getattr__", key, record_type.__qualname__)
            visible = intro.field_visibility(record_type, key) is Visibility.PUBLIC
            return Resolution(key, key, KeyForm.FIELD, True, visible, declared=False)

        return Resolution(key, key, KeyForm.FIELD, False, False, False)
