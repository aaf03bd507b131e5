"""Reflection-based introspection adapter.

Reads a record's shape from the things Python classes already declare:
annotations (including dataclasses), ``__slots__``, properties, pydantic
``model_fields`` and the methods defined on the class. Type-level answers
are memoised per type since a class's declared shape doesn't change;
instance-level answers are always computed fresh.

None of the existence checks here evaluate properties or call methods.
"""
from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from functools import lru_cache
from types import SimpleNamespace
from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic import BaseModel

from .interfaces import Visibility
from .markers import is_marked_dynamic

logger = logging.getLogger(__name__)

_MISSING = object()

# Framework bases whose own members are not part of a record's shape
_SKIPPED_BASES = (object, BaseModel)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _visibility(name: str) -> Visibility:
    return Visibility.PUBLIC if _is_public(name) else Visibility.NON_PUBLIC


def _shape_classes(record_type: type):
    """Classes contributing to the declared shape, base classes first."""
    for klass in reversed(record_type.__mro__):
        if klass in _SKIPPED_BASES:
            continue
        yield klass


def _is_pseudo_field(annotation: Any) -> bool:
    """ClassVar and InitVar annotations don't declare instance fields."""
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar", "InitVar", "dataclasses.InitVar"))
    if isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar:
        return True
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _slot_names(klass: type) -> Tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return tuple(s for s in slots if s not in ("__dict__", "__weakref__"))


@lru_cache(maxsize=None)
def _declared_fields(record_type: type) -> Tuple[str, ...]:
    names: Dict[str, None] = {}
    if issubclass(record_type, BaseModel):
        names.update(dict.fromkeys(record_type.model_fields))
    for klass in _shape_classes(record_type):
        if not issubclass(klass, BaseModel):
            for name, annotation in inspect.get_annotations(klass).items():
                if not _is_pseudo_field(annotation):
                    names[name] = None
        names.update(dict.fromkeys(_slot_names(klass)))
        for name, attr in klass.__dict__.items():
            if isinstance(attr, property):
                names[name] = None
    logger.debug("Declared fields of %s: %s", record_type.__qualname__, list(names))
    return tuple(names)


def _accepts_no_arguments(attr: Any) -> bool:
    if isinstance(attr, staticmethod):
        func, bound = attr.__func__, 0
    elif isinstance(attr, classmethod):
        func, bound = attr.__func__, 1
    elif inspect.isfunction(attr):
        func, bound = attr, 1
    else:
        return False
    try:
        params = list(inspect.signature(func).parameters.values())[bound:]
    except (TypeError, ValueError):
        return False
    return all(
        p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD) or p.default is not p.empty
        for p in params
    )


@lru_cache(maxsize=None)
def _declared_callables(record_type: type) -> Tuple[str, ...]:
    candidates: Dict[str, None] = {}
    for klass in _shape_classes(record_type):
        for name, attr in klass.__dict__.items():
            if isinstance(attr, (staticmethod, classmethod)) or inspect.isfunction(attr):
                candidates[name] = None
    # An override decides the arity, so check the attribute that actually resolves
    return tuple(
        name for name in candidates
        if _accepts_no_arguments(inspect.getattr_static(record_type, name, None))
    )


def _overriding_class(record_type: type, hook: str) -> Optional[type]:
    for klass in record_type.__mro__:
        if hook in klass.__dict__:
            # C-level slot wrappers (SimpleNamespace, partial, ...) are not user hooks
            if klass in _SKIPPED_BASES or not inspect.isfunction(klass.__dict__[hook]):
                return None
            return klass
    return None


def _instance_dict(record: Any) -> Dict[str, Any]:
    try:
        return object.__getattribute__(record, "__dict__")
    except AttributeError:
        return {}


def _pydantic_extra(record: Any) -> Dict[str, Any]:
    if not isinstance(record, BaseModel):
        return {}
    return record.__pydantic_extra__ or {}


class ReflectionIntrospector:
    """Default `IntrospectionProtocol` implementation for Python objects.

    Public means "name does not start with an underscore". A declared field
    is initialised when the instance holds its own value, a slot is filled,
    a class-level default exists, or it is a readable property.
    """

    # -- type-level shape -------------------------------------------------

    def list_public_fields(self, record: Any) -> Sequence[str]:
        names = dict.fromkeys(n for n in _declared_fields(type(record)) if _is_public(n))
        for name in self._ad_hoc_names(record):
            if _is_public(name):
                names[name] = None
        return list(names)

    def list_public_callables(self, record_type: type) -> Sequence[str]:
        return [n for n in _declared_callables(record_type) if _is_public(n)]

    def has_field(self, record_type: type, name: str) -> bool:
        return name in _declared_fields(record_type)

    def has_ad_hoc_field(self, record: Any, name: str) -> bool:
        return name in self._ad_hoc_names(record)

    def field_visibility(self, record_type: type, name: str) -> Visibility:
        return _visibility(name)

    def field_is_writable(self, record_type: type, name: str) -> bool:
        static = inspect.getattr_static(record_type, name, _MISSING)
        if isinstance(static, property):
            return static.fset is not None
        return True

    def has_callable(self, record_type: type, name: str) -> bool:
        return name in _declared_callables(record_type)

    def callable_visibility(self, record_type: type, name: str) -> Visibility:
        return _visibility(name)

    # -- extension signals ------------------------------------------------

    def is_canonical_any_type(self, record_type: type) -> bool:
        return record_type is SimpleNamespace

    def is_marked_dynamic_extension(self, record_type: type) -> bool:
        if is_marked_dynamic(record_type):
            return True
        if issubclass(record_type, BaseModel):
            return record_type.model_config.get("extra") == "allow"
        return False

    def has_catch_all_write(self, record_type: type) -> bool:
        owner = _overriding_class(record_type, "__setattr__")
        if owner is None:
            return False
        # frozen dataclasses override __setattr__ only to refuse writes
        if dataclasses.is_dataclass(owner) and owner.__dataclass_params__.frozen:
            return False
        return True

    def has_catch_all_read(self, record_type: type) -> bool:
        return _overriding_class(record_type, "__getattr__") is not None

    # -- instance state ---------------------------------------------------

    def field_is_initialised(self, record: Any, name: str) -> bool:
        if self._has_own_value(record, name):
            return True
        static = inspect.getattr_static(type(record), name, _MISSING)
        if static is _MISSING or inspect.ismemberdescriptor(static):
            return False
        if isinstance(static, property):
            return static.fget is not None
        return True

    def invoke_callable(self, record: Any, name: str) -> Any:
        return getattr(record, name)()

    def get_field(self, record: Any, name: str) -> Any:
        return getattr(record, name)

    def set_field(self, record: Any, name: str, value: Any) -> None:
        setattr(record, name, value)

    def delete_field(self, record: Any, name: str) -> None:
        if isinstance(inspect.getattr_static(type(record), name, None), property):
            delattr(record, name)
            return
        # a class-level default has nothing to remove on the instance
        if self._has_own_value(record, name) or _overriding_class(type(record), "__delattr__"):
            delattr(record, name)

    def attach_ad_hoc_field(self, record: Any, name: str, value: Any) -> None:
        setattr(record, name, value)

    # -- helpers ----------------------------------------------------------

    def _ad_hoc_names(self, record: Any):
        declared = _declared_fields(type(record))
        for name in list(_instance_dict(record)) + list(_pydantic_extra(record)):
            if name not in declared:
                yield name

    def _has_own_value(self, record: Any, name: str) -> bool:
        if name in _instance_dict(record) or name in _pydantic_extra(record):
            return True
        static = inspect.getattr_static(type(record), name, _MISSING)
        if inspect.ismemberdescriptor(static):
            try:
                static.__get__(record, type(record))
            except AttributeError:
                return False
            return True
        return False
