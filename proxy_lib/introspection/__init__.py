"""Structural introspection of records."""

from .interfaces import IntrospectionProtocol, Visibility
from .markers import allow_dynamic_keys, is_marked_dynamic
from .reflection import ReflectionIntrospector

__all__ = [
    "IntrospectionProtocol",
    "Visibility",
    "ReflectionIntrospector",
    "allow_dynamic_keys",
    "is_marked_dynamic",
]
