"""Extension policy: may a record grow keys beyond its declared shape?"""
from __future__ import annotations

import logging
from typing import Dict

from proxy_lib.introspection.interfaces import IntrospectionProtocol

logger = logging.getLogger(__name__)


class ExtensionPolicy:
    """Decide whether ad hoc keys may be attached to instances of a type.

    A type allows them if it is the canonical any-type, carries the
    dynamic-extension marker, or overrides ``__setattr__``. The answer only
    depends on the type, so it is cached per type.
    """

    def __init__(self, introspector: IntrospectionProtocol) -> None:
        self._introspector = introspector
        self._cache: Dict[type, bool] = {}

    def explain(self, record_type: type) -> Dict[str, bool]:
        intro = self._introspector
        return {
            "canonical_any_type": intro.is_canonical_any_type(record_type),
            "marked_dynamic": intro.is_marked_dynamic_extension(record_type),
            "catch_all_write": intro.has_catch_all_write(record_type),
        }

    def allows_dynamic_keys(self, record_type: type) -> bool:
        allowed = self._cache.get(record_type)
        if allowed is None:
            signals = self.explain(record_type)
            allowed = any(signals.values())
            logger.debug("Dynamic keys for %s: %s %s", record_type.__qualname__, allowed, signals)
            self._cache[record_type] = allowed
        return allowed
