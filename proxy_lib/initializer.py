"""Default values for keys created without an explicit value."""
from __future__ import annotations
from types import SimpleNamespace
from typing import Any, Optional, Union


class ValueInitializer:
    """Build an empty value of a requested type.

    ``None`` yields ``None``; ``"array"``/``"list"`` an empty list;
    ``"dict"``/``"map"`` an empty dict; ``"object"`` an empty
    `SimpleNamespace`; a class is instantiated without arguments.
    """

    _NAMED = {
        "array": list,
        "list": list,
        "dict": dict,
        "map": dict,
        "object": SimpleNamespace,
    }

    @classmethod
    def init(cls, type_: Optional[Union[str, type]] = None) -> Any:
        if type_ is None:
            return None
        if isinstance(type_, str):
            factory = cls._NAMED.get(type_.lower())
            if factory is None:
                raise ValueError(f"Unknown value type: {type_!r}")
            return factory()
        if isinstance(type_, type):
            return type_()
        raise TypeError(f"Expected a type name or a class, got {type(type_).__name__}")
