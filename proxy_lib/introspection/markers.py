"""Class-level marker for records that accept ad hoc keys."""
from typing import TypeVar

T = TypeVar("T", bound=type)

DYNAMIC_KEYS_ATTR = "__allow_dynamic_keys__"


def allow_dynamic_keys(cls: T) -> T:
    """Mark `cls` so proxies may attach keys outside its declared shape.

    Usage:

        @allow_dynamic_keys
        class Bag:
            name: str = ""
    """
    setattr(cls, DYNAMIC_KEYS_ATTR, True)
    return cls


def is_marked_dynamic(cls: type) -> bool:
    return bool(getattr(cls, DYNAMIC_KEYS_ATTR, False))
