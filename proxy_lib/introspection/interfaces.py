"""Protocol definitions for structural introspection of records.

The accessor never touches ``inspect`` or ``dataclasses`` directly; it asks
an object implementing `IntrospectionProtocol` instead. The default adapter
lives in `proxy_lib.introspection.reflection`.
"""
from enum import Enum
from typing import Any, Protocol, Sequence, runtime_checkable


class Visibility(str, Enum):
    PUBLIC = "public"
    NON_PUBLIC = "non-public"


@runtime_checkable
class IntrospectionProtocol(Protocol):
    """Answers shape questions about a record's type and instance.

    Type-level queries take the record *type*; instance-level queries and
    mutators take the record itself.
    """

    def list_public_fields(self, record: Any) -> Sequence[str]:
        """Return public field names: declared fields first, then ad hoc ones."""
        ...

    def list_public_callables(self, record_type: type) -> Sequence[str]:
        """Return names of public zero-argument callables, without ``()``."""
        ...

    def has_field(self, record_type: type, name: str) -> bool: ...

    def has_ad_hoc_field(self, record: Any, name: str) -> bool: ...

    def field_visibility(self, record_type: type, name: str) -> Visibility: ...

    def field_is_initialised(self, record: Any, name: str) -> bool: ...

    def field_is_writable(self, record_type: type, name: str) -> bool: ...

    def has_callable(self, record_type: type, name: str) -> bool: ...

    def callable_visibility(self, record_type: type, name: str) -> Visibility: ...

    def invoke_callable(self, record: Any, name: str) -> Any: ...

    def is_canonical_any_type(self, record_type: type) -> bool: ...

    def is_marked_dynamic_extension(self, record_type: type) -> bool: ...

    def has_catch_all_write(self, record_type: type) -> bool: ...

    def has_catch_all_read(self, record_type: type) -> bool: ...

    def get_field(self, record: Any, name: str) -> Any: ...

    def set_field(self, record: Any, name: str, value: Any) -> None: ...

    def delete_field(self, record: Any, name: str) -> None: ...

    def attach_ad_hoc_field(self, record: Any, name: str, value: Any) -> None: ...
