"""Record classes shared by the proxy tests."""
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict

from proxy_lib import allow_dynamic_keys


class SimpleClass:
    public: str = 'public'
    not_initialised: str

    def public_method(self) -> None:
        pass


@allow_dynamic_keys
class ClassWithAllowDynamicProperties:
    pass


class ClassWithMagicMethods:
    """Stores every attribute in a private dict, like a __get/__set pair."""

    def __init__(self) -> None:
        object.__setattr__(self, '_data', {})

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return self._data.get(name)

    def __setattr__(self, name, value):
        self._data[name] = value

    def __delattr__(self, name):
        self._data.pop(name, None)


@dataclass
class Team:
    name: str
    members: List[str] = field(default_factory=list)
    lead: Optional[str] = None
    kind: ClassVar[str] = 'team'

    def size(self) -> int:
        return len(self.members)

    def rename(self, name: str) -> None:
        self.name = name


@dataclass(frozen=True)
class FrozenPoint:
    x: int = 0
    y: int = 0


class SlottedRecord:
    __slots__ = ('id', 'label')

    def __init__(self, id: int) -> None:
        self.id = id


class Account(BaseModel):
    email: str
    pat: Optional[str] = None

    def domain(self) -> str:
        return self.email.split('@')[-1]


class OpenAccount(BaseModel):
    model_config = ConfigDict(extra='allow')

    email: str
